from __future__ import annotations

from typing import Mapping, Protocol

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def load(self) -> dict[str, AttendanceRecord]:
        """Parse the whole ledger; never cached."""

        raise NotImplementedError

    def save(self, records: Mapping[str, AttendanceRecord]) -> None:
        """Replace the whole ledger atomically."""

        raise NotImplementedError

    def ensure_exists(self) -> bool:
        raise NotImplementedError

    def read_raw(self) -> str:
        raise NotImplementedError
