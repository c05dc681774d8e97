from __future__ import annotations

from typing import Mapping, Protocol

from .model import StudentRecord


class RosterRepository(Protocol):
    """Giao diện repository cho roster (chỉ đọc).

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp file CSV.
    """

    def load(self) -> Mapping[str, StudentRecord]:
        raise NotImplementedError
