from __future__ import annotations

import csv
import io
import logging
import os
from pathlib import Path
from typing import Mapping

from ..core.constants import ATTENDANCE_COLUMNS
from ..core.exceptions import PersistenceError, StorageError
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


def _render(rows: list[list[str]]) -> str:
    out = io.StringIO()
    writer = csv.writer(out)
    writer.writerows(rows)
    return out.getvalue()


class CsvAttendanceRepository:
    """Attendance ledger stored as a CSV file with a fixed header row."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def temp_path(self) -> Path:
        return self._path.with_name(self._path.name + ".temp")

    def ensure_exists(self) -> bool:
        """Create the ledger with just a header row. Returns True if created."""
        if self._path.exists():
            return False

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(_render([list(ATTENDANCE_COLUMNS)]), encoding="utf-8", newline="")
        except OSError as e:
            raise PersistenceError("Failed to create attendance file") from e

        logger.info("Created %s", self._path)
        return True

    def load(self) -> dict[str, AttendanceRecord]:
        try:
            with self._path.open("r", newline="", encoding="utf-8-sig") as f:
                rows = list(csv.reader(f))
        except (OSError, csv.Error) as e:
            logger.error("Reading attendance data failed: %s", e)
            raise StorageError("Failed to read attendance data") from e

        records: dict[str, AttendanceRecord] = {}
        for line_no, row in enumerate(rows[1:], start=2):
            if not row:
                continue
            if len(row) != len(ATTENDANCE_COLUMNS):
                logger.error(
                    "Malformed attendance row %d in %s: expected %d fields, got %d",
                    line_no,
                    self._path,
                    len(ATTENDANCE_COLUMNS),
                    len(row),
                )
                raise StorageError("Failed to read attendance data")

            record = AttendanceRecord.from_row(row)
            records[record.student_id] = record

        return records

    def save(self, records: Mapping[str, AttendanceRecord]) -> None:
        rows = [list(ATTENDANCE_COLUMNS)]
        rows.extend(r.to_row() for r in records.values())

        # Write to a temp file first, then rename so readers never see a partial file.
        tmp = self.temp_path
        try:
            with tmp.open("w", newline="", encoding="utf-8") as f:
                csv.writer(f).writerows(rows)
            os.replace(tmp, self._path)
        except OSError as e:
            logger.error("Writing attendance data failed: %s", e)
            try:
                tmp.unlink()
            except FileNotFoundError:
                pass
            except OSError:
                logger.warning("Could not remove temp file %s", tmp)
            raise PersistenceError("Failed to save attendance data") from e

    def read_raw(self) -> str:
        try:
            return self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError("Failed to read attendance data") from e
