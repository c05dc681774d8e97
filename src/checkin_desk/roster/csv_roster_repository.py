from __future__ import annotations

import csv
import logging
from datetime import datetime, timedelta
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from ..common.datetime_utils import Clock, now_utc
from ..core.constants import DEFAULT_ROSTER_CACHE_TTL_SECONDS, ROSTER_COLUMNS
from ..core.exceptions import StorageError
from .model import StudentRecord

logger = logging.getLogger(__name__)


class CsvRosterRepository:
    """Roster backed by an externally maintained CSV file.

    The parsed mapping is cached for `ttl_seconds`; within that window `load()`
    does not touch the file.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        ttl_seconds: int = DEFAULT_ROSTER_CACHE_TTL_SECONDS,
        clock: Optional[Clock] = None,
    ):
        self._path = Path(path)
        self._ttl = timedelta(seconds=int(ttl_seconds))
        self._clock = clock or now_utc
        self._cache: Optional[Mapping[str, StudentRecord]] = None
        self._loaded_at: Optional[datetime] = None

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> Mapping[str, StudentRecord]:
        now = self._clock()
        if self._cache is not None and self._loaded_at is not None and now - self._loaded_at < self._ttl:
            return self._cache

        students = self._read()
        self._cache = MappingProxyType(students)
        self._loaded_at = now
        logger.info("Loaded %d students from %s", len(students), self._path)
        return self._cache

    def _read(self) -> dict[str, StudentRecord]:
        try:
            with self._path.open("r", newline="", encoding="utf-8-sig") as f:
                rows = list(csv.reader(f))
        except (OSError, csv.Error) as e:
            logger.error("Reading student data failed: %s", e)
            raise StorageError("Failed to read student data") from e

        students: dict[str, StudentRecord] = {}
        # First row is the header; columns are positional.
        for line_no, row in enumerate(rows[1:], start=2):
            if not row:
                continue
            if len(row) != len(ROSTER_COLUMNS):
                logger.error(
                    "Malformed roster row %d in %s: expected %d fields, got %d",
                    line_no,
                    self._path,
                    len(ROSTER_COLUMNS),
                    len(row),
                )
                raise StorageError("Failed to read student data")

            student = StudentRecord.from_row(row)
            if student.student_id in students:
                logger.warning("Duplicate student id %s in roster (line %d)", student.student_id, line_no)
            students[student.student_id] = student

        return students
