from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import Clock, format_timestamp, now_utc
from ..common.validators import require_day, require_student_id
from ..core.enums import OutcomeCode
from ..core.exceptions import NotFoundError, PersistenceError
from ..roster.repository import RosterRepository
from .model import AttendanceOutcome, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: record a scanned student against the roster.

    First scan for a day wins; later scans for the same day report the
    original timestamp and do not rewrite the ledger.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        roster: RosterRepository,
        *,
        clock: Optional[Clock] = None,
    ):
        self._attendance = attendance
        self._roster = roster
        self._clock = clock or now_utc

    def record(self, student_id, day) -> AttendanceOutcome:
        student_id = require_student_id(student_id)
        day = require_day(day)

        students = self._roster.load()
        student = students.get(student_id)
        if student is None:
            raise NotFoundError(f"Student ID {student_id} not found in database.", code=OutcomeCode.NOT_FOUND)

        ledger = self._attendance.load()
        timestamp = format_timestamp(self._clock())
        name = student.display_name

        existing = ledger.get(student_id)
        if existing is None:
            ledger[student_id] = AttendanceRecord(student=student).with_day(day, timestamp)
        else:
            recorded_at = existing.get_day(day)
            if recorded_at:
                return AttendanceOutcome(
                    code=OutcomeCode.ALREADY_RECORDED,
                    student_id=student_id,
                    student_name=name,
                    day=day,
                    timestamp=recorded_at,
                    message=f"{name} was already scanned for Day {day} at {recorded_at}.",
                )
            ledger[student_id] = existing.with_day(day, timestamp)

        try:
            self._attendance.save(ledger)
        except PersistenceError as e:
            raise PersistenceError(str(e), code=OutcomeCode.PERSIST_ERROR) from e

        logger.info("Recorded %s for day %d at %s", student_id, day, timestamp)
        return AttendanceOutcome(
            code=OutcomeCode.RECORDED,
            student_id=student_id,
            student_name=name,
            day=day,
            timestamp=timestamp,
            message=f"Attendance recorded for {name} on Day {day}.",
        )
