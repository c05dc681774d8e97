from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..core.enums import OutcomeCode
from ..roster.model import StudentRecord


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): một dòng trong sổ điểm danh (ledger)."""

    student: StudentRecord
    day1: Optional[str] = None
    day2: Optional[str] = None

    @property
    def student_id(self) -> str:
        return self.student.student_id

    def get_day(self, day: int) -> Optional[str]:
        return self.day1 if day == 1 else self.day2

    def with_day(self, day: int, timestamp: str) -> "AttendanceRecord":
        if day == 1:
            return replace(self, day1=timestamp)
        return replace(self, day2=timestamp)

    def to_row(self) -> list[str]:
        return self.student.to_row() + [self.day1 or "", self.day2 or ""]

    @classmethod
    def from_row(cls, row: list[str]) -> "AttendanceRecord":
        student = StudentRecord.from_row(row[:8])
        return cls(student=student, day1=row[8] or None, day2=row[9] or None)


@dataclass(frozen=True)
class AttendanceOutcome:
    """Kết quả thành công trả về cho controller (RECORDED / ALREADY_RECORDED)."""

    code: OutcomeCode
    student_id: str
    student_name: str
    day: int
    timestamp: str
    message: str

    @property
    def already_scanned(self) -> bool:
        return self.code == OutcomeCode.ALREADY_RECORDED
