from __future__ import annotations

import re

from ..core.constants import STUDENT_ID_PATTERN, VALID_DAYS
from ..core.enums import OutcomeCode
from ..core.exceptions import ValidationError

_STUDENT_ID_RE = re.compile(STUDENT_ID_PATTERN, re.ASCII)


def is_valid_student_id(value: str) -> bool:
    # Case-sensitive: "m12345678" is rejected.
    return bool(_STUDENT_ID_RE.fullmatch(value))


def require_student_id(value) -> str:
    if not value or not isinstance(value, str):
        raise ValidationError("Invalid student ID", code=OutcomeCode.INVALID_INPUT)

    student_id = value.strip()
    if not is_valid_student_id(student_id):
        raise ValidationError(
            "Invalid Student ID format. Must be M followed by 8 digits.",
            code=OutcomeCode.INVALID_FORMAT,
        )
    return student_id


def require_day(value) -> int:
    if isinstance(value, bool) or value not in VALID_DAYS:
        raise ValidationError("Day must be 1 or 2", code=OutcomeCode.INVALID_DAY)
    return int(value)
