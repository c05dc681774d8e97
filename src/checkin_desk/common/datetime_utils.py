from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from ..core.constants import TIMESTAMP_FORMAT

Clock = Callable[[], datetime]


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can inject a fixed clock.
    """
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Format as `YYYY-MM-DD HH:MM:SS` (second precision, space separated)."""
    return value.strftime(TIMESTAMP_FORMAT)
