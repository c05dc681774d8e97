from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Mapping, Optional

from .attendance.csv_attendance_repository import CsvAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import Clock
from .reports.service import ExportService
from .roster.csv_roster_repository import CsvRosterRepository
from .sessions.service import AuthService
from .sessions.store import SessionStore, TokenFactory


@dataclass(frozen=True)
class Container:
    roster_repo: CsvRosterRepository
    attendance_repo: CsvAttendanceRepository
    session_store: SessionStore

    auth_service: AuthService
    attendance_service: AttendanceService
    export_service: ExportService


def build_container(
    *,
    settings: Mapping,
    clock: Optional[Clock] = None,
    token_factory: Optional[TokenFactory] = None,
) -> Container:
    roster_repo = CsvRosterRepository(
        settings["STUDENT_DATA_FILE"],
        ttl_seconds=int(settings["ROSTER_CACHE_TTL_SECONDS"]),
        clock=clock,
    )
    attendance_repo = CsvAttendanceRepository(settings["ATTENDANCE_FILE"])
    session_store = SessionStore(clock=clock, token_factory=token_factory)

    auth_service = AuthService(
        session_store,
        username=str(settings["AUTH_USERNAME"]),
        password=str(settings.get("AUTH_PASSWORD") or ""),
        password_hash=settings.get("AUTH_PASSWORD_HASH") or None,
        rotation_after=timedelta(minutes=int(settings["SESSION_ROTATION_MINUTES"])),
        expire_after=timedelta(hours=int(settings["SESSION_EXPIRY_HOURS"])),
    )
    attendance_service = AttendanceService(attendance_repo, roster_repo, clock=clock)
    export_service = ExportService(attendance_repo, export_password=settings.get("EXPORT_PASSWORD"), clock=clock)

    return Container(
        roster_repo=roster_repo,
        attendance_repo=attendance_repo,
        session_store=session_store,
        auth_service=auth_service,
        attendance_service=attendance_service,
        export_service=export_service,
    )
