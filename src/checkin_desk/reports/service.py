from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import Clock, now_utc
from ..core.enums import AuthFailure
from ..core.exceptions import AuthorizationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: str


class ExportService:
    """Hand out the raw ledger CSV to holders of the export secret."""

    def __init__(self, attendance: AttendanceRepository, *, export_password: Optional[str], clock: Optional[Clock] = None):
        self._attendance = attendance
        self._export_password = export_password or ""
        self._clock = clock or now_utc

    def export(self, password) -> ExportFile:
        if (
            not self._export_password
            or not isinstance(password, str)
            or not hmac.compare_digest(password.encode("utf-8"), self._export_password.encode("utf-8"))
        ):
            raise AuthorizationError("Invalid export password", code=AuthFailure.FORBIDDEN)

        content = self._attendance.read_raw()
        filename = f"mdx_attendance_{self._clock().strftime('%Y-%m-%d')}.csv"
        logger.info("Exported attendance as %s", filename)
        return ExportFile(filename=filename, content=content)
