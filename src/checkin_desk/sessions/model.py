from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Session:
    """Phiên đăng nhập trong bộ nhớ (mất khi khởi động lại tiến trình)."""

    token: str
    username: str
    last_active: datetime


@dataclass(frozen=True)
class LoginResult:
    token: str
    username: str
    expires_at: datetime


@dataclass(frozen=True)
class AuthResult:
    """What a guarded request learns about its caller.

    `rotated` is True when `token` replaces the one the client sent.
    """

    username: str
    token: str
    rotated: bool = False

    @property
    def new_token(self) -> Optional[str]:
        return self.token if self.rotated else None
