from __future__ import annotations

import hmac
import logging
from datetime import timedelta
from typing import Optional

from werkzeug.security import check_password_hash

from ..core.constants import DEFAULT_SESSION_EXPIRY_HOURS, DEFAULT_SESSION_ROTATION_MINUTES
from ..core.enums import AuthFailure
from ..core.exceptions import AuthenticationError
from .model import AuthResult, LoginResult
from .store import SessionStore

logger = logging.getLogger(__name__)


def _same(a: str, b: str) -> bool:
    return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


class AuthService:
    """Use case: login/logout for the single operator account and session checks."""

    def __init__(
        self,
        store: SessionStore,
        *,
        username: str,
        password: str = "",
        password_hash: Optional[str] = None,
        rotation_after: timedelta = timedelta(minutes=DEFAULT_SESSION_ROTATION_MINUTES),
        expire_after: timedelta = timedelta(hours=DEFAULT_SESSION_EXPIRY_HOURS),
    ):
        self._store = store
        self._username = username
        self._password = password
        self._password_hash = password_hash or None
        self._rotation_after = rotation_after
        self._expire_after = expire_after

    @property
    def expire_after(self) -> timedelta:
        return self._expire_after

    def _password_ok(self, password: str) -> bool:
        if self._password_hash:
            try:
                return check_password_hash(self._password_hash, password)
            except ValueError:
                # e.g. unsupported hash method in config
                logger.error("AUTH_PASSWORD_HASH is not a valid werkzeug hash")
                return False
        return bool(self._password) and _same(password, self._password)

    def login(self, username: str, password: str) -> LoginResult:
        # Evaluate both so timing does not reveal which part was wrong.
        user_ok = _same(username, self._username)
        pass_ok = self._password_ok(password)
        if not (user_ok and pass_ok):
            raise AuthenticationError("Invalid credentials", code=AuthFailure.INVALID_CREDENTIALS)

        session = self._store.create(self._username)
        return LoginResult(
            token=session.token,
            username=session.username,
            expires_at=session.last_active + self._expire_after,
        )

    def authenticate(self, token: str) -> AuthResult:
        session = self._store.get(token) if token else None
        if session is None:
            raise AuthenticationError("Unauthorized: Invalid or expired session", code=AuthFailure.UNAUTHENTICATED)

        idle = self._store.now() - session.last_active
        if idle > self._expire_after:
            self._store.delete(token)
            raise AuthenticationError("Unauthorized: Invalid or expired session", code=AuthFailure.UNAUTHENTICATED)

        if idle > self._rotation_after:
            replacement = self._store.create(session.username)
            self._store.delete(token)
            logger.info("Rotated session for %s", session.username)
            return AuthResult(username=replacement.username, token=replacement.token, rotated=True)

        self._store.touch(token)
        return AuthResult(username=session.username, token=token)

    def logout(self, token: str) -> None:
        self._store.delete(token)

    def sweep(self) -> int:
        return self._store.sweep_expired(self._expire_after)
