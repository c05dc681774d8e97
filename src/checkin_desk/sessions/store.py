from __future__ import annotations

import logging
import secrets
from datetime import timedelta
from typing import Callable, Optional

from ..common.datetime_utils import Clock, now_utc
from .model import Session

logger = logging.getLogger(__name__)

TokenFactory = Callable[[], str]


def generate_token() -> str:
    # 256 bits, hex encoded
    return secrets.token_hex(32)


class SessionStore:
    """In-memory session table.

    Only whole-entry get/put/delete; the sweeper iterates over a snapshot.
    """

    def __init__(self, *, clock: Optional[Clock] = None, token_factory: Optional[TokenFactory] = None):
        self._sessions: dict[str, Session] = {}
        self._clock = clock or now_utc
        self._token_factory = token_factory or generate_token

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, token: str) -> bool:
        return token in self._sessions

    def now(self):
        return self._clock()

    def create(self, username: str) -> Session:
        session = Session(token=self._token_factory(), username=username, last_active=self._clock())
        self._sessions[session.token] = session
        return session

    def get(self, token: str) -> Optional[Session]:
        return self._sessions.get(token)

    def touch(self, token: str) -> None:
        session = self._sessions.get(token)
        if session:
            session.last_active = self._clock()

    def delete(self, token: str) -> bool:
        return self._sessions.pop(token, None) is not None

    def sweep_expired(self, max_idle: timedelta) -> int:
        now = self._clock()
        expired = [t for t, s in list(self._sessions.items()) if now - s.last_active > max_idle]
        for token in expired:
            self._sessions.pop(token, None)
        if expired:
            logger.info("Swept %d expired session(s)", len(expired))
        return len(expired)
