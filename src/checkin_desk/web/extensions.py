from __future__ import annotations

import logging
import re
from typing import Mapping

from flask import Flask
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from ..core.constants import NEW_SESSION_HEADER
from ..core.enums import Environment

logger = logging.getLogger(__name__)

_ANY_HOST = {"", "0.0.0.0", "::"}


def cors_origins(settings: Mapping) -> list:
    """Allowed origins for /api/*.

    Development accepts every origin. Production accepts ALLOWED_ORIGINS plus
    any port on the configured HOST.
    """
    if settings.get("ENVIRONMENT") != Environment.PRODUCTION:
        return ["*"]

    origins: list = list(settings.get("ALLOWED_ORIGINS") or [])
    host = str(settings.get("HOST") or "")
    if host not in _ANY_HOST:
        origins.append(re.compile(rf"^https?://{re.escape(host)}(:\d+)?$"))
    return origins


def init_cors(app: Flask) -> None:
    origins = cors_origins(app.config)
    CORS(
        app,
        resources={r"/api/*": {"origins": origins}},
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Requested-With", "Accept", "Origin"],
        expose_headers=[NEW_SESSION_HEADER],
        supports_credentials=True,
        max_age=3600,
    )
    logger.debug("CORS origins: %s", origins)


def init_limiter(app: Flask) -> Limiter:
    # Reads RATELIMIT_DEFAULT / RATELIMIT_ENABLED / RATELIMIT_STORAGE_URI from app.config.
    return Limiter(key_func=get_remote_address, app=app)
