from __future__ import annotations

import logging
import uuid

from flask import Flask, request
from werkzeug.exceptions import HTTPException

from ..core.enums import Environment
from .responses import error_response

logger = logging.getLogger(__name__)


def register(app: Flask) -> None:
    def _is_production() -> bool:
        return app.config.get("ENVIRONMENT") == Environment.PRODUCTION

    @app.errorhandler(429)
    def too_many_requests(e):
        return error_response("Too many requests, please try again later", 429)

    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        if e.code is not None and e.code < 400:
            return e
        return error_response(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def unhandled_error(e: Exception):
        request_id = uuid.uuid4().hex[:8]
        logger.exception("Route handler %s failed (requestId=%s)", request.path, request_id)
        message = "Internal server error" if _is_production() else str(e)
        return error_response(message, 500, requestId=request_id)
