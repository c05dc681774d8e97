from __future__ import annotations

import logging
import re
import time

from flask import Flask, g, request

from .responses import error_response

logger = logging.getLogger(__name__)

_BLOCKED_DIRS = re.compile(r"/(\.git|\.env|node_modules)/")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Content-Security-Policy": "default-src 'self'",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}


def is_restricted_path(path: str) -> bool:
    return (
        path.endswith(".csv")
        or "/data/" in path
        or ".." in path
        or bool(_BLOCKED_DIRS.search(path))
    )


def register(app: Flask) -> None:
    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.before_request
    def block_restricted_paths():
        if is_restricted_path(request.path):
            logger.warning("Blocked access to restricted path: %s", request.path)
            return error_response("Access denied", 403)
        return None

    @app.after_request
    def add_security_headers(response):
        for name, value in SECURITY_HEADERS.items():
            response.headers[name] = value
        response.headers.pop("Server", None)
        return response

    @app.after_request
    def log_request(response):
        started = g.get("request_started")
        ms = int((time.perf_counter() - started) * 1000) if started else 0
        logger.info("%s %s %s - %dms", request.method, request.url, response.status_code, ms)
        if response.status_code in (401, 403):
            logger.warning("Security alert: Unauthorized access attempt - %s %s", request.method, request.url)
        return response
