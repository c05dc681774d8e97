from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, g, jsonify, request

from ..container import Container
from ..core.constants import NEW_SESSION_HEADER, SESSION_HEADER_PREFIX
from ..core.exceptions import AuthenticationError
from ..web.responses import error_response, json_body

logger = logging.getLogger(__name__)


def _session_token() -> str | None:
    header = request.headers.get("Authorization", "")
    if not header.startswith(SESSION_HEADER_PREFIX):
        return None
    token = header[len(SESSION_HEADER_PREFIX):].strip()
    return token or None


def make_session_required(container: Container):
    """Build the `@session_required` decorator bound to this container's AuthService."""

    def session_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = _session_token()
            if not token:
                return error_response("Unauthorized: No valid session provided", 401)

            try:
                auth = container.auth_service.authenticate(token)
            except AuthenticationError as e:
                return error_response(str(e), 401)

            g.session_user = auth.username
            g.session_token = auth.token
            if auth.rotated:
                # Relayed by the after_request hook, which also sees error responses.
                g.rotated_session = auth.token

            return view(*args, **kwargs)

        return wrapper

    return session_required


def register(app: Flask, container: Container) -> None:
    session_required = make_session_required(container)

    @app.after_request
    def relay_rotated_session(response):
        token = g.get("rotated_session")
        if token and token in container.session_store:
            response.headers[NEW_SESSION_HEADER] = token
        return response

    @app.route("/api/login", methods=["POST"], endpoint="api_login")
    def login():
        body = json_body()
        username = body.get("username")
        password = body.get("password")

        if not username or not password or not isinstance(username, str) or not isinstance(password, str):
            return error_response("Username and password are required", 400)

        logger.info("Login attempt for user: %s", username)
        try:
            result = container.auth_service.login(username, password)
        except AuthenticationError as e:
            logger.info("Login failed: invalid credentials")
            return error_response(str(e), 401)

        logger.info("Login successful, session created")
        return jsonify(
            {
                "success": True,
                "sessionId": result.token,
                "expiresAt": result.expires_at.isoformat(),
                "user": {"username": result.username},
            }
        )

    @app.route("/api/logout", methods=["POST"], endpoint="api_logout")
    @session_required
    def logout():
        container.auth_service.logout(g.session_token)
        return jsonify({"success": True, "message": "Logged out successfully"})
