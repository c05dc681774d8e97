from __future__ import annotations

import logging
import math

from flask import Flask, current_app, jsonify

from ..container import Container
from ..core.enums import Environment
from ..core.exceptions import AuthorizationError, NotFoundError, StorageError, ValidationError
from ..sessions.controller import make_session_required
from ..web.responses import error_response, json_body

logger = logging.getLogger(__name__)


def coerce_day(raw):
    """Numeric coercion for the `day` field; missing, zero or non-numeric means day 1."""
    if raw is None or isinstance(raw, bool):
        return 1
    if isinstance(raw, int):
        # Passed through as-is; out-of-range ints are rejected by the service.
        return raw or 1
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 1
    if math.isnan(value) or value == 0:
        return 1
    return int(value) if value.is_integer() else value


def register(app: Flask, container: Container) -> None:
    session_required = make_session_required(container)

    def _storage_message(e: Exception, generic: str) -> str:
        if current_app.config.get("ENVIRONMENT") == Environment.PRODUCTION:
            return generic
        return f"Server error: {e}"

    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance")
    @session_required
    def record_attendance():
        body = json_body()
        student_id = body.get("studentId")
        if not student_id:
            return error_response("Student ID is required", 400)

        try:
            outcome = container.attendance_service.record(student_id, coerce_day(body.get("day")))
        except ValidationError as e:
            return error_response(str(e), 400, code=e.code)
        except NotFoundError as e:
            return error_response(str(e), 404, code=e.code)
        except StorageError as e:
            # PersistenceError carries PERSIST_ERROR; read failures have no code.
            logger.error("Recording attendance failed: %s", e)
            return error_response(
                _storage_message(e, "Server error occurred while recording attendance"),
                500,
                code=e.code,
            )

        return jsonify(
            {
                "success": True,
                "code": outcome.code.value,
                "alreadyScanned": outcome.already_scanned,
                "studentName": outcome.student_name,
                "message": outcome.message,
                "timestamp": outcome.timestamp,
            }
        )

    @app.route("/api/export", methods=["POST"], endpoint="api_export")
    @session_required
    def export_attendance():
        body = json_body()
        try:
            export = container.export_service.export(body.get("password"))
        except AuthorizationError as e:
            return error_response(str(e), 403)
        except StorageError as e:
            logger.error("Exporting attendance failed: %s", e)
            return error_response(_storage_message(e, "Failed to export attendance data"), 500)

        return app.response_class(
            export.content,
            mimetype="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
        )
