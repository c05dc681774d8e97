from __future__ import annotations

from enum import Enum
from typing import Optional

from flask import jsonify, request


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error_response(message: str, status: int, *, code: Optional[Enum] = None, **extra):
    payload = {"success": False, "message": message}
    if code is not None:
        payload["code"] = code.value
    payload.update(extra)
    return jsonify(payload), status
