from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify

from ..common.datetime_utils import Clock, now_utc


def register(app: Flask, *, clock: Optional[Clock] = None) -> None:
    clock = clock or now_utc

    @app.route("/api/health", methods=["GET"], endpoint="api_health")
    def health():
        return jsonify(
            {
                "status": "ok",
                "timestamp": clock().isoformat(),
                "environment": app.config.get("ENVIRONMENT"),
            }
        )
