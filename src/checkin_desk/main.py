from __future__ import annotations

import importlib
import logging
import signal
import sys
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.datetime_utils import Clock
from .common.logging import setup_logging
from .container import build_container
from .core.exceptions import StartupError, StorageError
from .sessions.controller import register as register_sessions
from .sessions.store import TokenFactory
from .sessions.sweeper import start_session_sweeper, stop_session_sweeper
from .web import errors, health, security
from .web.extensions import init_cors, init_limiter

logger = logging.getLogger(__name__)


def _ensure_data_files(container) -> None:
    """Ledger is created on demand; a missing roster is fatal."""
    try:
        if container.attendance_repo.ensure_exists():
            logger.info("Created attendance ledger at %s", container.attendance_repo.path)
    except StorageError as e:
        raise StartupError(f"Cannot create {container.attendance_repo.path}: {e}") from e

    if not container.roster_repo.exists():
        raise StartupError(
            f"{container.roster_repo.path} not found. Please create this file with student data."
        )


def create_app(
    overrides: Optional[dict] = None,
    *,
    clock: Optional[Clock] = None,
    token_factory: Optional[TokenFactory] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config.from_object(settings)
    if overrides:
        app.config.update(overrides)

    setup_logging(app.config.get("LOG_LEVEL", "INFO"), app.config.get("LOG_FILE"))
    logger.info("Starting server in %s environment (settings=%s)", app.config["ENVIRONMENT"], settings_module)

    if not app.config.get("AUTH_USERNAME") or not (
        app.config.get("AUTH_PASSWORD") or app.config.get("AUTH_PASSWORD_HASH")
    ):
        raise StartupError("AUTH_USERNAME and AUTH_PASSWORD must be set")

    container = build_container(settings=app.config, clock=clock, token_factory=token_factory)
    _ensure_data_files(container)
    app.extensions["checkin_desk"] = container

    security.register(app)
    errors.register(app)
    init_cors(app)
    init_limiter(app)

    register_sessions(app, container)
    register_attendance(app, container)
    health.register(app, clock=clock)

    if app.config.get("SESSION_SWEEP_ENABLED", True):
        app.extensions["session_sweeper"] = start_session_sweeper(
            container.auth_service,
            interval_minutes=app.config["SESSION_SWEEP_INTERVAL_MINUTES"],
        )

    return app


def _install_shutdown_handlers(app: Flask) -> None:
    def _shutdown(signum, frame):
        logger.info("Shutting down server gracefully...")
        scheduler = app.extensions.get("session_sweeper")
        if scheduler is not None:
            stop_session_sweeper(scheduler)
        logger.info("Server shutdown complete")
        sys.exit(0)

    signal.signal(signal.SIGINT, _shutdown)
    signal.signal(signal.SIGTERM, _shutdown)


def main() -> None:
    try:
        app = create_app()
    except StartupError as e:
        logging.getLogger("checkin_desk").error("Error: %s", e)
        sys.exit(1)

    _install_shutdown_handlers(app)
    host = app.config["HOST"]
    port = int(app.config["PORT"])
    logger.info("Server listening on %s:%d", host, port)
    app.run(host=host, port=port, debug=False, use_reloader=False)


if __name__ == "__main__":
    main()
