from __future__ import annotations

import atexit
import logging

from apscheduler.schedulers.background import BackgroundScheduler

from .service import AuthService

logger = logging.getLogger(__name__)


def start_session_sweeper(auth_service: AuthService, *, interval_minutes: int) -> BackgroundScheduler:
    """Run `auth_service.sweep` periodically on a daemon thread."""
    scheduler = BackgroundScheduler(daemon=True)
    scheduler.add_job(
        auth_service.sweep,
        trigger="interval",
        minutes=int(interval_minutes),
        id="session_sweep",
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    scheduler.start()
    atexit.register(stop_session_sweeper, scheduler)
    logger.info("Session sweeper started (every %d min)", int(interval_minutes))
    return scheduler


def stop_session_sweeper(scheduler: BackgroundScheduler) -> None:
    if scheduler.running:
        scheduler.shutdown(wait=False)
