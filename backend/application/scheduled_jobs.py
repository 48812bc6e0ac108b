"""
Application — background jobs and the scheduler that runs them.

Each job body is its own error boundary: whatever goes wrong is logged and
swallowed there, so one failing job never stops the other job, the
scheduler, or the HTTP surface.
"""

from sqlalchemy.engine import Engine
from sqlmodel import Session

from application.rate_service import poll_dollar_rate, run_health_check
from domain.constants import (
    HEALTH_CHECK_CRON,
    HEALTH_CHECK_JOB_ID,
    HEALTH_CHECK_MISFIRE_GRACE_SECONDS,
    RATE_POLL_CRON,
    RATE_POLL_JOB_ID,
    RATE_POLL_MISFIRE_GRACE_SECONDS,
)
from domain.errors import HealthCheckError
from infrastructure.scheduler import RateScheduler
from logging_config import get_logger

logger = get_logger(__name__)


def run_scheduled_poll(engine: Engine) -> bool:
    """Daily poll. No retry: a failed run leaves no row for that day."""
    try:
        with Session(engine) as session:
            result = poll_dollar_rate(session)
    except Exception as e:
        logger.error("Scheduled dollar rate poll failed: %s", e, exc_info=True)
        return False
    logger.info("Cron running: dollar rate %s stored at %s", result["average"], result["date"])
    return True


def run_scheduled_health_check(base_url: str) -> bool:
    """Minute-level self ping. The outcome is only logged."""
    logger.info("Running health check...")
    try:
        run_health_check(base_url)
    except HealthCheckError as e:
        logger.error("Health check fail: %s (%s)", e, e.url)
        return False
    except Exception as e:
        logger.error("Health check fail: %s", e, exc_info=True)
        return False
    return True


def build_scheduler(engine: Engine, base_url: str, timezone: str) -> RateScheduler:
    """Create the scheduler with the daily poll and the health check registered (not started)."""
    scheduler = RateScheduler(timezone)
    scheduler.add_cron_job(
        RATE_POLL_JOB_ID,
        run_scheduled_poll,
        RATE_POLL_CRON,
        kwargs={"engine": engine},
        misfire_grace_time=RATE_POLL_MISFIRE_GRACE_SECONDS,
    )
    scheduler.add_cron_job(
        HEALTH_CHECK_JOB_ID,
        run_scheduled_health_check,
        HEALTH_CHECK_CRON,
        kwargs={"base_url": base_url},
        misfire_grace_time=HEALTH_CHECK_MISFIRE_GRACE_SECONDS,
    )
    logger.info("Cron job set to run daily at 9:15 AM (%s)", timezone)
    return scheduler
