"""
Infrastructure — cron scheduler (APScheduler BackgroundScheduler).
Jobs run on a thread pool, evaluated against one named timezone calendar.
Fire times come from APScheduler's cron arithmetic, which handles month
ends and DST transitions of the configured zone.
"""

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any, Optional
from zoneinfo import ZoneInfo

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from logging_config import get_logger

logger = get_logger(__name__)

_ONE_MICROSECOND = timedelta(microseconds=1)


class RateScheduler:
    """Owns the background scheduler and the cron triggers registered on it."""

    def __init__(self, timezone: str) -> None:
        self._timezone_name = timezone
        self._tz = ZoneInfo(timezone)
        self._scheduler = BackgroundScheduler(timezone=self._tz)
        self._triggers: dict[str, CronTrigger] = {}
        self._expressions: dict[str, str] = {}

    @property
    def timezone(self) -> str:
        return self._timezone_name

    @property
    def running(self) -> bool:
        return self._scheduler.running

    @property
    def job_ids(self) -> list[str]:
        return list(self._triggers)

    def add_cron_job(
        self,
        job_id: str,
        func: Callable[..., Any],
        expression: str,
        kwargs: Optional[dict[str, Any]] = None,
        misfire_grace_time: Optional[int] = None,
    ) -> None:
        """
        Register ``func`` under ``job_id`` on a standard 5-field crontab expression.

        Overlapping runs of the same job are skipped (max_instances=1) and a
        backlog of missed runs collapses into one (coalesce=True).
        """
        trigger = CronTrigger.from_crontab(expression, timezone=self._tz)
        job_options: dict[str, Any] = {"max_instances": 1, "coalesce": True}
        if misfire_grace_time is not None:
            job_options["misfire_grace_time"] = misfire_grace_time
        self._scheduler.add_job(
            func,
            trigger=trigger,
            id=job_id,
            name=job_id,
            kwargs=kwargs or {},
            replace_existing=True,
            **job_options,
        )
        self._triggers[job_id] = trigger
        self._expressions[job_id] = expression
        logger.info("Scheduled job %s (%s, %s)", job_id, expression, self._timezone_name)

    def expression(self, job_id: str) -> str:
        """Crontab expression of a registered job. Raises KeyError if unknown."""
        return self._expressions[job_id]

    def next_fire_time(self, job_id: str, now: Optional[datetime] = None) -> datetime:
        """
        Next instant ``job_id`` fires strictly after ``now``, in the scheduler's zone.

        ``now`` defaults to the current time; naive values are read as wall
        clock time in the configured zone.

        Raises:
            KeyError: job_id was never registered.
        """
        trigger = self._triggers[job_id]
        if now is None:
            now = datetime.now(self._tz)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=self._tz)
        else:
            now = now.astimezone(self._tz)
        # CronTrigger treats `now` as inclusive
        return trigger.get_next_fire_time(None, now + _ONE_MICROSECOND)

    def start(self) -> None:
        if self._scheduler.running:
            return
        self._scheduler.start()
        logger.info("Scheduler started (%s).", self._timezone_name)

    def shutdown(self, wait: bool = False) -> None:
        """Stop firing jobs; in-flight runs are left to finish unless wait=True."""
        if not self._scheduler.running:
            return
        self._scheduler.shutdown(wait=wait)
        logger.info("Scheduler stopped.")
