"""
API — scheduler introspection.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_scheduler
from api.schemas import CronStatusResponse
from domain.constants import RATE_POLL_DESCRIPTION, RATE_POLL_JOB_ID
from domain.formatters import format_capture_timestamp
from infrastructure.scheduler import RateScheduler

router = APIRouter(tags=["Scheduler"])


@router.get(
    "/cron-status",
    response_model=CronStatusResponse,
    summary="Next run of the daily dollar rate poll",
)
def get_cron_status(
    scheduler: RateScheduler = Depends(get_scheduler),
) -> CronStatusResponse:
    """Purely informational; has no side effect on the schedule."""
    return CronStatusResponse(
        nextExecution=format_capture_timestamp(scheduler.next_fire_time(RATE_POLL_JOB_ID)),
        cronExpression=scheduler.expression(RATE_POLL_JOB_ID),
        timezone=scheduler.timezone,
        description=RATE_POLL_DESCRIPTION,
    )
