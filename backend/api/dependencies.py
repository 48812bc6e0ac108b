"""
API dependencies — hand process-scoped singletons to route handlers.
"""

from fastapi import HTTPException, Request, status

from infrastructure.scheduler import RateScheduler


def get_scheduler(request: Request) -> RateScheduler:
    """
    Return the scheduler built during application startup.

    Raises:
        HTTPException: 503 while the scheduler has not been initialised.
    """
    scheduler = getattr(request.app.state, "scheduler", None)
    if scheduler is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Scheduler not initialised",
        )
    return scheduler
