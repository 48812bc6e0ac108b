"""
Dollar BCV — FastAPI application entry point.
Builds the app, registers routes, manages the lifecycle
(store initialisation, scheduler start/stop, connection release).
Business logic lives in application/.
"""

from dotenv import load_dotenv

# .env must be loaded before any project import: database and logging read env at import time
load_dotenv()

from collections.abc import AsyncGenerator  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402

from fastapi import FastAPI  # noqa: E402

from api.routes.cron_routes import router as cron_router  # noqa: E402
from api.routes.dollar_routes import router as dollar_router  # noqa: E402
from api.schemas import HealthResponse  # noqa: E402
from config.settings import get_port, init_settings  # noqa: E402
from domain import constants  # noqa: E402
from domain.constants import HEALTH_PATH, HEALTH_STATUS_OK, RATE_POLL_JOB_ID, SERVICE_NAME  # noqa: E402
from domain.formatters import format_capture_timestamp  # noqa: E402
from logging_config import get_logger  # noqa: E402

init_settings()

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Lifespan: store + scheduler singletons
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from application.scheduled_jobs import build_scheduler
    from infrastructure.database import create_db_and_tables, dispose_engine, engine

    logger.info("Dollar BCV service starting — initialising database...")
    # Schema failures abort startup
    create_db_and_tables()
    logger.info("Connected to the SQLite database.")

    scheduler = build_scheduler(
        engine,
        base_url=constants.EXTERNAL_URL,
        timezone=constants.SCHEDULER_TIMEZONE,
    )
    app.state.scheduler = scheduler
    if constants.SCHEDULER_ENABLED:
        scheduler.start()
        logger.info(
            "Next dollar rate poll at %s",
            scheduler.next_fire_time(RATE_POLL_JOB_ID).isoformat(),
        )
    else:
        logger.info("Scheduler disabled (SCHEDULER_ENABLED=false); jobs will not run.")

    yield

    logger.info("Dollar BCV service shutting down...")
    # In-flight jobs are not awaited
    scheduler.shutdown(wait=False)
    dispose_engine()


# ---------------------------------------------------------------------------
# App Factory
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Dollar BCV API",
    description="Daily official dollar rate (DolarApi) — latest value and history",
    version="1.0.0",
    lifespan=lifespan,
)


# ---------------------------------------------------------------------------
# Health Check
# ---------------------------------------------------------------------------


@app.get(HEALTH_PATH, response_model=HealthResponse, summary="Health check")
def health_check() -> HealthResponse:
    """Liveness probe; also the target of the minute-level self health check."""
    return HealthResponse(
        status=HEALTH_STATUS_OK,
        timestamp=format_capture_timestamp(),
        service=SERVICE_NAME,
    )


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

app.include_router(dollar_router)
app.include_router(cron_router)


if __name__ == "__main__":
    import uvicorn

    port = get_port()
    logger.info("Server running in port: %s", port)
    uvicorn.run(app, host="0.0.0.0", port=port)
