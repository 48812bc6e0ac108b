"""
Domain — constants in one place.
Avoids magic numbers / magic strings scattered across modules.
Values marked as overridable are replaced by config.settings.init_settings().
"""

# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------
SERVICE_NAME = "dolar-api-cron"
DEFAULT_PORT = 8080
DEFAULT_EXTERNAL_URL = f"http://localhost:{DEFAULT_PORT}"
EXTERNAL_URL = DEFAULT_EXTERNAL_URL  # overridable: RENDER_EXTERNAL_URL, else follows PORT

# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------
DOLLAR_TABLE_NAME = "dollar_bcv"
DEFAULT_DATABASE_URL = "sqlite:///db/data.db"

# ---------------------------------------------------------------------------
# Upstream rate API (DolarApi Venezuela)
# ---------------------------------------------------------------------------
DOLAR_API_URL = "https://ve.dolarapi.com/v1/dolares/oficial"  # overridable
DOLAR_API_AVERAGE_FIELD = "promedio"
DOLAR_API_EXPECTED_STATUS = 200
# None keeps the transport default (no client-side timeout)
DOLAR_API_REQUEST_TIMEOUT: float | None = None

# ---------------------------------------------------------------------------
# Self health check
# ---------------------------------------------------------------------------
HEALTH_PATH = "/health"
HEALTH_STATUS_OK = "ok"
HEALTH_CHECK_REQUEST_TIMEOUT: float | None = None

# ---------------------------------------------------------------------------
# Scheduler
# ---------------------------------------------------------------------------
SCHEDULER_TIMEZONE = "America/Caracas"  # overridable
SCHEDULER_ENABLED = True  # overridable: SCHEDULER_ENABLED=false

RATE_POLL_JOB_ID = "dollar_rate_poll"
RATE_POLL_CRON = "15 9 * * *"
RATE_POLL_DESCRIPTION = "Runs daily at 9:15 AM"
# A poll that fires late (process paused, host asleep) still runs within this window
RATE_POLL_MISFIRE_GRACE_SECONDS = 3600

HEALTH_CHECK_JOB_ID = "self_health_check"
HEALTH_CHECK_CRON = "* * * * *"
HEALTH_CHECK_MISFIRE_GRACE_SECONDS = 30

# ---------------------------------------------------------------------------
# API messages
# ---------------------------------------------------------------------------
NO_RECORDS_MESSAGE = "No hay registros"
DATABASE_ERROR_MESSAGE = "Database error"
POLL_SUCCESS_STATUS = "success"
