"""
Config — override domain constants from environment variables.
Call init_settings() once at application startup.
"""

import os

from domain import constants

_FALSE_VALUES = {"0", "false", "no", "off"}


def init_settings() -> None:
    """Override domain constants from environment. Call once at startup."""
    external_url = os.getenv("RENDER_EXTERNAL_URL")
    if external_url:
        constants.EXTERNAL_URL = external_url.rstrip("/")
    else:
        # Self health check must dial the port the server actually listens on
        constants.EXTERNAL_URL = f"http://localhost:{get_port()}"

    timezone = os.getenv("SCHEDULER_TIMEZONE")
    if timezone:
        constants.SCHEDULER_TIMEZONE = timezone

    api_url = os.getenv("DOLAR_API_URL")
    if api_url:
        constants.DOLAR_API_URL = api_url

    enabled = os.getenv("SCHEDULER_ENABLED")
    if enabled is not None:
        constants.SCHEDULER_ENABLED = enabled.strip().lower() not in _FALSE_VALUES


def get_port() -> int:
    """Listen port; PORT env var wins over the fixed default."""
    return int(os.getenv("PORT", str(constants.DEFAULT_PORT)))
