"""
Infrastructure — self health check over real HTTP.
Dials the service's own /health through its externally reachable base URL,
so it exercises the network path rather than an in-process call.
"""

from typing import Optional

import requests as http_requests

from domain import constants
from domain.constants import HEALTH_PATH
from domain.errors import HealthCheckError


def build_health_url(base_url: Optional[str] = None) -> str:
    """Join the base URL and the health path without doubling slashes."""
    base_url = (base_url or constants.EXTERNAL_URL).rstrip("/")
    return f"{base_url}{HEALTH_PATH}"


def ping_health(base_url: Optional[str] = None) -> int:
    """
    GET {base_url}/health once.

    Any HTTP answer counts as reachable; the status code is returned so the
    caller can log it.

    Raises:
        HealthCheckError: the request could not be completed.
    """
    url = build_health_url(base_url)
    try:
        response = http_requests.get(url, timeout=constants.HEALTH_CHECK_REQUEST_TIMEOUT)
    except http_requests.RequestException as e:
        raise HealthCheckError(str(e), url=url) from e
    return response.status_code
