"""
Infrastructure — DolarApi (ve.dolarapi.com) adapter.
One GET per call: no retry, no cache, no client-side timeout unless configured.
Every failure surfaces as a RateFetchError subclass with the cause chained.
"""

from typing import Optional

import requests as http_requests

from domain import constants
from domain.constants import DOLAR_API_EXPECTED_STATUS
from domain.errors import ParseError, UpstreamError
from domain.formatters import parse_average
from logging_config import get_logger

logger = get_logger(__name__)


def fetch_rate(url: Optional[str] = None) -> float:
    """
    Fetch the official average dollar rate.

    Args:
        url: Upstream endpoint; defaults to the configured DOLAR_API_URL.

    Returns:
        The ``promedio`` field as a float.

    Raises:
        UpstreamError: transport failure or any status other than 200.
        ParseError: body is not JSON or has no numeric ``promedio``.
    """
    url = url or constants.DOLAR_API_URL
    try:
        response = http_requests.get(url, timeout=constants.DOLAR_API_REQUEST_TIMEOUT)
    except http_requests.RequestException as e:
        raise UpstreamError(f"DolarApi request failed: {e}") from e

    if response.status_code != DOLAR_API_EXPECTED_STATUS:
        raise UpstreamError(
            f"API responded with status: {response.status_code}",
            status_code=response.status_code,
        )

    try:
        payload = response.json()
    except ValueError as e:
        raise ParseError(f"DolarApi returned a non-JSON body: {e}") from e

    average = parse_average(payload)
    if average < 0:
        logger.warning("DolarApi returned a negative average: %s", average)
    logger.debug("DolarApi average fetched: %s", average)
    return average
