"""
Domain — error taxonomy for polling, storage and the self health check.
"""

from typing import Optional


class RateFetchError(Exception):
    """Fetching the rate from the upstream API failed."""


class UpstreamError(RateFetchError):
    """Upstream answered with a non-200 status or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(RateFetchError):
    """Upstream body was not JSON or lacked a numeric average."""


class StorageError(Exception):
    """Reading from or writing to the observation store failed."""


class HealthCheckError(Exception):
    """The self health check request failed."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url
