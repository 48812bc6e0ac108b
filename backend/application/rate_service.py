"""
Application — dollar rate use cases.
Composes the DolarApi fetcher with the observation store, and runs the
self health check. Storage failures are re-raised as StorageError.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from domain.constants import POLL_SUCCESS_STATUS
from domain.entities import DollarRate
from domain.errors import StorageError
from domain.formatters import format_capture_timestamp
from infrastructure.external.dolar_api import fetch_rate
from infrastructure.external.self_ping import ping_health
from infrastructure.repositories import find_all_rates, find_latest_rate, insert_rate
from logging_config import get_logger

logger = get_logger(__name__)


def poll_dollar_rate(session: Session) -> dict:
    """
    One poll: fetch the current average and append it with a capture timestamp.

    Nothing is written when the fetch fails.

    Returns:
        {"status": "success", "average": float, "date": str}

    Raises:
        RateFetchError: upstream or parse failure.
        StorageError: the insert failed.
    """
    average = fetch_rate()
    captured_at = format_capture_timestamp()
    try:
        rate = insert_rate(session, average=average, date=captured_at)
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageError(f"Failed to store dollar rate: {e}") from e

    logger.info("Dollar rate stored: id=%s average=%s date=%s", rate.id, rate.average, rate.date)
    return {"status": POLL_SUCCESS_STATUS, "average": rate.average, "date": rate.date}


def get_latest_rate(session: Session) -> DollarRate | None:
    """Newest observation by id, or None when nothing has been stored yet."""
    try:
        return find_latest_rate(session)
    except SQLAlchemyError as e:
        raise StorageError(str(e)) from e


def get_rate_history(session: Session) -> list[DollarRate]:
    """All observations in insertion order."""
    try:
        return find_all_rates(session)
    except SQLAlchemyError as e:
        raise StorageError(str(e)) from e


def run_health_check(base_url: str | None = None) -> int:
    """
    Ping this service's own /health endpoint over HTTP.

    Returns the HTTP status code; raises HealthCheckError when unreachable.
    """
    status_code = ping_health(base_url)
    logger.info("Health check success (HTTP %s)", status_code)
    return status_code
