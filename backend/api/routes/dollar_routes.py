"""
API — dollar rate routes.
Read the observation log and trigger a poll on demand.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlmodel import Session

from api.schemas import DollarRateResponse, ErrorResponse, MessageResponse, PollResponse
from application.rate_service import get_latest_rate, get_rate_history, poll_dollar_rate
from domain.constants import DATABASE_ERROR_MESSAGE, NO_RECORDS_MESSAGE
from domain.entities import DollarRate
from domain.errors import RateFetchError, StorageError
from infrastructure.database import get_session
from logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Dollar"])

_ERROR_RESPONSES = {500: {"model": ErrorResponse}}


def _to_rate_response(rate: DollarRate) -> DollarRateResponse:
    return DollarRateResponse(id=rate.id, average=rate.average, date=rate.date)


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorResponse(error=message).model_dump())


@router.get(
    "/dollar",
    response_model=DollarRateResponse | MessageResponse,
    responses=_ERROR_RESPONSES,
    summary="Latest dollar rate",
)
def get_dollar(session: Session = Depends(get_session)):
    """Newest observation by id; a neutral message when nothing is stored yet."""
    try:
        rate = get_latest_rate(session)
    except StorageError as e:
        logger.error("Failed to read latest dollar rate: %s", e)
        return _error(DATABASE_ERROR_MESSAGE)

    if rate is None:
        return MessageResponse(message=NO_RECORDS_MESSAGE)
    return _to_rate_response(rate)


@router.get(
    "/history",
    response_model=list[DollarRateResponse],
    responses=_ERROR_RESPONSES,
    summary="Full dollar rate history",
)
def get_history(session: Session = Depends(get_session)):
    """Every observation in insertion (id) order. Not paginated."""
    try:
        rates = get_rate_history(session)
    except StorageError as e:
        logger.error("Failed to read dollar rate history: %s", e)
        return _error(str(e))
    return [_to_rate_response(r) for r in rates]


@router.get(
    "/check",
    response_model=PollResponse,
    responses=_ERROR_RESPONSES,
    summary="Poll DolarApi now and store the result",
)
def check_dollar_rate(session: Session = Depends(get_session)):
    """Run one poll synchronously, same logic as the daily job."""
    try:
        result = poll_dollar_rate(session)
    except (RateFetchError, StorageError) as e:
        logger.error("[DolarAPI Error] %s", e)
        return _error(str(e))
    return PollResponse(**result)
