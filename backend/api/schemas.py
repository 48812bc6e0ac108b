"""
API — Pydantic response schemas.
HTTP-layer validation and serialisation only, no business logic.
Field names follow the public JSON contract (hence camelCase on /cron-status).
"""

from pydantic import BaseModel


class DollarRateResponse(BaseModel):
    """One stored observation."""

    id: int
    average: float
    date: str


class MessageResponse(BaseModel):
    """Neutral informational reply (e.g. empty store on GET /dollar)."""

    message: str


class ErrorResponse(BaseModel):
    """Body of every 500 reply."""

    error: str


class PollResponse(BaseModel):
    """GET /check reply after a successful fetch-and-store."""

    status: str
    average: float
    date: str


class CronStatusResponse(BaseModel):
    """GET /cron-status reply."""

    nextExecution: str
    cronExpression: str
    timezone: str
    description: str


class HealthResponse(BaseModel):
    """GET /health reply."""

    status: str
    timestamp: str
    service: str
