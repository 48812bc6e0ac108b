"""
Domain — pure helpers (no I/O) for timestamps and upstream payloads.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime

from domain.constants import DOLAR_API_AVERAGE_FIELD
from domain.errors import ParseError


def format_capture_timestamp(moment: datetime | None = None) -> str:
    """
    Render a capture timestamp as ISO-8601 UTC with millisecond precision
    and a trailing ``Z``, e.g. ``2024-01-02T13:15:00.123Z``.

    Naive datetimes are taken to be UTC.
    """
    moment = moment or datetime.now(UTC)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    moment = moment.astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_average(payload: object) -> float:
    """
    Extract the average rate from a DolarApi response body.

    ``promedio`` may be a number or a numeric string ("36.50" -> 36.5).

    Raises:
        ParseError: body is not an object, the field is missing, or the
            value is not a finite number.
    """
    if not isinstance(payload, dict):
        raise ParseError(f"Unexpected payload type: {type(payload).__name__}")
    if DOLAR_API_AVERAGE_FIELD not in payload:
        raise ParseError(f"Missing field '{DOLAR_API_AVERAGE_FIELD}' in payload")

    raw = payload[DOLAR_API_AVERAGE_FIELD]
    if isinstance(raw, bool) or raw is None:
        raise ParseError(f"Non-numeric '{DOLAR_API_AVERAGE_FIELD}': {raw!r}")
    try:
        value = float(raw.strip() if isinstance(raw, str) else raw)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Non-numeric '{DOLAR_API_AVERAGE_FIELD}': {raw!r}") from exc

    if not math.isfinite(value):
        raise ParseError(f"Non-finite '{DOLAR_API_AVERAGE_FIELD}': {raw!r}")
    return value
