"""Tests for GET /cron-status."""

from datetime import datetime
from unittest.mock import patch
from zoneinfo import ZoneInfo

from fastapi.testclient import TestClient

from domain.constants import RATE_POLL_CRON, RATE_POLL_DESCRIPTION
from main import app


def test_cron_status_reports_daily_poll(client: TestClient):
    # Act
    resp = client.get("/cron-status")

    # Assert
    assert resp.status_code == 200
    data = resp.json()
    assert data["cronExpression"] == RATE_POLL_CRON
    assert data["timezone"] == "America/Caracas"
    assert data["description"] == RATE_POLL_DESCRIPTION

    assert data["nextExecution"].endswith("Z")
    next_run = datetime.fromisoformat(data["nextExecution"])
    assert next_run.tzinfo is not None
    local = next_run.astimezone(ZoneInfo("America/Caracas"))
    assert (local.hour, local.minute) == (9, 15)
    assert next_run > datetime.now(ZoneInfo("UTC"))


def test_cron_status_has_no_side_effect(client: TestClient):
    # Act
    first = client.get("/cron-status").json()
    second = client.get("/cron-status").json()

    # Assert
    assert first == second
    assert app.state.scheduler.running is False


def test_cron_status_before_startup_returns_503():
    # Arrange: no lifespan -> scheduler never built
    app.state.scheduler = None
    bare = TestClient(app)

    # Act
    resp = bare.get("/cron-status")

    # Assert
    assert resp.status_code == 503


def test_cron_status_next_execution_is_utc_with_millis(client: TestClient):
    # Arrange: 09:15 in Caracas (UTC-4) is 13:15 UTC
    fire = datetime(2024, 1, 11, 9, 15, tzinfo=ZoneInfo("America/Caracas"))

    # Act
    with patch.object(app.state.scheduler, "next_fire_time", return_value=fire):
        resp = client.get("/cron-status")

    # Assert
    assert resp.json()["nextExecution"] == "2024-01-11T13:15:00.000Z"
