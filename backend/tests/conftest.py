"""
Shared test fixtures — TestClient, in-memory SQLite, scheduler left stopped.
"""

import os
import tempfile

# Set environment variables BEFORE any app imports to avoid writing under the repo
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "dollar_test_logs"))
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["SCHEDULER_ENABLED"] = "false"

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import text  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from infrastructure.database import get_session  # noqa: E402
from main import app  # noqa: E402

# ---------------------------------------------------------------------------
# In-memory SQLite engine with StaticPool (shared single connection)
# ---------------------------------------------------------------------------

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


def _override_get_session() -> Generator[Session, None, None]:
    with Session(test_engine) as session:
        yield session


@pytest.fixture(scope="session", autouse=True)
def _create_tables():
    """Create all tables once for the test session."""
    import domain.entities  # noqa: F401 — register models with SQLModel

    SQLModel.metadata.create_all(test_engine)
    yield
    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture(autouse=True)
def _clean_tables():
    """Empty every table between tests, resetting the AUTOINCREMENT counter too."""
    yield
    with Session(test_engine) as session:
        for table in reversed(SQLModel.metadata.sorted_tables):
            session.exec(table.delete())  # type: ignore[arg-type]
        session.connection().execute(text("DELETE FROM sqlite_sequence"))
        session.commit()


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    """TestClient with the DB session overridden; the scheduler is built but not started."""
    app.dependency_overrides[get_session] = _override_get_session

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture()
def db_session() -> Generator[Session, None, None]:
    """Standalone DB session fixture for service layer unit tests."""
    with Session(test_engine) as session:
        yield session
        session.rollback()


@pytest.fixture()
def db_engine():
    """The shared in-memory engine, for code that opens its own sessions."""
    return test_engine
