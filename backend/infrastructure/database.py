"""
Infrastructure — database connection and session management.
SQLite through SQLModel / SQLAlchemy.
"""

import os
from collections.abc import Generator
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlmodel import Session, SQLModel, create_engine

from domain.constants import DEFAULT_DATABASE_URL
from logging_config import get_logger

logger = get_logger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)

# SQLite needs check_same_thread=False: scheduler threads and request threads share the engine
connect_args = {"check_same_thread": False}
engine = create_engine(DATABASE_URL, echo=False, connect_args=connect_args)

logger.info("Database location: %s", DATABASE_URL)


def _ensure_sqlite_directory(url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    parsed = make_url(url)
    if not parsed.drivername.startswith("sqlite"):
        return
    database = parsed.database
    if not database or database == ":memory:":
        return
    Path(database).parent.mkdir(parents=True, exist_ok=True)


def create_db_and_tables() -> None:
    """Create the dollar_bcv table if it does not exist. Idempotent; errors propagate."""
    # Entities must be imported so SQLModel metadata is complete
    import domain.entities  # noqa: F401

    _ensure_sqlite_directory(str(engine.url))

    logger.info("Creating tables (if absent)...")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables ready.")


def dispose_engine() -> None:
    """Release pooled connections. A failing close is logged, not raised."""
    try:
        engine.dispose()
        logger.info("Database connection closed.")
    except Exception as e:
        logger.error("Error closing database: %s", e, exc_info=True)


def get_session() -> Generator[Session, None, None]:
    """FastAPI dependency: yields a DB session and closes it afterwards."""
    with Session(engine) as session:
        yield session
