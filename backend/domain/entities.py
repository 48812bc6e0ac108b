"""
Domain — database entities (SQLModel tables).
The dollar_bcv table is an append-only log of rate observations.
"""

from typing import Optional

from sqlmodel import Field, SQLModel

from domain.constants import DOLLAR_TABLE_NAME


class DollarRate(SQLModel, table=True):
    """One observation of the official dollar rate."""

    __tablename__ = DOLLAR_TABLE_NAME
    # AUTOINCREMENT keeps ids from being reused, so max(id) is always the newest row
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    average: float = Field(nullable=False, description="Average rate (promedio)")
    date: str = Field(nullable=False, description="Capture timestamp, ISO-8601 UTC")
