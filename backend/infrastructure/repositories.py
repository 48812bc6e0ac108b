"""
Infrastructure — Repository pattern.
All queries live here so the service layer never touches ORM syntax.
The dollar_bcv log is append-only: there is no update or delete.
"""

from sqlmodel import Session, select

from domain.entities import DollarRate


def insert_rate(session: Session, average: float, date: str) -> DollarRate:
    """Append one observation; the store assigns the next id."""
    rate = DollarRate(average=average, date=date)
    session.add(rate)
    session.commit()
    session.refresh(rate)
    return rate


def find_latest_rate(session: Session) -> DollarRate | None:
    """Newest observation by id (not by date), or None when the table is empty."""
    statement = select(DollarRate).order_by(DollarRate.id.desc()).limit(1)  # type: ignore[union-attr]
    return session.exec(statement).first()


def find_all_rates(session: Session) -> list[DollarRate]:
    """Every observation, id ascending."""
    statement = select(DollarRate).order_by(DollarRate.id)
    return list(session.exec(statement).all())
