"""MatchSchedule ORM — a league fixture a production can be built around.

Invariants:
    - date is timezone-aware; it is the start time used by production timing
"""

from datetime import datetime

from sqlalchemy import String, Integer, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class MatchSchedule(Base):
    """Scheduled match (home/away team, kickoff, venue)."""
    __tablename__ = "match_schedules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    home_team_name: Mapped[str] = mapped_column(String(200), nullable=False)
    away_team_name: Mapped[str] = mapped_column(String(200), nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True,
    )
    field_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    is_home_match: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
