"""Production ORM — aggregate root for one livestreamed match.

Invariants:
    - At most one production per match (unique match_schedule_id)
    - At most one production has is_active = True (enforced by activate route)
    - Owns its segments and title definitions; deleting it deletes them

Design Decisions:
    - Segments and titles ordered by their `order` column at relationship level,
      so every eager load returns them in running order
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Production(Base):
    """Production aggregate root — owns segments and title definitions."""
    __tablename__ = "productions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    match_schedule_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("match_schedules.id"), nullable=False, unique=True,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    match_schedule: Mapped["MatchSchedule"] = relationship(
        "MatchSchedule", lazy="selectin",
    )
    segments: Mapped[list["ProductionSegment"]] = relationship(
        "ProductionSegment", back_populates="production",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="ProductionSegment.order",
    )
    title_definitions: Mapped[list["TitleDefinition"]] = relationship(
        "TitleDefinition", back_populates="production",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="TitleDefinition.order",
    )
