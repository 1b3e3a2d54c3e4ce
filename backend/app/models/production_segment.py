"""ProductionSegment ORM — one agenda item in a production's running order.

Invariants:
    - (production_id, order) is unique; orders per production are dense 1..N
    - duration_minutes >= 0
    - At most one segment per production has is_time_anchor = True
    - Deleting a segment deletes its role assignments

Design Decisions:
    - Unique constraint is NOT deferred: every shift goes through the
      two-phase bump in services/order_manager.py
"""

from datetime import datetime, timezone

from sqlalchemy import (
    String, Integer, Boolean, DateTime, ForeignKey, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class ProductionSegment(Base):
    """Ordered segment of a production (pre-show, halves, post-show, ...)."""
    __tablename__ = "production_segments"
    __table_args__ = (
        UniqueConstraint(
            "production_id", "order",
            name="uq_production_segments_production_order",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    production_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("productions.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False)
    is_time_anchor: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    production: Mapped["Production"] = relationship(
        "Production", back_populates="segments",
    )
    assignments: Mapped[list["SegmentRoleAssignment"]] = relationship(
        "SegmentRoleAssignment", back_populates="segment",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="SegmentRoleAssignment.id",
    )
