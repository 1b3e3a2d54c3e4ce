"""SegmentRoleAssignment ORM — a person filling a position during one segment.

Invariants:
    - (production_segment_id, person_id, position_id) is unique
    - Person must hold the position's required skill (checked before insert)
"""

from sqlalchemy import Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class SegmentRoleAssignment(Base):
    __tablename__ = "segment_role_assignments"
    __table_args__ = (
        UniqueConstraint(
            "production_segment_id", "person_id", "position_id",
            name="uq_segment_role_assignments_segment_person_position",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    production_segment_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("production_segments.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    person_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("persons.id", ondelete="CASCADE"), nullable=False,
    )
    position_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("positions.id"), nullable=False,
    )

    segment: Mapped["ProductionSegment"] = relationship(
        "ProductionSegment", back_populates="assignments",
    )
    person: Mapped["Person"] = relationship(
        "Person", back_populates="assignments", lazy="selectin",
    )
    position: Mapped["Position"] = relationship("Position", lazy="selectin")
