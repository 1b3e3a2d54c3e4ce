"""SegmentDefaultPosition ORM — suggested positions for segments with a given name.

Invariants:
    - segment_name '__GLOBAL__' holds the fallback set used by every segment name
      without its own configuration
    - (segment_name, position_id) is unique
"""

from sqlalchemy import String, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class SegmentDefaultPosition(Base):
    __tablename__ = "segment_default_positions"
    __table_args__ = (
        UniqueConstraint(
            "segment_name", "position_id",
            name="uq_segment_default_positions_name_position",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    segment_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    position_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("positions.id", ondelete="CASCADE"), nullable=False,
    )
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    position: Mapped["Position"] = relationship("Position", lazy="selectin")
