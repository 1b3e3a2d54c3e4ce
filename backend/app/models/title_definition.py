"""TitleDefinition ORM — one on-screen title (lower third) in a production's title list.

Invariants:
    - (production_id, order) is unique; orders per production are dense 1..N
    - Owns its parts; replacing or deleting the definition replaces/deletes them

Design Decisions:
    - Shares the ordering machinery with ProductionSegment (services/order_manager.py)
"""

from sqlalchemy import (
    String, Integer, Boolean, ForeignKey, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class TitleDefinition(Base):
    """Ordered title definition, rendered from one or more parts."""
    __tablename__ = "title_definitions"
    __table_args__ = (
        UniqueConstraint(
            "production_id", "order",
            name="uq_title_definitions_production_order",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    production_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("productions.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    production: Mapped["Production"] = relationship(
        "Production", back_populates="title_definitions",
    )
    parts: Mapped[list["TitlePart"]] = relationship(
        "TitlePart", back_populates="title_definition",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="TitlePart.id",
    )
