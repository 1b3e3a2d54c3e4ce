"""Position ORM — a crew seat (camera links, regie, commentaar, ...).

Invariants:
    - name is unique
    - skill_id, when set, overrides the canonical skill table in core/position_skill.py
"""

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Position(Base):
    __tablename__ = "positions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    skill_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("skills.id"), nullable=True,
    )

    skill: Mapped["Skill | None"] = relationship("Skill", lazy="selectin")
