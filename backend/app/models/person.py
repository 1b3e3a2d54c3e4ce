"""Person ORM — crew member or on-air talent.

Invariants:
    - gender is 'male' or 'female' (drives gendered skill titles)
    - Deleting a person deletes their skills and segment assignments
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Person(Base):
    __tablename__ = "persons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    gender: Mapped[str] = mapped_column(String(10), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    skills: Mapped[list["PersonSkill"]] = relationship(
        "PersonSkill", back_populates="person",
        cascade="all, delete-orphan", lazy="selectin",
    )
    assignments: Mapped[list["SegmentRoleAssignment"]] = relationship(
        "SegmentRoleAssignment", back_populates="person",
        cascade="all, delete-orphan", lazy="selectin",
    )
