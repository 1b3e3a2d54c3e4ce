"""Skill ORM — catalog of crew capabilities (REGISSEUR, CAMERA_ZOOM, ...).

Invariants:
    - code is unique and upper-case (normalized by schemas/catalog.py)
    - name_male / name_female are the gendered job titles shown on callsheets
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Skill(Base):
    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    name_male: Mapped[str] = mapped_column(String(100), nullable=False)
    name_female: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
