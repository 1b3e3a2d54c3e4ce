"""TitlePart ORM — a source of names (commentary, team players, free text) for a title."""

from sqlalchemy import String, Integer, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class TitlePart(Base):
    __tablename__ = "title_parts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title_definition_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("title_definitions.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    source_type: Mapped[str] = mapped_column(String(40), nullable=False)
    team_side: Mapped[str] = mapped_column(
        String(10), nullable=False, default="NONE",
    )
    limit: Mapped[int | None] = mapped_column(Integer, nullable=True)
    filters: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    custom_function: Mapped[str | None] = mapped_column(String(200), nullable=True)
    custom_name: Mapped[str | None] = mapped_column(String(200), nullable=True)

    title_definition: Mapped["TitleDefinition"] = relationship(
        "TitleDefinition", back_populates="parts",
    )
