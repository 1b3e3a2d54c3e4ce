"""PersonSkill ORM — association between a person and a skill they hold."""

from sqlalchemy import Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class PersonSkill(Base):
    __tablename__ = "person_skills"
    __table_args__ = (
        UniqueConstraint("person_id", "skill_id", name="uq_person_skills_person_skill"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    person_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("persons.id", ondelete="CASCADE"), nullable=False,
    )
    skill_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("skills.id"), nullable=False,
    )

    person: Mapped["Person"] = relationship("Person", back_populates="skills")
    skill: Mapped["Skill"] = relationship("Skill", lazy="selectin")
