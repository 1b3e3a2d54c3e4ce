"""Catalog Schemas — skills, positions and persons.

Invariants:
    - Skill.code is upper-cased and stripped before it reaches the DB
    - Position.name: 2-100 chars; skill_id may be explicitly null (unset)
    - Person.gender is a Gender enum value
"""

from pydantic import BaseModel, Field, field_validator

from app.core.domain_types import Gender


# --- Skills -------------------------------------------------------------------

class SkillInput(BaseModel):
    code: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1, max_length=100)
    name_male: str = Field(min_length=1, max_length=100)
    name_female: str = Field(min_length=1, max_length=100)

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("code cannot be empty or whitespace")
        return v


class SkillUpdate(BaseModel):
    code: str | None = Field(None, min_length=1, max_length=50)
    name: str | None = Field(None, min_length=1, max_length=100)
    name_male: str | None = Field(None, min_length=1, max_length=100)
    name_female: str | None = Field(None, min_length=1, max_length=100)

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str | None) -> str | None:
        return v.strip().upper() if v is not None else v


class SkillResponse(BaseModel):
    id: int
    code: str
    name: str
    name_male: str
    name_female: str

    model_config = {"from_attributes": True}


class SkillPage(BaseModel):
    items: list[SkillResponse]
    page: int
    limit: int
    total: int
    pages: int


class SkillImportProblem(BaseModel):
    code: str
    reason: str


class SkillImportResult(BaseModel):
    total: int
    created: int
    updated: int
    problems: list[SkillImportProblem]


# --- Positions ----------------------------------------------------------------

class PositionInput(BaseModel):
    name: str = Field(min_length=2, max_length=100)
    skill_id: int | None = Field(None, gt=0)


class PositionUpdate(BaseModel):
    name: str | None = Field(None, min_length=2, max_length=100)
    skill_id: int | None = Field(None, gt=0)


class PositionResponse(BaseModel):
    id: int
    name: str
    skill_id: int | None
    skill: SkillResponse | None = None

    model_config = {"from_attributes": True}


# --- Persons ------------------------------------------------------------------

class PersonInput(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    gender: Gender

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class PersonUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    gender: Gender | None = None


class PersonSummary(BaseModel):
    id: int
    name: str
    gender: str

    model_config = {"from_attributes": True}


class PersonResponse(PersonSummary):
    skills: list[SkillResponse] = []


class PersonSkillAdd(BaseModel):
    skill_id: int = Field(gt=0)
