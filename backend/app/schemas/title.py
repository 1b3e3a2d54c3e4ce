"""Title Schemas — title definitions and their parts, cross-validated per source type.

Invariants:
    - COMMENTARY / PRESENTATION / PRESENTATION_AND_ANALIST: team_side defaults to
      NONE, custom_function and custom_name forbidden
    - TEAM_PLAYER / TEAM_COACH: team_side required, custom_* forbidden
    - FREE_TEXT: custom_function and custom_name required
    - A definition always has at least one part
    - TitleReorder.ids: non-empty list of positive ids, strict ints like every order field

Design Decisions:
    - One TitlePartInput with a model_validator over a discriminated union:
      same shape for every source type, rules kept in small helpers
"""

from typing import Any

from pydantic import BaseModel, Field, StrictInt, model_validator

from app.core.domain_types import TeamSide, TitleSourceType

_TEAM_SOURCES = frozenset({TitleSourceType.TEAM_PLAYER, TitleSourceType.TEAM_COACH})


class TitlePartInput(BaseModel):
    source_type: TitleSourceType
    team_side: TeamSide | None = None
    limit: int | None = Field(None, gt=0)
    filters: Any = None
    custom_function: str | None = None
    custom_name: str | None = None

    @model_validator(mode="after")
    def validate_source_fields(self):
        if self.source_type == TitleSourceType.FREE_TEXT:
            _validate_free_text(self)
        elif self.source_type in _TEAM_SOURCES:
            _validate_team_part(self)
        else:
            _validate_crew_part(self)
        if self.team_side is None:
            self.team_side = TeamSide.NONE
        return self


class TitlePartResponse(BaseModel):
    id: int
    source_type: TitleSourceType
    team_side: TeamSide
    limit: int | None
    filters: Any = None
    custom_function: str | None
    custom_name: str | None

    model_config = {"from_attributes": True}


class TitleDefinitionCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    order: int | None = Field(None, gt=0, strict=True)
    enabled: bool = True
    parts: list[TitlePartInput] = Field(min_length=1)


class TitleDefinitionUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    enabled: bool | None = None
    order: int | None = Field(None, gt=0, strict=True)
    parts: list[TitlePartInput] | None = Field(None, min_length=1)


class TitleDefinitionResponse(BaseModel):
    id: int
    production_id: int
    name: str
    order: int
    enabled: bool
    parts: list[TitlePartResponse]

    model_config = {"from_attributes": True}


class TitleReorder(BaseModel):
    ids: list[StrictInt] = Field(min_length=1)

    @model_validator(mode="after")
    def positive_ids(self):
        if any(i <= 0 for i in self.ids):
            raise ValueError("ids must be positive integers")
        return self


# --- Validation helpers -------------------------------------------------------

def _validate_free_text(part: TitlePartInput) -> None:
    if not (part.custom_function and part.custom_function.strip()):
        raise ValueError("FREE_TEXT requires custom_function")
    if not (part.custom_name and part.custom_name.strip()):
        raise ValueError("FREE_TEXT requires custom_name")


def _validate_team_part(part: TitlePartInput) -> None:
    if part.team_side is None:
        raise ValueError(f"{part.source_type.value} requires team_side")
    _forbid_custom_fields(part)


def _validate_crew_part(part: TitlePartInput) -> None:
    _forbid_custom_fields(part)


def _forbid_custom_fields(part: TitlePartInput) -> None:
    if part.custom_function is not None or part.custom_name is not None:
        raise ValueError(
            f"{part.source_type.value} does not accept custom_function or custom_name",
        )
