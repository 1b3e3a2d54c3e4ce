"""Segment Schemas — segments, role assignments and default positions.

Invariants:
    - SegmentCreate.order / SegmentUpdate.order: strict positive int when given
      (JSON true or "2" rejected); the upper bound is clamped by the order
      manager, never rejected
    - SegmentUpdate distinguishes "not sent" from "sent" via model_fields_set
    - AssignmentCopyRequest.target_segment_ids: non-empty, positive, de-duplicated
"""

from pydantic import BaseModel, Field, StrictInt, field_validator

from app.core.domain_types import CopyMode
from app.schemas.catalog import PersonSummary, PositionResponse


class SegmentCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    duration_minutes: int = Field(ge=0)
    order: int | None = Field(None, gt=0, strict=True)
    is_time_anchor: bool = False

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class SegmentUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    duration_minutes: int | None = Field(None, ge=0)
    order: int | None = Field(None, gt=0, strict=True)
    is_time_anchor: bool | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    def payload(self) -> dict:
        """Fields to write on the row, excluding the position."""
        return self.model_dump(exclude_unset=True, exclude_none=True, exclude={"order"})


class SegmentResponse(BaseModel):
    id: int
    production_id: int
    name: str
    duration_minutes: int
    order: int
    is_time_anchor: bool

    model_config = {"from_attributes": True}


# --- Role assignments ---------------------------------------------------------

class AssignmentCreate(BaseModel):
    person_id: int = Field(gt=0)
    position_id: int = Field(gt=0)


class AssignmentResponse(BaseModel):
    id: int
    production_segment_id: int
    person_id: int
    position_id: int
    person: PersonSummary
    position: PositionResponse

    model_config = {"from_attributes": True}


class AssignmentCopyRequest(BaseModel):
    target_segment_ids: list[StrictInt] = Field(min_length=1)
    mode: CopyMode = CopyMode.MERGE

    @field_validator("target_segment_ids")
    @classmethod
    def positive_unique(cls, v: list[int]) -> list[int]:
        if any(i <= 0 for i in v):
            raise ValueError("target_segment_ids must be positive integers")
        return list(dict.fromkeys(v))


class AssignmentCopyResponse(BaseModel):
    created: int
    deleted: int
    targets: list[int]
    mode: CopyMode


# --- Default positions --------------------------------------------------------

class DefaultPositionResponse(BaseModel):
    """Position suggested for a segment, with the skill it requires."""
    id: int
    name: str
    order: int
    required_skill_code: str | None


class SegmentDefaultEntry(BaseModel):
    position_id: int = Field(gt=0)
    order: int = Field(ge=0)


class SegmentDefaultsUpdate(BaseModel):
    segment_name: str = Field(min_length=2, max_length=100)
    positions: list[SegmentDefaultEntry]


class SegmentDefaultResponse(BaseModel):
    id: int
    segment_name: str
    position_id: int
    order: int
    position: PositionResponse

    model_config = {"from_attributes": True}


class SegmentDefaultNames(BaseModel):
    items: list[str]
    has_global: bool
