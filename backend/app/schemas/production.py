"""Production Schemas — matches, productions and timing at the API boundary.

Invariants:
    - Ids in request bodies are positive integers
    - Team names are stripped and non-empty
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class MatchCreate(BaseModel):
    home_team_name: str = Field(min_length=1, max_length=200)
    away_team_name: str = Field(min_length=1, max_length=200)
    date: datetime
    field_name: str | None = Field(None, max_length=200)
    is_home_match: bool = True

    @field_validator("home_team_name", "away_team_name")
    @classmethod
    def strip_team(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("team name cannot be empty or whitespace")
        return v


class MatchResponse(BaseModel):
    id: int
    home_team_name: str
    away_team_name: str
    date: datetime
    field_name: str | None
    is_home_match: bool

    model_config = {"from_attributes": True}


class ProductionCreate(BaseModel):
    match_schedule_id: int = Field(gt=0)


class ProductionUpdate(BaseModel):
    match_schedule_id: int = Field(gt=0)


class ProductionResponse(BaseModel):
    id: int
    match_schedule_id: int
    is_active: bool
    created_at: datetime
    match_schedule: MatchResponse | None = None

    model_config = {"from_attributes": True}


class SegmentTimingResponse(BaseModel):
    segment_id: int
    name: str
    order: int
    duration_minutes: int
    is_time_anchor: bool
    start: datetime
    end: datetime

    model_config = {"from_attributes": True}
