"""Match Schedule Routes — fixtures a production can be created for."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import atomic, get_db
from app.models.match_schedule import MatchSchedule
from app.schemas.production import MatchCreate, MatchResponse

router = APIRouter(prefix="/api/v1/matches", tags=["matches"])


@router.get("", response_model=list[MatchResponse])
async def list_matches(
    team: str | None = Query(None, max_length=200),
    db: AsyncSession = Depends(get_db),
):
    """All fixtures by date; with `team`, home matches of teams containing it."""
    query = select(MatchSchedule).order_by(MatchSchedule.date, MatchSchedule.id)
    if team and team.strip():
        query = query.where(
            MatchSchedule.is_home_match.is_(True),
            func.lower(MatchSchedule.home_team_name).contains(team.strip().lower()),
        )
    result = await db.execute(query)
    return result.scalars().all()


@router.post("", response_model=MatchResponse, status_code=status.HTTP_201_CREATED)
async def create_match(body: MatchCreate, db: AsyncSession = Depends(get_db)):
    async with atomic(db):
        match = MatchSchedule(**body.model_dump())
        db.add(match)
    return match
