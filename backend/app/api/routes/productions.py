"""Production Lifecycle — CRUD, activation and timing preview.

Invariants:
    - One production per match (409 on duplicate)
    - A new production starts with the default four segments
    - Activation leaves exactly one production active
    - Deleting a production cascades to segments, titles and assignments
"""

import logging

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routes.lookups import get_or_404, get_production_or_404
from app.core.errors import ConflictError
from app.core.timing import compute_timing
from app.infrastructure.database import atomic, get_db
from app.models.match_schedule import MatchSchedule
from app.models.production import Production
from app.schemas.production import (
    ProductionCreate, ProductionResponse, ProductionUpdate, SegmentTimingResponse,
)
from app.services.segment_service import create_default_segments, list_segments

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/productions", tags=["productions"])


async def _ensure_match_free(
    db: AsyncSession, match_schedule_id: int, exclude_id: int | None = None,
) -> None:
    query = select(func.count(Production.id)).where(
        Production.match_schedule_id == match_schedule_id,
    )
    if exclude_id is not None:
        query = query.where(Production.id != exclude_id)
    if (await db.execute(query)).scalar_one():
        raise ConflictError("Production already exists for this match")


@router.get("")
async def list_productions(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(Production).order_by(Production.id))
    items = result.scalars().all()
    return {
        "items": [ProductionResponse.model_validate(p) for p in items],
        "total": len(items),
    }


@router.post(
    "", response_model=ProductionResponse, status_code=status.HTTP_201_CREATED,
)
async def create_production(
    body: ProductionCreate, db: AsyncSession = Depends(get_db),
):
    """Create a production for a match, seeded with the default running order."""
    match = await get_or_404(db, MatchSchedule, body.match_schedule_id, "Match")
    await _ensure_match_free(db, body.match_schedule_id)
    async with atomic(db):
        production = Production(match_schedule_id=match.id, match_schedule=match)
        db.add(production)
        await db.flush()
        await create_default_segments(db, production.id)
    logger.info(
        f"Production {production.id} created",
        extra={"production_id": production.id},
    )
    return production


@router.get("/{production_id}", response_model=ProductionResponse)
async def get_production(
    production_id: int = Path(gt=0), db: AsyncSession = Depends(get_db),
):
    return await get_production_or_404(db, production_id)


@router.put("/{production_id}", response_model=ProductionResponse)
async def update_production(
    body: ProductionUpdate,
    production_id: int = Path(gt=0),
    db: AsyncSession = Depends(get_db),
):
    """Point the production at a different match."""
    production = await get_production_or_404(db, production_id)
    match = await get_or_404(db, MatchSchedule, body.match_schedule_id, "Match")
    await _ensure_match_free(db, body.match_schedule_id, exclude_id=production_id)
    async with atomic(db):
        production.match_schedule_id = match.id
        production.match_schedule = match
    return production


@router.delete("/{production_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_production(
    production_id: int = Path(gt=0), db: AsyncSession = Depends(get_db),
):
    production = await get_production_or_404(db, production_id)
    async with atomic(db):
        await db.delete(production)
    logger.info(f"Production {production_id} deleted", extra={"production_id": production_id})


@router.post("/{production_id}/activate", response_model=ProductionResponse)
async def activate_production(
    production_id: int = Path(gt=0), db: AsyncSession = Depends(get_db),
):
    """Make this the single active production."""
    production = await get_production_or_404(db, production_id)
    async with atomic(db):
        await db.execute(
            update(Production)
            .where(Production.is_active.is_(True))
            .values(is_active=False),
        )
        production.is_active = True
    return production


@router.get(
    "/{production_id}/timing", response_model=list[SegmentTimingResponse],
)
async def production_timing(
    production_id: int = Path(gt=0), db: AsyncSession = Depends(get_db),
):
    """Start/end per segment, laid out around the time-anchor segment."""
    production = await get_production_or_404(db, production_id)
    segments = await list_segments(db, production_id)
    return compute_timing(segments, production.match_schedule.date)
