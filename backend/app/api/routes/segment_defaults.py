"""Segment Default Position Routes — per segment-name crew templates.

Invariants:
    - PUT replaces the whole list for one segment name
    - 'Algemeen' is stored as '__GLOBAL__' (the fallback set)
    - Every position id in a PUT must exist, else nothing is written (422)
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy import delete, distinct, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import BusinessRuleError
from app.core.position_skill import GLOBAL_SEGMENT_NAME, storage_segment_name
from app.infrastructure.database import atomic, get_db
from app.models.position import Position
from app.models.segment_default_position import SegmentDefaultPosition
from app.schemas.segment import (
    SegmentDefaultNames, SegmentDefaultResponse, SegmentDefaultsUpdate,
)
from app.services.assignment_service import list_segment_defaults

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/segment-default-positions", tags=["segment-defaults"],
)


@router.get("", response_model=list[SegmentDefaultResponse])
async def get_segment_defaults(
    segment_name: str = Query(min_length=1, max_length=100),
    db: AsyncSession = Depends(get_db),
):
    return await list_segment_defaults(db, storage_segment_name(segment_name))


@router.get("/names", response_model=SegmentDefaultNames)
async def get_segment_default_names(db: AsyncSession = Depends(get_db)):
    """Segment names with a configured template; the global set is reported apart."""
    result = await db.execute(
        select(distinct(SegmentDefaultPosition.segment_name))
        .order_by(SegmentDefaultPosition.segment_name),
    )
    names = list(result.scalars().all())
    return SegmentDefaultNames(
        items=[n for n in names if n != GLOBAL_SEGMENT_NAME],
        has_global=GLOBAL_SEGMENT_NAME in names,
    )


@router.put("", response_model=list[SegmentDefaultResponse])
async def replace_segment_defaults(
    body: SegmentDefaultsUpdate, db: AsyncSession = Depends(get_db),
):
    name = storage_segment_name(body.segment_name)
    wanted = list(dict.fromkeys(p.position_id for p in body.positions))
    positions: dict[int, Position] = {}
    if wanted:
        found = await db.execute(select(Position).where(Position.id.in_(wanted)))
        positions = {p.id: p for p in found.scalars().all()}
        missing = set(wanted) - set(positions)
        if missing:
            raise BusinessRuleError(
                f"Unknown position ids: {sorted(missing)}", "POSITION_UNKNOWN",
            )

    seen: set[int] = set()
    async with atomic(db):
        await db.execute(
            delete(SegmentDefaultPosition)
            .where(SegmentDefaultPosition.segment_name == name),
        )
        for entry in body.positions:
            if entry.position_id in seen:
                continue
            seen.add(entry.position_id)
            db.add(SegmentDefaultPosition(
                segment_name=name, position_id=entry.position_id, order=entry.order,
                position=positions[entry.position_id],
            ))
    logger.info(f"Replaced {len(seen)} default positions for '{name}'")
    return await list_segment_defaults(db, name)
