"""Segment Routes — production running order (insert / move / delete).

Invariants:
    - Segment orders of a production are always 1..N without gaps after a write
    - Every write runs inside atomic(): a failed shift leaves the old order intact
    - Out-of-range `order` values are clamped by the order manager, not rejected
"""

import logging

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routes.lookups import get_production_or_404, get_segment_or_404
from app.infrastructure.database import atomic, get_db
from app.schemas.segment import SegmentCreate, SegmentResponse, SegmentUpdate
from app.services.segment_service import (
    create_segment, delete_segment, list_segments, update_segment,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["segments"])


@router.get(
    "/productions/{production_id}/segments",
    response_model=list[SegmentResponse],
)
async def get_production_segments(
    production_id: int = Path(gt=0), db: AsyncSession = Depends(get_db),
):
    await get_production_or_404(db, production_id)
    return await list_segments(db, production_id)


@router.post(
    "/productions/{production_id}/segments",
    response_model=SegmentResponse, status_code=status.HTTP_201_CREATED,
)
async def add_segment(
    body: SegmentCreate,
    production_id: int = Path(gt=0),
    db: AsyncSession = Depends(get_db),
):
    """Insert at `order` (shifting the rest down) or append when omitted."""
    await get_production_or_404(db, production_id)
    async with atomic(db):
        segment = await create_segment(db, production_id, body)
    return segment


@router.get("/segments/{segment_id}", response_model=SegmentResponse)
async def get_segment(
    segment_id: int = Path(gt=0), db: AsyncSession = Depends(get_db),
):
    return await get_segment_or_404(db, segment_id)


@router.put("/segments/{segment_id}", response_model=SegmentResponse)
async def put_segment(
    body: SegmentUpdate,
    segment_id: int = Path(gt=0),
    db: AsyncSession = Depends(get_db),
):
    """Partial update; a new `order` moves the segment within its production."""
    segment = await get_segment_or_404(db, segment_id)
    async with atomic(db):
        segment = await update_segment(db, segment, body)
    return segment


@router.delete("/segments/{segment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_segment(
    segment_id: int = Path(gt=0), db: AsyncSession = Depends(get_db),
):
    segment = await get_segment_or_404(db, segment_id)
    async with atomic(db):
        await delete_segment(db, segment)
