"""Segment Service — production running order on top of OrderManager.

Invariants:
    - At most one time-anchor segment per production: setting the flag clears siblings
    - Each public function is one unit of work; callers commit via atomic()
    - Default running order for a new production: pre-show, two halves, post-show

Design Decisions:
    - Anchor clearing runs before the ordering write, inside the same transaction
"""

import logging

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.models.production_segment import ProductionSegment
from app.schemas.segment import SegmentCreate, SegmentUpdate
from app.services.order_manager import OrderManager

logger = logging.getLogger(__name__)

DEFAULT_SEGMENTS: list[tuple[str, int, bool]] = [
    ("Voorbeschouwing", 10, False),
    ("Eerste helft", 25, True),
    ("Tweede helft", 25, False),
    ("Nabeschouwing", 10, False),
]


def segment_order_manager(db: AsyncSession) -> OrderManager:
    return OrderManager(
        db, ProductionSegment,
        base_offset=get_settings().order_bump_offset,
    )


async def list_segments(db: AsyncSession, production_id: int) -> list[ProductionSegment]:
    return await segment_order_manager(db).ordered_items(production_id)


async def create_segment(
    db: AsyncSession, production_id: int, body: SegmentCreate,
) -> ProductionSegment:
    if body.is_time_anchor:
        await _clear_time_anchor(db, production_id)
    return await segment_order_manager(db).insert(
        production_id, body.order,
        {
            "name": body.name,
            "duration_minutes": body.duration_minutes,
            "is_time_anchor": body.is_time_anchor,
        },
    )


async def update_segment(
    db: AsyncSession, segment: ProductionSegment, body: SegmentUpdate,
) -> ProductionSegment:
    payload = body.payload()
    if payload.get("is_time_anchor"):
        await _clear_time_anchor(db, segment.production_id, keep_id=segment.id)
    return await segment_order_manager(db).move(segment, body.order, payload)


async def delete_segment(db: AsyncSession, segment: ProductionSegment) -> None:
    """Remove segment with its role assignments and renumber the rest."""
    await segment_order_manager(db).delete(segment)
    logger.info(
        f"Deleted segment {segment.id}",
        extra={"production_id": segment.production_id, "segment_id": segment.id},
    )


async def create_default_segments(db: AsyncSession, production_id: int) -> None:
    for order, (name, minutes, anchor) in enumerate(DEFAULT_SEGMENTS, start=1):
        db.add(ProductionSegment(
            production_id=production_id, name=name, duration_minutes=minutes,
            order=order, is_time_anchor=anchor,
        ))
    await db.flush()


async def _clear_time_anchor(
    db: AsyncSession, production_id: int, keep_id: int | None = None,
) -> None:
    stmt = (
        update(ProductionSegment)
        .where(ProductionSegment.production_id == production_id)
        .where(ProductionSegment.is_time_anchor.is_(True))
    )
    if keep_id is not None:
        stmt = stmt.where(ProductionSegment.id != keep_id)
    await db.execute(stmt.values(is_time_anchor=False))
