"""Lookups — shared get-or-404 helpers for route modules.

Invariants:
    - Missing rows raise ResourceNotFoundError (404 via global handler), never return None
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ErrorContext, ResourceNotFoundError
from app.models.production import Production
from app.models.production_segment import ProductionSegment
from app.models.title_definition import TitleDefinition


async def get_or_404(db: AsyncSession, model: type, item_id: int, label: str | None = None):
    item = await db.get(model, item_id)
    if item is None:
        raise ResourceNotFoundError(
            label or model.__name__, item_id, ErrorContext(resource_id=item_id),
        )
    return item


async def get_production_or_404(db: AsyncSession, production_id: int) -> Production:
    return await get_or_404(db, Production, production_id, "Production")


async def get_segment_or_404(db: AsyncSession, segment_id: int) -> ProductionSegment:
    return await get_or_404(db, ProductionSegment, segment_id, "Segment")


async def get_title_or_404(
    db: AsyncSession, production_id: int, title_id: int,
) -> TitleDefinition:
    title = await db.get(TitleDefinition, title_id)
    if title is None or title.production_id != production_id:
        raise ResourceNotFoundError(
            "TitleDefinition", title_id,
            ErrorContext(production_id=production_id, resource_id=title_id),
        )
    return title
