"""Title Service — per-production title definitions, ordered like segments.

Invariants:
    - Parts are replaced wholesale when an update carries `parts`
    - Ordering writes go through OrderManager (insert / move / delete / reorder)
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.models.title_definition import TitleDefinition
from app.models.title_part import TitlePart
from app.schemas.title import (
    TitleDefinitionCreate, TitleDefinitionUpdate, TitlePartInput,
)
from app.services.order_manager import OrderManager


def title_order_manager(db: AsyncSession) -> OrderManager:
    return OrderManager(
        db, TitleDefinition,
        base_offset=get_settings().order_bump_offset,
    )


def _build_parts(parts: list[TitlePartInput]) -> list[TitlePart]:
    return [
        TitlePart(
            source_type=p.source_type.value,
            team_side=p.team_side.value,
            limit=p.limit,
            filters=p.filters,
            custom_function=p.custom_function,
            custom_name=p.custom_name,
        )
        for p in parts
    ]


async def list_titles(db: AsyncSession, production_id: int) -> list[TitleDefinition]:
    return await title_order_manager(db).ordered_items(production_id)


async def create_title(
    db: AsyncSession, production_id: int, body: TitleDefinitionCreate,
) -> TitleDefinition:
    return await title_order_manager(db).insert(
        production_id, body.order,
        {
            "name": body.name,
            "enabled": body.enabled,
            "parts": _build_parts(body.parts),
        },
    )


async def update_title(
    db: AsyncSession, title: TitleDefinition, body: TitleDefinitionUpdate,
) -> TitleDefinition:
    payload: dict = {}
    if body.name is not None:
        payload["name"] = body.name
    if body.enabled is not None:
        payload["enabled"] = body.enabled
    if body.parts is not None:
        payload["parts"] = _build_parts(body.parts)
    return await title_order_manager(db).move(title, body.order, payload)


async def delete_title(db: AsyncSession, title: TitleDefinition) -> None:
    await title_order_manager(db).delete(title)


async def reorder_titles(
    db: AsyncSession, production_id: int, ids: list[int],
) -> list[TitleDefinition]:
    return await title_order_manager(db).reorder(production_id, ids)
