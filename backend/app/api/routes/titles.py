"""Title Definition Routes — lower-third titles of a production, kept in display order.

Invariants:
    - Title orders of a production are always 1..N without gaps after a write
    - A title id under another production's path is a 404, never a silent cross-write
    - Reorder takes the full list of the production's title ids
"""

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routes.lookups import get_production_or_404, get_title_or_404
from app.infrastructure.database import atomic, get_db
from app.schemas.title import (
    TitleDefinitionCreate, TitleDefinitionResponse, TitleDefinitionUpdate, TitleReorder,
)
from app.services.title_service import (
    create_title, delete_title, list_titles, reorder_titles, update_title,
)

router = APIRouter(prefix="/api/v1/productions", tags=["titles"])


@router.get(
    "/{production_id}/titles", response_model=list[TitleDefinitionResponse],
)
async def get_titles(
    production_id: int = Path(gt=0), db: AsyncSession = Depends(get_db),
):
    await get_production_or_404(db, production_id)
    return await list_titles(db, production_id)


@router.post(
    "/{production_id}/titles",
    response_model=TitleDefinitionResponse, status_code=status.HTTP_201_CREATED,
)
async def add_title(
    body: TitleDefinitionCreate,
    production_id: int = Path(gt=0),
    db: AsyncSession = Depends(get_db),
):
    await get_production_or_404(db, production_id)
    async with atomic(db):
        title = await create_title(db, production_id, body)
    return title


@router.patch(
    "/{production_id}/titles/reorder",
    response_model=list[TitleDefinitionResponse],
)
async def reorder_production_titles(
    body: TitleReorder,
    production_id: int = Path(gt=0),
    db: AsyncSession = Depends(get_db),
):
    """Apply a full permutation of the production's title ids."""
    await get_production_or_404(db, production_id)
    async with atomic(db):
        titles = await reorder_titles(db, production_id, body.ids)
    return titles


@router.put(
    "/{production_id}/titles/{title_id}", response_model=TitleDefinitionResponse,
)
async def put_title(
    body: TitleDefinitionUpdate,
    production_id: int = Path(gt=0),
    title_id: int = Path(gt=0),
    db: AsyncSession = Depends(get_db),
):
    title = await get_title_or_404(db, production_id, title_id)
    async with atomic(db):
        title = await update_title(db, title, body)
    return title


@router.delete(
    "/{production_id}/titles/{title_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_title(
    production_id: int = Path(gt=0),
    title_id: int = Path(gt=0),
    db: AsyncSession = Depends(get_db),
):
    title = await get_title_or_404(db, production_id, title_id)
    async with atomic(db):
        await delete_title(db, title)
