"""Position Catalog Routes — crew seats and the skill each one requires."""

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routes.lookups import get_or_404
from app.core.errors import BusinessRuleError, ConflictError
from app.infrastructure.database import atomic, get_db
from app.models.position import Position
from app.models.skill import Skill
from app.schemas.catalog import PositionInput, PositionResponse, PositionUpdate
from app.services.catalog_service import ensure_position_unused

router = APIRouter(prefix="/api/v1/positions", tags=["positions"])


async def _ensure_name_free(
    db: AsyncSession, name: str, exclude_id: int | None = None,
) -> None:
    query = select(func.count(Position.id)).where(Position.name == name)
    if exclude_id is not None:
        query = query.where(Position.id != exclude_id)
    if (await db.execute(query)).scalar_one():
        raise ConflictError(f"Position '{name}' already exists")


async def _skill_or_422(db: AsyncSession, skill_id: int | None) -> Skill | None:
    if skill_id is None:
        return None
    skill = await db.get(Skill, skill_id)
    if not skill:
        raise BusinessRuleError(f"Skill {skill_id} does not exist", "SKILL_UNKNOWN")
    return skill


@router.get("", response_model=list[PositionResponse])
async def list_positions(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(Position).order_by(Position.name))
    return result.scalars().all()


@router.post("", response_model=PositionResponse, status_code=status.HTTP_201_CREATED)
async def create_position(body: PositionInput, db: AsyncSession = Depends(get_db)):
    name = body.name.strip()
    skill = await _skill_or_422(db, body.skill_id)
    await _ensure_name_free(db, name)
    async with atomic(db):
        position = Position(name=name, skill_id=body.skill_id, skill=skill)
        db.add(position)
    return position


@router.put("/{position_id}", response_model=PositionResponse)
async def update_position(
    body: PositionUpdate,
    position_id: int = Path(gt=0),
    db: AsyncSession = Depends(get_db),
):
    """Rename and/or (re)set the required skill; an explicit null clears it."""
    position = await get_or_404(db, Position, position_id, "Position")
    if body.name is not None:
        await _ensure_name_free(db, body.name.strip(), exclude_id=position_id)
    skill = await _skill_or_422(db, body.skill_id)
    async with atomic(db):
        if body.name is not None:
            position.name = body.name.strip()
        if "skill_id" in body.model_fields_set:
            position.skill_id = body.skill_id
            position.skill = skill
    return position


@router.delete("/{position_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_position(
    position_id: int = Path(gt=0), db: AsyncSession = Depends(get_db),
):
    position = await get_or_404(db, Position, position_id, "Position")
    await ensure_position_unused(db, position_id)
    async with atomic(db):
        await db.delete(position)
