"""Skill Catalog Routes — search, CRUD and JSON import/export.

Invariants:
    - Codes are unique (409 on duplicate), upper-cased on the way in
    - A skill held by a person or configured on a position cannot be deleted (409)
    - /export-json and /import-json are declared before /{skill_id}
"""

from fastapi import APIRouter, Body, Depends, Path, Query, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routes.lookups import get_or_404
from app.core.errors import ConflictError
from app.infrastructure.database import atomic, get_db
from app.models.skill import Skill
from app.schemas.catalog import (
    SkillImportResult, SkillInput, SkillPage, SkillResponse, SkillUpdate,
)
from app.services.catalog_service import (
    ensure_skill_unused, export_skills, import_skills, search_skills,
)

router = APIRouter(prefix="/api/v1/skills", tags=["skills"])


async def _ensure_code_free(
    db: AsyncSession, code: str, exclude_id: int | None = None,
) -> None:
    query = select(func.count(Skill.id)).where(Skill.code == code)
    if exclude_id is not None:
        query = query.where(Skill.id != exclude_id)
    if (await db.execute(query)).scalar_one():
        raise ConflictError(f"Skill code {code} already exists")


@router.get("", response_model=SkillPage)
async def list_skills(
    q: str | None = Query(None, max_length=100),
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=200),
    db: AsyncSession = Depends(get_db),
):
    return await search_skills(db, q, page, limit)


@router.get("/export-json")
async def export_skills_json(db: AsyncSession = Depends(get_db)):
    return await export_skills(db)


@router.post("/import-json", response_model=SkillImportResult)
async def import_skills_json(
    items: list = Body(...), db: AsyncSession = Depends(get_db),
):
    """Upsert a JSON array of skills by code; invalid items are reported, not fatal."""
    async with atomic(db):
        result = await import_skills(db, items)
    return result


@router.get("/{skill_id}", response_model=SkillResponse)
async def get_skill(skill_id: int = Path(gt=0), db: AsyncSession = Depends(get_db)):
    return await get_or_404(db, Skill, skill_id, "Skill")


@router.post("", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
async def create_skill(body: SkillInput, db: AsyncSession = Depends(get_db)):
    await _ensure_code_free(db, body.code)
    async with atomic(db):
        skill = Skill(**body.model_dump())
        db.add(skill)
    return skill


@router.put("/{skill_id}", response_model=SkillResponse)
async def update_skill(
    body: SkillUpdate,
    skill_id: int = Path(gt=0),
    db: AsyncSession = Depends(get_db),
):
    skill = await get_or_404(db, Skill, skill_id, "Skill")
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    if "code" in changes:
        await _ensure_code_free(db, changes["code"], exclude_id=skill_id)
    async with atomic(db):
        for key, value in changes.items():
            setattr(skill, key, value)
    return skill


@router.delete("/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_skill(skill_id: int = Path(gt=0), db: AsyncSession = Depends(get_db)):
    skill = await get_or_404(db, Skill, skill_id, "Skill")
    await ensure_skill_unused(db, skill_id)
    async with atomic(db):
        await db.delete(skill)
