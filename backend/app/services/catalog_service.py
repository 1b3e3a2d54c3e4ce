"""Catalog Service — skill search, JSON import/export and in-use checks.

Invariants:
    - Import upserts by code; one bad item never aborts the rest of the batch
    - A skill or position referenced elsewhere cannot be deleted (ConflictError)
"""

import logging
import math

from pydantic import ValidationError
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ConflictError
from app.models.person_skill import PersonSkill
from app.models.position import Position
from app.models.segment_default_position import SegmentDefaultPosition
from app.models.segment_role_assignment import SegmentRoleAssignment
from app.models.skill import Skill
from app.schemas.catalog import SkillInput

logger = logging.getLogger(__name__)


async def search_skills(
    db: AsyncSession, q: str | None, page: int, limit: int,
) -> dict:
    query = select(Skill)
    count = select(func.count(Skill.id))
    if q and q.strip():
        pattern = f"%{q.strip().lower()}%"
        cond = or_(
            func.lower(Skill.code).like(pattern),
            func.lower(Skill.name).like(pattern),
            func.lower(Skill.name_male).like(pattern),
            func.lower(Skill.name_female).like(pattern),
        )
        query = query.where(cond)
        count = count.where(cond)
    total = (await db.execute(count)).scalar_one()
    items = (
        await db.execute(
            query.order_by(Skill.code).offset((page - 1) * limit).limit(limit),
        )
    ).scalars().all()
    return {
        "items": list(items),
        "page": page,
        "limit": limit,
        "total": total,
        "pages": math.ceil(total / limit) or 1,
    }


async def export_skills(db: AsyncSession) -> list[dict]:
    skills = (await db.execute(select(Skill).order_by(Skill.code))).scalars().all()
    return [
        {
            "code": s.code,
            "name": s.name,
            "name_male": s.name_male,
            "name_female": s.name_female,
        }
        for s in skills
    ]


async def import_skills(db: AsyncSession, items: list) -> dict:
    """Upsert every valid item by code; collect per-item problems."""
    created = updated = 0
    problems: list[dict] = []
    for raw in items:
        try:
            data = SkillInput.model_validate(raw)
        except ValidationError as e:
            code = raw.get("code") if isinstance(raw, dict) else None
            problems.append({
                "code": str(code or "unknown"),
                "reason": e.errors()[0]["msg"],
            })
            continue
        existing = (
            await db.execute(select(Skill).where(Skill.code == data.code))
        ).scalar_one_or_none()
        if existing:
            for key, value in data.model_dump().items():
                setattr(existing, key, value)
            updated += 1
        else:
            db.add(Skill(**data.model_dump()))
            created += 1
        await db.flush()
    logger.info(f"Imported skills: {created} created, {updated} updated, {len(problems)} problems")
    return {
        "total": len(items),
        "created": created,
        "updated": updated,
        "problems": problems,
    }


async def ensure_skill_unused(db: AsyncSession, skill_id: int) -> None:
    for column in (PersonSkill.skill_id, Position.skill_id):
        used = await db.execute(
            select(func.count()).where(column == skill_id),
        )
        if used.scalar_one():
            raise ConflictError("Skill is in use")


async def ensure_position_unused(db: AsyncSession, position_id: int) -> None:
    for column in (
        SegmentRoleAssignment.position_id, SegmentDefaultPosition.position_id,
    ):
        used = await db.execute(
            select(func.count()).where(column == position_id),
        )
        if used.scalar_one():
            raise ConflictError("Position is in use")
