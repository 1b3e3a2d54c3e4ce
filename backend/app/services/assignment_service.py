"""Assignment Service — skill-gated segment role assignments and their bulk copy.

Invariants:
    - A person can only fill a position when they hold its required skill:
      the position's configured skill, or else the canonical one for its name
    - A required skill code missing from the catalog blocks the assignment (422)
    - Copy targets must exist and belong to the source segment's production
    - merge mode never duplicates an existing (segment, person, position) triple;
      overwrite mode clears the targets first

Design Decisions:
    - Copy deduplicates in Python instead of INSERT ... ON CONFLICT: works the same
      on PostgreSQL and SQLite (ADR: tests run on SQLite)
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import CopyMode
from app.core.errors import (
    BusinessRuleError, ConflictError, ErrorContext, InvalidArgumentError,
    ResourceNotFoundError, SkillMissingError,
)
from app.core.position_skill import (
    DEFAULT_SEGMENT_POSITIONS, GLOBAL_SEGMENT_NAME,
    required_skill_code_for_position, resolve_required_skill_code,
)
from app.models.person import Person
from app.models.person_skill import PersonSkill
from app.models.position import Position
from app.models.production_segment import ProductionSegment
from app.models.segment_default_position import SegmentDefaultPosition
from app.models.segment_role_assignment import SegmentRoleAssignment
from app.models.skill import Skill
from app.schemas.segment import DefaultPositionResponse

logger = logging.getLogger(__name__)


async def create_assignment(
    db: AsyncSession, segment: ProductionSegment, person_id: int, position_id: int,
) -> SegmentRoleAssignment:
    person = await db.get(Person, person_id)
    if not person:
        raise ResourceNotFoundError("Person", person_id)
    position = await db.get(Position, position_id)
    if not position:
        raise ResourceNotFoundError("Position", position_id)

    await _check_skill_gate(db, person, position)

    existing = await db.execute(
        select(SegmentRoleAssignment.id)
        .where(SegmentRoleAssignment.production_segment_id == segment.id)
        .where(SegmentRoleAssignment.person_id == person_id)
        .where(SegmentRoleAssignment.position_id == position_id),
    )
    if existing.scalar_one_or_none() is not None:
        raise ConflictError(
            "Duplicate assignment for this segment",
            ErrorContext(production_id=segment.production_id, resource_id=segment.id),
        )

    assignment = SegmentRoleAssignment(
        production_segment_id=segment.id,
        person_id=person_id,
        position_id=position_id,
        person=person,
        position=position,
    )
    db.add(assignment)
    await db.flush()
    return assignment


async def _check_skill_gate(db: AsyncSession, person: Person, position: Position) -> None:
    configured = position.skill.code if position.skill else None
    required = resolve_required_skill_code(position.name, configured)
    if not required:
        return
    skill = (
        await db.execute(select(Skill).where(Skill.code == required))
    ).scalar_one_or_none()
    if not skill:
        raise BusinessRuleError(
            f"Required skill {required} does not exist", "SKILL_UNKNOWN",
        )
    held = await db.execute(
        select(PersonSkill.id)
        .where(PersonSkill.person_id == person.id)
        .where(PersonSkill.skill_id == skill.id),
    )
    if held.scalar_one_or_none() is None:
        raise SkillMissingError(required)


async def list_assignments(
    db: AsyncSession, segment_id: int,
) -> list[SegmentRoleAssignment]:
    result = await db.execute(
        select(SegmentRoleAssignment)
        .where(SegmentRoleAssignment.production_segment_id == segment_id)
        .order_by(SegmentRoleAssignment.id),
    )
    return list(result.scalars().all())


async def delete_assignment(
    db: AsyncSession, segment_id: int, assignment_id: int,
) -> None:
    assignment = await db.get(SegmentRoleAssignment, assignment_id)
    if not assignment or assignment.production_segment_id != segment_id:
        raise ResourceNotFoundError("SegmentRoleAssignment", assignment_id)
    await db.delete(assignment)


async def copy_assignments(
    db: AsyncSession,
    source: ProductionSegment,
    target_ids: list[int],
    mode: CopyMode,
) -> dict:
    """Copy source's assignments onto each target. Returns created/deleted counts."""
    targets = (
        await db.execute(
            select(ProductionSegment).where(ProductionSegment.id.in_(target_ids)),
        )
    ).scalars().all()
    if len(targets) != len(target_ids):
        raise ResourceNotFoundError("ProductionSegment", _missing(target_ids, targets))
    if any(t.production_id != source.production_id for t in targets):
        raise InvalidArgumentError(
            "Targets must belong to same production", "target_segment_ids",
        )

    triples = [(a.person_id, a.position_id) for a in await list_assignments(db, source.id)]

    deleted = 0
    if mode == CopyMode.OVERWRITE:
        result = await db.execute(
            delete(SegmentRoleAssignment)
            .where(SegmentRoleAssignment.production_segment_id.in_(target_ids)),
        )
        deleted = result.rowcount or 0
        existing: set[tuple[int, int, int]] = set()
    else:
        rows = await db.execute(
            select(
                SegmentRoleAssignment.production_segment_id,
                SegmentRoleAssignment.person_id,
                SegmentRoleAssignment.position_id,
            ).where(SegmentRoleAssignment.production_segment_id.in_(target_ids)),
        )
        existing = {(r[0], r[1], r[2]) for r in rows.all()}

    created = 0
    for target_id in target_ids:
        for person_id, position_id in triples:
            if (target_id, person_id, position_id) in existing:
                continue
            db.add(SegmentRoleAssignment(
                production_segment_id=target_id,
                person_id=person_id,
                position_id=position_id,
            ))
            created += 1
    await db.flush()

    logger.info(
        f"Copied {created} assignments from segment {source.id} ({mode.value})",
        extra={"production_id": source.production_id, "segment_id": source.id},
    )
    return {"created": created, "deleted": deleted, "targets": target_ids, "mode": mode}


def _missing(target_ids: list[int], found) -> int:
    found_ids = {t.id for t in found}
    return next(i for i in target_ids if i not in found_ids)


# ─── Default positions ─────────────────────────────────────────

async def default_positions_for_segment(
    db: AsyncSession, segment: ProductionSegment,
) -> list[DefaultPositionResponse]:
    """Configured defaults for the segment name, else the global set, else built-ins."""
    for name in (segment.name, GLOBAL_SEGMENT_NAME):
        configured = await list_segment_defaults(db, name)
        if configured:
            return [
                DefaultPositionResponse(
                    id=d.position.id,
                    name=d.position.name,
                    order=d.order,
                    required_skill_code=d.position.skill.code if d.position.skill else None,
                )
                for d in configured
            ]
    return await _builtin_default_positions(db)


async def _builtin_default_positions(db: AsyncSession) -> list[DefaultPositionResponse]:
    """Built-in list; positions missing from the catalog are created on the fly."""
    out = []
    for order, name in enumerate(DEFAULT_SEGMENT_POSITIONS):
        position = (
            await db.execute(select(Position).where(Position.name == name))
        ).scalar_one_or_none()
        if not position:
            position = Position(name=name, skill_id=None)
            db.add(position)
            await db.flush()
            await db.refresh(position, ["skill"])
        required = (
            position.skill.code if position.skill
            else required_skill_code_for_position(name)
        )
        out.append(DefaultPositionResponse(
            id=position.id, name=position.name, order=order,
            required_skill_code=required,
        ))
    return out


async def list_segment_defaults(
    db: AsyncSession, segment_name: str,
) -> list[SegmentDefaultPosition]:
    result = await db.execute(
        select(SegmentDefaultPosition)
        .where(SegmentDefaultPosition.segment_name == segment_name)
        .order_by(SegmentDefaultPosition.order, SegmentDefaultPosition.id),
    )
    return list(result.scalars().all())
