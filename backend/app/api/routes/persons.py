"""Person Routes — crew members, their skills and their removal.

Invariants:
    - A person holds a skill at most once (409 on duplicate)
    - Deleting a person removes their skills and segment assignments
"""

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routes.lookups import get_or_404
from app.core.errors import ConflictError, ResourceNotFoundError
from app.infrastructure.database import atomic, get_db
from app.models.person import Person
from app.models.person_skill import PersonSkill
from app.models.skill import Skill
from app.schemas.catalog import (
    PersonInput, PersonResponse, PersonSkillAdd, PersonUpdate, SkillResponse,
)

router = APIRouter(prefix="/api/v1/persons", tags=["persons"])


def _person_response(person: Person) -> PersonResponse:
    return PersonResponse(
        id=person.id,
        name=person.name,
        gender=person.gender,
        skills=[SkillResponse.model_validate(ps.skill) for ps in person.skills],
    )


@router.get("", response_model=list[PersonResponse])
async def list_persons(
    q: str | None = Query(None, max_length=200),
    db: AsyncSession = Depends(get_db),
):
    query = select(Person).order_by(Person.name, Person.id)
    if q and q.strip():
        query = query.where(func.lower(Person.name).contains(q.strip().lower()))
    result = await db.execute(query)
    return [_person_response(p) for p in result.scalars().all()]


@router.post("", response_model=PersonResponse, status_code=status.HTTP_201_CREATED)
async def create_person(body: PersonInput, db: AsyncSession = Depends(get_db)):
    async with atomic(db):
        person = Person(name=body.name, gender=body.gender.value, skills=[])
        db.add(person)
    return _person_response(person)


@router.get("/{person_id}", response_model=PersonResponse)
async def get_person(person_id: int = Path(gt=0), db: AsyncSession = Depends(get_db)):
    return _person_response(await get_or_404(db, Person, person_id, "Person"))


@router.put("/{person_id}", response_model=PersonResponse)
async def update_person(
    body: PersonUpdate,
    person_id: int = Path(gt=0),
    db: AsyncSession = Depends(get_db),
):
    person = await get_or_404(db, Person, person_id, "Person")
    async with atomic(db):
        if body.name is not None and body.name.strip():
            person.name = body.name.strip()
        if body.gender is not None:
            person.gender = body.gender.value
    return _person_response(person)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(person_id: int = Path(gt=0), db: AsyncSession = Depends(get_db)):
    person = await get_or_404(db, Person, person_id, "Person")
    async with atomic(db):
        await db.delete(person)


# ─── Person skills ──────────────────────────────────────────────

@router.get("/{person_id}/skills", response_model=list[SkillResponse])
async def list_person_skills(
    person_id: int = Path(gt=0), db: AsyncSession = Depends(get_db),
):
    person = await get_or_404(db, Person, person_id, "Person")
    return [ps.skill for ps in person.skills]


@router.post(
    "/{person_id}/skills",
    response_model=SkillResponse, status_code=status.HTTP_201_CREATED,
)
async def add_person_skill(
    body: PersonSkillAdd,
    person_id: int = Path(gt=0),
    db: AsyncSession = Depends(get_db),
):
    person = await get_or_404(db, Person, person_id, "Person")
    skill = await get_or_404(db, Skill, body.skill_id, "Skill")
    if any(ps.skill_id == skill.id for ps in person.skills):
        raise ConflictError(f"Person already has skill {skill.code}")
    async with atomic(db):
        person.skills.append(PersonSkill(skill_id=skill.id, skill=skill))
    return skill


@router.delete(
    "/{person_id}/skills/{skill_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_person_skill(
    person_id: int = Path(gt=0),
    skill_id: int = Path(gt=0),
    db: AsyncSession = Depends(get_db),
):
    person = await get_or_404(db, Person, person_id, "Person")
    held = next((ps for ps in person.skills if ps.skill_id == skill_id), None)
    if held is None:
        raise ResourceNotFoundError("PersonSkill", skill_id)
    async with atomic(db):
        person.skills.remove(held)
