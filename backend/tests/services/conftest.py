"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session (one session per request)
    - db_manager patched so the readiness probe pings the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (ADR: the unique (production_id, order) keys are enforced row by row on
      SQLite too, so the two-phase shift is exercised for real)
    - Seed fixtures write through test_db directly, routes under test go through client
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.models.match_schedule import MatchSchedule
from app.models.person import Person
from app.models.person_skill import PersonSkill
from app.models.position import Position
from app.models.production import Production
from app.models.production_segment import ProductionSegment
from app.models.skill import Skill
import app.infrastructure.database as db_module
from app.main import app

MATCH_START = datetime(2026, 3, 14, 15, 30, tzinfo=timezone.utc)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


# ─── Seed data ──────────────────────────────────────────────────

@pytest.fixture
async def seed_match(test_db):
    match = MatchSchedule(
        home_team_name="Fortuna/Ruitenheer 1",
        away_team_name="PKC/SWKGroep 1",
        date=MATCH_START,
        field_name="Korfbalcentrum",
        is_home_match=True,
    )
    test_db.add(match)
    await test_db.commit()
    return match


@pytest.fixture
async def seed_production(test_db, seed_match):
    production = Production(match_schedule_id=seed_match.id)
    test_db.add(production)
    await test_db.commit()
    return production


@pytest.fixture
async def seed_segments(test_db, seed_production):
    """Segments A, B, C, D at orders 1..4, nothing anchored."""
    segments = [
        ProductionSegment(
            production_id=seed_production.id, name=name,
            duration_minutes=10, order=order, is_time_anchor=False,
            assignments=[],
        )
        for order, name in enumerate("ABCD", start=1)
    ]
    test_db.add_all(segments)
    await test_db.commit()
    return segments


@pytest.fixture
async def seed_crew(test_db):
    """Skill REGISSEUR, position 'regie', and two persons (one holding it)."""
    skill = Skill(
        code="REGISSEUR", name="Regisseur",
        name_male="Regisseur", name_female="Regisseuse",
    )
    position = Position(name="regie")
    director = Person(name="Anouk de Vries", gender="female")
    rookie = Person(name="Bram Jansen", gender="male")
    test_db.add_all([skill, position, director, rookie])
    await test_db.flush()
    test_db.add(PersonSkill(person_id=director.id, skill_id=skill.id))
    await test_db.commit()
    return {
        "skill": skill, "position": position,
        "director": director, "rookie": rookie,
    }
