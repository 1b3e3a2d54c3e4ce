"""Service Probes — liveness always up, readiness tracks the live session manager.

Tests:
    - Readiness resolves db_manager at request time (set after the router import)
    - 503 before init_db, and when the schema has not been created
"""

import app.infrastructure.database as db_module
from app.infrastructure.database import DatabaseSessionManager


async def test_liveness(client):
    resp = await client.get("/api/v1/health/")
    assert resp.status_code == 200
    assert resp.json()["service"] == "korfbal-stream-api"


async def test_ready_with_live_manager(client, seed_production):
    resp = await client.get("/api/v1/health/ready")
    assert resp.status_code == 200
    body = resp.json()
    assert body["checks"] == {"database": "healthy", "schema": "present"}
    assert body["active_productions"] == 0


async def test_ready_counts_active_production(client, seed_production):
    await client.post(f"/api/v1/productions/{seed_production.id}/activate")
    resp = await client.get("/api/v1/health/ready")
    assert resp.json()["active_productions"] == 1


async def test_not_ready_before_init(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    resp = await client.get("/api/v1/health/ready")
    assert resp.status_code == 503
    assert resp.json()["reason"] == "database_not_initialized"


async def test_not_ready_without_schema(client, monkeypatch):
    empty = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    monkeypatch.setattr(db_module, "db_manager", empty)
    try:
        resp = await client.get("/api/v1/health/ready")
    finally:
        await empty.dispose()
    assert resp.status_code == 503
    assert resp.json()["reason"] == "schema_missing"
