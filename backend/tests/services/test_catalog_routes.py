"""Catalog Routes — skills, positions, persons and matches.

Tests:
    - Skill search/pagination, duplicate code 409, in-use delete 409
    - JSON export/import round trip with per-item problems
    - Position skill validation and in-use delete
    - Person skills add/remove; person delete cascades assignments
    - Match listing with the home-team filter
"""

from app.models.segment_role_assignment import SegmentRoleAssignment

CAMERA = {
    "code": "camera_zoom", "name": "Camera zoom",
    "name_male": "Cameraman", "name_female": "Cameravrouw",
}


async def _skill(client, **overrides) -> dict:
    resp = await client.post("/api/v1/skills", json={**CAMERA, **overrides})
    assert resp.status_code == 201
    return resp.json()


# ─── Skills ─────────────────────────────────────────────────────

async def test_create_skill_uppercases_code(client):
    skill = await _skill(client)
    assert skill["code"] == "CAMERA_ZOOM"


async def test_duplicate_skill_code_409(client):
    await _skill(client)
    resp = await client.post("/api/v1/skills", json={**CAMERA, "code": "CAMERA_ZOOM"})
    assert resp.status_code == 409


async def test_search_and_paginate_skills(client):
    for i in range(5):
        await _skill(client, code=f"SKILL_{i}", name=f"Skill {i}")
    await _skill(client, code="REGISSEUR", name="Regisseur")

    page = (await client.get("/api/v1/skills", params={"limit": 2, "page": 2})).json()
    assert (page["total"], page["pages"], page["page"]) == (6, 3, 2)
    assert len(page["items"]) == 2

    found = (await client.get("/api/v1/skills", params={"q": "regis"})).json()
    assert [s["code"] for s in found["items"]] == ["REGISSEUR"]


async def test_update_skill(client):
    skill = await _skill(client)
    resp = await client.put(f"/api/v1/skills/{skill['id']}", json={"name": "Zoom"})
    assert resp.json()["name"] == "Zoom"
    assert resp.json()["code"] == "CAMERA_ZOOM"


async def test_delete_skill_in_use_409(client, seed_crew):
    resp = await client.delete(f"/api/v1/skills/{seed_crew['skill'].id}")
    assert resp.status_code == 409


async def test_delete_unused_skill(client):
    skill = await _skill(client)
    resp = await client.delete(f"/api/v1/skills/{skill['id']}")
    assert resp.status_code == 204
    assert (await client.get(f"/api/v1/skills/{skill['id']}")).status_code == 404


async def test_export_and_import_skills(client):
    await _skill(client)
    exported = (await client.get("/api/v1/skills/export-json")).json()
    assert exported == [{
        "code": "CAMERA_ZOOM", "name": "Camera zoom",
        "name_male": "Cameraman", "name_female": "Cameravrouw",
    }]

    resp = await client.post("/api/v1/skills/import-json", json=[
        {**exported[0], "name": "Camera (zoom)"},
        {"code": "analist", "name": "Analist", "name_male": "Analist",
         "name_female": "Analiste"},
        {"code": "BROKEN"},
        "not-an-object",
    ])
    assert resp.status_code == 200
    result = resp.json()
    assert (result["total"], result["created"], result["updated"]) == (4, 1, 1)
    assert [p["code"] for p in result["problems"]] == ["BROKEN", "unknown"]

    codes = [s["code"] for s in (await client.get("/api/v1/skills")).json()["items"]]
    assert codes == ["ANALIST", "CAMERA_ZOOM"]


# ─── Positions ──────────────────────────────────────────────────

async def test_create_position_with_skill(client):
    skill = await _skill(client)
    resp = await client.post(
        "/api/v1/positions", json={"name": "camera links", "skill_id": skill["id"]},
    )
    assert resp.status_code == 201
    assert resp.json()["skill"]["code"] == "CAMERA_ZOOM"


async def test_create_position_unknown_skill_422(client):
    resp = await client.post("/api/v1/positions", json={"name": "regie", "skill_id": 9})
    assert resp.status_code == 422


async def test_duplicate_position_409(client, seed_crew):
    resp = await client.post("/api/v1/positions", json={"name": "regie"})
    assert resp.status_code == 409


async def test_update_position_clears_skill(client):
    skill = await _skill(client)
    created = (await client.post(
        "/api/v1/positions", json={"name": "camera links", "skill_id": skill["id"]},
    )).json()
    resp = await client.put(
        f"/api/v1/positions/{created['id']}", json={"skill_id": None},
    )
    assert resp.json()["skill_id"] is None
    assert resp.json()["skill"] is None


async def test_delete_position_in_use_409(client, test_db, seed_segments, seed_crew):
    test_db.add(SegmentRoleAssignment(
        production_segment_id=seed_segments[0].id,
        person_id=seed_crew["director"].id,
        position_id=seed_crew["position"].id,
    ))
    await test_db.commit()
    resp = await client.delete(f"/api/v1/positions/{seed_crew['position'].id}")
    assert resp.status_code == 409


# ─── Persons ────────────────────────────────────────────────────

async def test_person_crud(client):
    resp = await client.post("/api/v1/persons", json={"name": " Sanne ", "gender": "female"})
    assert resp.status_code == 201
    person = resp.json()
    assert (person["name"], person["skills"]) == ("Sanne", [])

    resp = await client.put(f"/api/v1/persons/{person['id']}", json={"name": "Sanne B"})
    assert resp.json()["name"] == "Sanne B"

    listed = (await client.get("/api/v1/persons", params={"q": "sanne"})).json()
    assert [p["id"] for p in listed] == [person["id"]]


async def test_person_invalid_gender_400(client):
    resp = await client.post("/api/v1/persons", json={"name": "X", "gender": "other"})
    assert resp.status_code == 400


async def test_person_skills(client, seed_crew):
    rookie = seed_crew["rookie"].id
    skill = seed_crew["skill"].id
    resp = await client.post(f"/api/v1/persons/{rookie}/skills", json={"skill_id": skill})
    assert resp.status_code == 201
    resp = await client.post(f"/api/v1/persons/{rookie}/skills", json={"skill_id": skill})
    assert resp.status_code == 409

    held = (await client.get(f"/api/v1/persons/{rookie}/skills")).json()
    assert [s["code"] for s in held] == ["REGISSEUR"]

    resp = await client.delete(f"/api/v1/persons/{rookie}/skills/{skill}")
    assert resp.status_code == 204
    assert (await client.get(f"/api/v1/persons/{rookie}/skills")).json() == []


async def test_delete_person_removes_assignments(client, seed_segments, seed_crew):
    seg = seed_segments[0].id
    await client.post(
        f"/api/v1/segments/{seg}/assignments",
        json={"person_id": seed_crew["director"].id,
              "position_id": seed_crew["position"].id},
    )
    resp = await client.delete(f"/api/v1/persons/{seed_crew['director'].id}")
    assert resp.status_code == 204
    assert (await client.get(f"/api/v1/segments/{seg}/assignments")).json() == []


# ─── Matches ────────────────────────────────────────────────────

async def test_matches_filtered_by_home_team(client, seed_match):
    await client.post("/api/v1/matches", json={
        "home_team_name": "DOS'46 1", "away_team_name": "Fortuna 1",
        "date": "2026-04-04T19:00:00Z", "is_home_match": False,
    })
    everything = (await client.get("/api/v1/matches")).json()
    assert len(everything) == 2
    fortuna = (await client.get("/api/v1/matches", params={"team": "fortuna"})).json()
    assert [m["id"] for m in fortuna] == [seed_match.id]
