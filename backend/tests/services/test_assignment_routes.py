"""Assignment Routes — skill-gated crew per segment, copy and default positions.

Tests:
    - Skill gate: held skill passes, missing skill 422, unknown required code 422
    - Position-configured skill overrides the canonical table
    - Duplicate assignment 409; copy merge/overwrite; foreign targets rejected
    - Default positions: segment name, then global set, then built-ins
"""

from app.models.position import Position


async def _assign(client, segment_id, person_id, position_id):
    return await client.post(
        f"/api/v1/segments/{segment_id}/assignments",
        json={"person_id": person_id, "position_id": position_id},
    )


async def test_assign_person_with_required_skill(client, seed_segments, seed_crew):
    seg = seed_segments[0]
    resp = await _assign(client, seg.id, seed_crew["director"].id, seed_crew["position"].id)
    assert resp.status_code == 201
    body = resp.json()
    assert body["person"]["name"] == "Anouk de Vries"
    assert body["position"]["name"] == "regie"

    listed = (await client.get(f"/api/v1/segments/{seg.id}/assignments")).json()
    assert [a["id"] for a in listed] == [body["id"]]


async def test_assign_person_without_skill_422(client, seed_segments, seed_crew):
    resp = await _assign(
        client, seed_segments[0].id, seed_crew["rookie"].id, seed_crew["position"].id,
    )
    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "SKILL_MISSING"


async def test_assign_required_skill_not_in_catalog_422(
    client, test_db, seed_segments, seed_crew,
):
    camera = Position(name="camera links")
    test_db.add(camera)
    await test_db.commit()
    resp = await _assign(
        client, seed_segments[0].id, seed_crew["director"].id, camera.id,
    )
    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "SKILL_UNKNOWN"


async def test_position_skill_overrides_table(client, test_db, seed_segments, seed_crew):
    """'camera links' normally needs CAMERA_ZOOM; configured REGISSEUR wins."""
    camera = Position(name="camera links", skill_id=seed_crew["skill"].id)
    test_db.add(camera)
    await test_db.commit()
    resp = await _assign(
        client, seed_segments[0].id, seed_crew["director"].id, camera.id,
    )
    assert resp.status_code == 201


async def test_position_without_requirement_is_open(
    client, test_db, seed_segments, seed_crew,
):
    runner = Position(name="runner")
    test_db.add(runner)
    await test_db.commit()
    resp = await _assign(client, seed_segments[0].id, seed_crew["rookie"].id, runner.id)
    assert resp.status_code == 201


async def test_duplicate_assignment_409(client, seed_segments, seed_crew):
    args = (seed_segments[0].id, seed_crew["director"].id, seed_crew["position"].id)
    await _assign(client, *args)
    resp = await _assign(client, *args)
    assert resp.status_code == 409


async def test_assign_unknown_person_404(client, seed_segments, seed_crew):
    resp = await _assign(client, seed_segments[0].id, 999, seed_crew["position"].id)
    assert resp.status_code == 404


async def test_delete_assignment(client, seed_segments, seed_crew):
    seg = seed_segments[0]
    created = (await _assign(
        client, seg.id, seed_crew["director"].id, seed_crew["position"].id,
    )).json()
    resp = await client.delete(f"/api/v1/segments/{seg.id}/assignments/{created['id']}")
    assert resp.status_code == 204
    assert (await client.get(f"/api/v1/segments/{seg.id}/assignments")).json() == []


async def test_delete_assignment_of_other_segment_404(client, seed_segments, seed_crew):
    created = (await _assign(
        client, seed_segments[0].id, seed_crew["director"].id, seed_crew["position"].id,
    )).json()
    resp = await client.delete(
        f"/api/v1/segments/{seed_segments[1].id}/assignments/{created['id']}",
    )
    assert resp.status_code == 404


async def test_delete_segment_removes_its_assignments(client, seed_segments, seed_crew):
    seg = seed_segments[0]
    await _assign(client, seg.id, seed_crew["director"].id, seed_crew["position"].id)
    resp = await client.delete(f"/api/v1/segments/{seg.id}")
    assert resp.status_code == 204
    resp = await client.get(f"/api/v1/segments/{seg.id}/assignments")
    assert resp.status_code == 404


# ─── Copy ───────────────────────────────────────────────────────

async def test_copy_merge_skips_existing(client, seed_segments, seed_crew):
    src, t1, t2 = seed_segments[0], seed_segments[1], seed_segments[2]
    person, position = seed_crew["director"].id, seed_crew["position"].id
    await _assign(client, src.id, person, position)
    await _assign(client, t1.id, person, position)

    resp = await client.post(
        f"/api/v1/segments/{src.id}/assignments/copy",
        json={"target_segment_ids": [t1.id, t2.id, t2.id]},
    )
    assert resp.status_code == 200
    assert resp.json() == {
        "created": 1, "deleted": 0, "targets": [t1.id, t2.id], "mode": "merge",
    }
    assert len((await client.get(f"/api/v1/segments/{t2.id}/assignments")).json()) == 1


async def test_copy_overwrite_clears_targets(
    client, test_db, seed_segments, seed_crew,
):
    runner = Position(name="runner")
    test_db.add(runner)
    await test_db.commit()
    src, target = seed_segments[0], seed_segments[1]
    await _assign(client, src.id, seed_crew["director"].id, seed_crew["position"].id)
    await _assign(client, target.id, seed_crew["rookie"].id, runner.id)

    resp = await client.post(
        f"/api/v1/segments/{src.id}/assignments/copy",
        json={"target_segment_ids": [target.id], "mode": "overwrite"},
    )
    assert resp.json()["created"] == 1
    assert resp.json()["deleted"] == 1
    listed = (await client.get(f"/api/v1/segments/{target.id}/assignments")).json()
    assert [a["person"]["name"] for a in listed] == ["Anouk de Vries"]


async def test_copy_to_missing_target_404(client, seed_segments):
    resp = await client.post(
        f"/api/v1/segments/{seed_segments[0].id}/assignments/copy",
        json={"target_segment_ids": [4242]},
    )
    assert resp.status_code == 404


async def test_copy_to_other_production_400(client, test_db, seed_segments, seed_match):
    from app.models.production import Production
    from app.models.production_segment import ProductionSegment
    from app.models.match_schedule import MatchSchedule

    match = MatchSchedule(
        home_team_name="KCC 1", away_team_name="Dalto 1", date=seed_match.date,
    )
    test_db.add(match)
    await test_db.flush()
    other = Production(match_schedule_id=match.id)
    test_db.add(other)
    await test_db.flush()
    foreign = ProductionSegment(
        production_id=other.id, name="X", duration_minutes=5, order=1,
        is_time_anchor=False,
    )
    test_db.add(foreign)
    await test_db.commit()

    resp = await client.post(
        f"/api/v1/segments/{seed_segments[0].id}/assignments/copy",
        json={"target_segment_ids": [foreign.id]},
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_ARGUMENT"


async def test_copy_requires_targets(client, seed_segments):
    resp = await client.post(
        f"/api/v1/segments/{seed_segments[0].id}/assignments/copy",
        json={"target_segment_ids": []},
    )
    assert resp.status_code == 400


# ─── Default positions ──────────────────────────────────────────

async def test_builtin_positions_created_on_demand(client, seed_segments):
    resp = await client.get(f"/api/v1/segments/{seed_segments[0].id}/positions")
    assert resp.status_code == 200
    positions = resp.json()
    assert [p["name"] for p in positions][:3] == [
        "overzicht camera", "camera links", "camera rechts",
    ]
    by_name = {p["name"]: p["required_skill_code"] for p in positions}
    assert by_name["regie"] == "REGISSEUR"
    assert by_name["overzicht camera"] is None

    catalog = (await client.get("/api/v1/positions")).json()
    assert len(catalog) == 6


async def test_segment_name_defaults_win_over_global(
    client, test_db, seed_segments, seed_crew,
):
    commentary = Position(name="commentaar")
    test_db.add(commentary)
    await test_db.commit()
    resp = await client.put(
        f"/api/v1/segments/{seed_segments[0].id}", json={"name": "Voorbeschouwing"},
    )
    assert resp.status_code == 200
    resp = await client.put(
        "/api/v1/segment-default-positions",
        json={"segment_name": "Algemeen",
              "positions": [{"position_id": commentary.id, "order": 0}]},
    )
    assert resp.status_code == 200
    resp = await client.put(
        "/api/v1/segment-default-positions",
        json={"segment_name": "Voorbeschouwing",
              "positions": [{"position_id": seed_crew["position"].id, "order": 0}]},
    )
    assert resp.status_code == 200

    named = (await client.get(f"/api/v1/segments/{seed_segments[0].id}/positions")).json()
    assert [p["name"] for p in named] == ["regie"]
    fallback = (await client.get(f"/api/v1/segments/{seed_segments[1].id}/positions")).json()
    assert [p["name"] for p in fallback] == ["commentaar"]


async def test_segment_default_names(client, seed_crew):
    pos = seed_crew["position"].id
    for name in ("Algemeen", "Rust", "Eerste helft"):
        resp = await client.put(
            "/api/v1/segment-default-positions",
            json={"segment_name": name, "positions": [{"position_id": pos, "order": 0}]},
        )
        assert resp.status_code == 200
    resp = await client.get("/api/v1/segment-default-positions/names")
    assert resp.json() == {"items": ["Eerste helft", "Rust"], "has_global": True}

    resp = await client.get(
        "/api/v1/segment-default-positions", params={"segment_name": "Algemeen"},
    )
    assert [d["segment_name"] for d in resp.json()] == ["__GLOBAL__"]


async def test_segment_defaults_unknown_position_422(client):
    resp = await client.put(
        "/api/v1/segment-default-positions",
        json={"segment_name": "Rust", "positions": [{"position_id": 31, "order": 0}]},
    )
    assert resp.status_code == 422


async def test_segment_defaults_replace(client, test_db, seed_crew):
    extra = Position(name="muziek", skill_id=None)
    test_db.add(extra)
    await test_db.commit()
    pos = seed_crew["position"].id
    await client.put(
        "/api/v1/segment-default-positions",
        json={"segment_name": "Rust", "positions": [{"position_id": pos, "order": 0}]},
    )
    resp = await client.put(
        "/api/v1/segment-default-positions",
        json={"segment_name": "Rust", "positions": [
            {"position_id": extra.id, "order": 0},
            {"position_id": pos, "order": 1},
        ]},
    )
    assert [d["position"]["name"] for d in resp.json()] == ["muziek", "regie"]


async def test_segment_defaults_name_too_short_400(client, seed_crew):
    resp = await client.put(
        "/api/v1/segment-default-positions",
        json={"segment_name": "A",
              "positions": [{"position_id": seed_crew["position"].id, "order": 0}]},
    )
    assert resp.status_code == 400
