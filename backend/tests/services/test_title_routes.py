"""Title Routes — title definitions ordered like segments, plus explicit reorder."""


def _title(name, order=None):
    body = {"name": name, "parts": [{"source_type": "COMMENTARY"}]}
    if order is not None:
        body["order"] = order
    return body


async def _create(client, production_id, name, order=None) -> dict:
    resp = await client.post(
        f"/api/v1/productions/{production_id}/titles", json=_title(name, order),
    )
    assert resp.status_code == 201
    return resp.json()


async def _names(client, production_id) -> list[str]:
    resp = await client.get(f"/api/v1/productions/{production_id}/titles")
    titles = resp.json()
    assert [t["order"] for t in titles] == list(range(1, len(titles) + 1))
    return [t["name"] for t in titles]


async def test_create_titles_append_and_insert(client, seed_production):
    pid = seed_production.id
    await _create(client, pid, "Intro")
    await _create(client, pid, "Outro")
    created = await _create(client, pid, "Line-up", order=2)
    assert created["order"] == 2
    assert created["parts"][0]["team_side"] == "NONE"
    assert await _names(client, pid) == ["Intro", "Line-up", "Outro"]


async def test_create_title_invalid_part_400(client, seed_production):
    resp = await client.post(
        f"/api/v1/productions/{seed_production.id}/titles",
        json={"name": "Coach", "parts": [{"source_type": "TEAM_COACH"}]},
    )
    assert resp.status_code == 400


async def test_update_title_moves_and_replaces_parts(client, seed_production):
    pid = seed_production.id
    a = await _create(client, pid, "A")
    await _create(client, pid, "B")
    await _create(client, pid, "C")
    resp = await client.put(
        f"/api/v1/productions/{pid}/titles/{a['id']}",
        json={
            "order": 3,
            "enabled": False,
            "parts": [
                {"source_type": "TEAM_PLAYER", "team_side": "HOME", "limit": 1},
                {"source_type": "FREE_TEXT", "custom_function": "Scheids",
                 "custom_name": "Piet"},
            ],
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["order"] == 3
    assert body["enabled"] is False
    assert [p["source_type"] for p in body["parts"]] == ["TEAM_PLAYER", "FREE_TEXT"]
    assert await _names(client, pid) == ["B", "C", "A"]


async def test_title_of_other_production_404(client, test_db, seed_production):
    from datetime import datetime, timezone
    from app.models.match_schedule import MatchSchedule
    from app.models.production import Production

    match = MatchSchedule(
        home_team_name="KCC 1", away_team_name="Dalto 1",
        date=datetime(2026, 5, 1, tzinfo=timezone.utc),
    )
    test_db.add(match)
    await test_db.flush()
    other = Production(match_schedule_id=match.id)
    test_db.add(other)
    await test_db.commit()

    title = await _create(client, seed_production.id, "Intro")
    resp = await client.put(
        f"/api/v1/productions/{other.id}/titles/{title['id']}", json={"order": 1},
    )
    assert resp.status_code == 404


async def test_delete_title_renumbers(client, seed_production):
    pid = seed_production.id
    await _create(client, pid, "A")
    b = await _create(client, pid, "B")
    await _create(client, pid, "C")
    resp = await client.delete(f"/api/v1/productions/{pid}/titles/{b['id']}")
    assert resp.status_code == 204
    assert await _names(client, pid) == ["A", "C"]


async def test_reorder_titles(client, seed_production):
    pid = seed_production.id
    ids = [(await _create(client, pid, n))["id"] for n in "ABC"]
    resp = await client.patch(
        f"/api/v1/productions/{pid}/titles/reorder", json={"ids": ids[::-1]},
    )
    assert resp.status_code == 200
    assert [t["name"] for t in resp.json()] == ["C", "B", "A"]
    assert await _names(client, pid) == ["C", "B", "A"]


async def test_reorder_titles_partial_list_400(client, seed_production):
    pid = seed_production.id
    ids = [(await _create(client, pid, n))["id"] for n in "AB"]
    resp = await client.patch(
        f"/api/v1/productions/{pid}/titles/reorder", json={"ids": ids[:1]},
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_ARGUMENT"
    assert await _names(client, pid) == ["A", "B"]


async def test_title_boolean_order_400(client, seed_production):
    pid = seed_production.id
    a = await _create(client, pid, "A")
    await _create(client, pid, "B")
    resp = await client.post(
        f"/api/v1/productions/{pid}/titles", json=_title("C", order=True),
    )
    assert resp.status_code == 400
    resp = await client.put(
        f"/api/v1/productions/{pid}/titles/{a['id']}", json={"order": "2"},
    )
    assert resp.status_code == 400
    assert await _names(client, pid) == ["A", "B"]


async def test_reorder_titles_rejects_non_integer_ids(client, seed_production):
    pid = seed_production.id
    ids = [(await _create(client, pid, n))["id"] for n in "AB"]
    resp = await client.patch(
        f"/api/v1/productions/{pid}/titles/reorder",
        json={"ids": [str(ids[1]), ids[0]]},
    )
    assert resp.status_code == 400
    assert await _names(client, pid) == ["A", "B"]
