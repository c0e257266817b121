# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from uuid import UUID

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from aeroliths.models.element import StrengthElement, WeaknessElement
from aeroliths.repositories.element_repository import StrengthRepository
from aeroliths.repositories.lithos_repository import LithosRepository
from tests.conftest import auth_headers, make_element, make_lithos, make_user

MISSING_ID = "00000000-0000-4000-8000-000000000000"


async def _admin_headers(db_session: AsyncSession) -> dict[str, str]:
    root = await make_user(db_session, username="root", role="admin")
    return auth_headers(root, "admin")


class TestPublicElements:
    async def test_list_sorted_with_edges(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        water = await make_element(db_session, "Water")
        fire = await make_element(db_session, "Fire")
        db_session.add(StrengthElement(element_id=water.id, strong_against_id=fire.id))
        await db_session.commit()

        resp = await client.get("/api/elements")
        assert resp.status_code == 200
        body = resp.json()
        assert body["count"] == 2
        assert [e["name"] for e in body["data"]] == ["Fire", "Water"]
        water_json = body["data"][1]
        assert water_json["strengthsFrom"][0]["strongAgainst"]["name"] == "Fire"
        assert water_json["weaknessesFrom"] == []

    async def test_list_when_every_element_has_edges(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        fire = await make_element(db_session, "Fire")
        water = await make_element(db_session, "Water")
        grass = await make_element(db_session, "Grass")
        db_session.add_all(
            [
                StrengthElement(element_id=water.id, strong_against_id=fire.id),
                StrengthElement(element_id=fire.id, strong_against_id=grass.id),
                StrengthElement(element_id=grass.id, strong_against_id=water.id),
                WeaknessElement(element_id=fire.id, weak_against_id=water.id),
                WeaknessElement(element_id=water.id, weak_against_id=grass.id),
            ]
        )
        await db_session.commit()

        resp = await client.get("/api/elements")
        assert resp.status_code == 200
        by_name = {e["name"]: e for e in resp.json()["data"]}
        assert [s["strongAgainst"]["name"] for s in by_name["Fire"]["strengthsFrom"]] == [
            "Grass"
        ]
        assert [w["weakAgainst"]["name"] for w in by_name["Fire"]["weaknessesFrom"]] == [
            "Water"
        ]
        assert [w["weakAgainst"]["name"] for w in by_name["Water"]["weaknessesFrom"]] == [
            "Grass"
        ]
        assert by_name["Grass"]["weaknessesFrom"] == []

    async def test_get_omits_empty_message(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        fire = await make_element(db_session, "Fire")
        resp = await client.get(f"/api/elements/{fire.id}")
        assert resp.json()["success"] is True
        assert "message" not in resp.json()

    async def test_get_with_lithos(self, client: AsyncClient, db_session: AsyncSession) -> None:
        fire = await make_element(db_session, "Fire")
        await make_lithos(db_session, "Ember", element=fire)
        resp = await client.get(f"/api/elements/{fire.id}")
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["name"] == "Fire"
        assert [item["name"] for item in data["lithos"]] == ["Ember"]

    async def test_get_missing(self, client: AsyncClient) -> None:
        for element_id in (MISSING_ID, "not-a-uuid"):
            resp = await client.get(f"/api/elements/{element_id}")
            assert resp.status_code == 404
            assert resp.json()["message"] == "Element not found"


class TestAdminElements:
    async def test_create(self, client: AsyncClient, db_session: AsyncSession) -> None:
        headers = await _admin_headers(db_session)
        resp = await client.post(
            "/api/admin/elements", json={"name": "Fire", "sprite": "/elements/fire.png"},
            headers=headers,
        )
        assert resp.status_code == 201
        body = resp.json()
        assert body["message"] == "Element created successfully"
        assert body["data"]["name"] == "Fire"
        UUID(body["data"]["id"])

    async def test_create_requires_admin(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        user = await make_user(db_session, username="ada")
        resp = await client.post(
            "/api/admin/elements", json={"name": "Fire", "sprite": "/f.png"},
            headers=auth_headers(user),
        )
        assert resp.status_code == 403
        assert resp.json()["message"] == "Insufficient permissions"
        listing = await client.get("/api/elements")
        assert listing.json()["count"] == 0

    async def test_create_validation(self, client: AsyncClient, db_session: AsyncSession) -> None:
        headers = await _admin_headers(db_session)
        resp = await client.post("/api/admin/elements", json={"name": 3}, headers=headers)
        assert resp.status_code == 400
        assert resp.json()["message"] == "Element name is required and must be a string"

    async def test_duplicate_name(self, client: AsyncClient, db_session: AsyncSession) -> None:
        headers = await _admin_headers(db_session)
        await make_element(db_session, "Fire")
        resp = await client.post(
            "/api/admin/elements", json={"name": "Fire", "sprite": "/f.png"}, headers=headers
        )
        assert resp.status_code == 409
        assert resp.json()["message"] == "An element with this name already exists"

    async def test_patch(self, client: AsyncClient, db_session: AsyncSession) -> None:
        headers = await _admin_headers(db_session)
        fire = await make_element(db_session, "Fire")
        resp = await client.patch(
            f"/api/admin/elements/{fire.id}", json={"sprite": "/new.png"}, headers=headers
        )
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert (data["name"], data["sprite"]) == ("Fire", "/new.png")

    async def test_patch_rules(self, client: AsyncClient, db_session: AsyncSession) -> None:
        headers = await _admin_headers(db_session)
        fire = await make_element(db_session, "Fire")
        await make_element(db_session, "Water")
        url = f"/api/admin/elements/{fire.id}"

        empty = await client.patch(url, json={}, headers=headers)
        assert empty.status_code == 400
        assert empty.json()["message"] == "No valid fields to update"

        bad_type = await client.patch(url, json={"name": 1}, headers=headers)
        assert bad_type.json()["message"] == "Element name must be a string"

        taken = await client.patch(url, json={"name": "Water"}, headers=headers)
        assert taken.status_code == 409

        missing = await client.patch(
            f"/api/admin/elements/{MISSING_ID}", json={"name": "Air"}, headers=headers
        )
        assert missing.status_code == 404

    async def test_delete_keeps_lithos_and_drops_edges(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        headers = await _admin_headers(db_session)
        fire = await make_element(db_session, "Fire")
        grass = await make_element(db_session, "Grass")
        ember = await make_lithos(db_session, "Ember", element=fire)
        edge = StrengthElement(element_id=fire.id, strong_against_id=grass.id)
        db_session.add(edge)
        await db_session.commit()

        resp = await client.delete(f"/api/admin/elements/{fire.id}", headers=headers)
        assert resp.status_code == 200
        assert resp.json()["message"] == "Element deleted successfully"

        reloaded = await LithosRepository(db_session).get_detail(ember.id)
        assert reloaded is not None
        assert reloaded.element_id is None
        assert await StrengthRepository(db_session).get_detail(edge.id) is None

        again = await client.delete(f"/api/admin/elements/{fire.id}", headers=headers)
        assert again.status_code == 404


class TestStrengthsAndWeaknesses:
    async def test_create_strength(self, client: AsyncClient, db_session: AsyncSession) -> None:
        headers = await _admin_headers(db_session)
        fire = await make_element(db_session, "Fire")
        grass = await make_element(db_session, "Grass")
        resp = await client.post(
            "/api/admin/strengths",
            json={"elementId": str(fire.id), "strongAgainstId": str(grass.id)},
            headers=headers,
        )
        assert resp.status_code == 201
        data = resp.json()["data"]
        assert data["element"]["name"] == "Fire"
        assert data["strongAgainst"]["name"] == "Grass"

        duplicate = await client.post(
            "/api/admin/strengths",
            json={"elementId": str(fire.id), "strongAgainstId": str(grass.id)},
            headers=headers,
        )
        assert duplicate.status_code == 409
        assert duplicate.json()["message"] == "This strength relationship already exists"

    async def test_self_reference_rejected_before_lookup(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        headers = await _admin_headers(db_session)
        resp = await client.post(
            "/api/admin/strengths",
            json={"elementId": MISSING_ID, "strongAgainstId": MISSING_ID},
            headers=headers,
        )
        # The ids name no element, so a 400 proves no lookup happened first.
        assert resp.status_code == 400
        assert resp.json()["message"] == "An element cannot be strong against itself"

    async def test_missing_elements(self, client: AsyncClient, db_session: AsyncSession) -> None:
        headers = await _admin_headers(db_session)
        fire = await make_element(db_session, "Fire")
        no_source = await client.post(
            "/api/admin/strengths",
            json={"elementId": MISSING_ID, "strongAgainstId": str(fire.id)},
            headers=headers,
        )
        assert no_source.status_code == 404
        assert no_source.json()["message"] == "Element not found"
        no_target = await client.post(
            "/api/admin/weaknesses",
            json={"elementId": str(fire.id), "targetId": MISSING_ID},
            headers=headers,
        )
        assert no_target.status_code == 404
        assert no_target.json()["message"] == "Target element not found"

    async def test_presence_checks(self, client: AsyncClient, db_session: AsyncSession) -> None:
        headers = await _admin_headers(db_session)
        resp = await client.post(
            "/api/admin/weaknesses", json={"elementId": "abc"}, headers=headers
        )
        assert resp.status_code == 400
        assert resp.json()["message"] == "weakAgainstId is required and must be a string"

    async def test_create_and_delete_weakness(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        headers = await _admin_headers(db_session)
        fire = await make_element(db_session, "Fire")
        water = await make_element(db_session, "Water")
        created = await client.post(
            "/api/admin/weaknesses",
            json={"elementId": str(fire.id), "weakAgainstId": str(water.id)},
            headers=headers,
        )
        assert created.status_code == 201
        assert created.json()["data"]["weakAgainst"]["name"] == "Water"
        weakness_id = created.json()["data"]["id"]

        deleted = await client.delete(f"/api/admin/weaknesses/{weakness_id}", headers=headers)
        assert deleted.status_code == 200
        assert deleted.json()["message"] == "Weakness deleted successfully"

        gone = await client.delete(f"/api/admin/weaknesses/{weakness_id}", headers=headers)
        assert gone.status_code == 404
        assert gone.json()["message"] == "Weakness not found"

    async def test_delete_strength(self, client: AsyncClient, db_session: AsyncSession) -> None:
        headers = await _admin_headers(db_session)
        fire = await make_element(db_session, "Fire")
        grass = await make_element(db_session, "Grass")
        edge = StrengthElement(element_id=fire.id, strong_against_id=grass.id)
        db_session.add(edge)
        await db_session.commit()

        resp = await client.delete(f"/api/admin/strengths/{edge.id}", headers=headers)
        assert resp.status_code == 200
        missing = await client.delete(f"/api/admin/strengths/{MISSING_ID}", headers=headers)
        assert missing.status_code == 404
        assert missing.json()["message"] == "Strength not found"

    async def test_relations_require_admin(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        user = await make_user(db_session, username="ada")
        resp = await client.post(
            "/api/admin/strengths",
            json={"elementId": "a", "strongAgainstId": "a"},
            headers=auth_headers(user),
        )
        assert resp.status_code == 403
