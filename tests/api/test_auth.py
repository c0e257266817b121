# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

import json

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.conftest import TEST_PASSWORD, auth_headers, make_user, token_for


class TestLogin:
    async def test_login_returns_user_token_and_cookie(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        user = await make_user(db_session, username="ada")
        resp = await client.post(
            "/api/auth/login", json={"email": user.email, "password": TEST_PASSWORD}
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["data"]["expiresIn"] == "7d"
        assert body["data"]["user"]["username"] == "ada"
        assert body["data"]["user"]["role"]["name"] == "user"
        assert "authentication" not in body["data"]["user"]
        assert "password" not in json.dumps(body["data"]["user"])
        assert resp.cookies.get("auth_token") == body["data"]["token"]

    async def test_wrong_password_is_401_not_404(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        user = await make_user(db_session, username="ada")
        resp = await client.post(
            "/api/auth/login", json={"email": user.email, "password": "wrong-password"}
        )
        assert resp.status_code == 401
        assert resp.json() == {
            "statusCode": 401,
            "statusMessage": "Invalid email or password",
            "message": "Invalid email or password",
        }

    async def test_unknown_email_gives_the_same_answer(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/auth/login", json={"email": "ghost@aeroliths.test", "password": "whatever1"}
        )
        assert resp.status_code == 401
        assert resp.json()["message"] == "Invalid email or password"

    async def test_missing_fields(self, client: AsyncClient) -> None:
        resp = await client.post("/api/auth/login", json={"email": "a@b.com"})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Email and password are required"

    async def test_empty_body(self, client: AsyncClient) -> None:
        resp = await client.post("/api/auth/login")
        assert resp.status_code == 400
        assert resp.json()["message"] == "Email and password are required"

    async def test_json_string_body_is_accepted(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        user = await make_user(db_session, username="ada")
        payload = json.dumps(json.dumps({"email": user.email, "password": TEST_PASSWORD}))
        resp = await client.post(
            "/api/auth/login", content=payload, headers={"Content-Type": "application/json"}
        )
        assert resp.status_code == 200

    async def test_malformed_json(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/auth/login", content="{oops", headers={"Content-Type": "application/json"}
        )
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid JSON format"


class TestMe:
    async def test_me_with_bearer(self, client: AsyncClient, db_session: AsyncSession) -> None:
        user = await make_user(db_session, username="ada")
        resp = await client.get("/api/auth/me", headers=auth_headers(user))
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["id"] == str(user.id)
        assert data["role"]["name"] == "user"
        assert "authentication" not in data

    async def test_me_with_cookie(self, client: AsyncClient, db_session: AsyncSession) -> None:
        user = await make_user(db_session, username="ada")
        client.cookies.set("auth_token", token_for(user))
        resp = await client.get("/api/auth/me")
        assert resp.status_code == 200
        assert resp.json()["data"]["username"] == "ada"

    async def test_me_without_token(self, client: AsyncClient) -> None:
        resp = await client.get("/api/auth/me")
        assert resp.status_code == 401
        assert resp.json()["message"] == "Authorization header is required"

    async def test_me_with_malformed_header(self, client: AsyncClient) -> None:
        resp = await client.get("/api/auth/me", headers={"Authorization": "Token abc"})
        assert resp.status_code == 401
        assert resp.json()["message"] == "Invalid authorization format. Expected: Bearer <token>"

    async def test_me_with_invalid_token(self, client: AsyncClient) -> None:
        resp = await client.get("/api/auth/me", headers={"Authorization": "Bearer abc.def"})
        assert resp.status_code == 401
        assert resp.json()["message"] == "Invalid or expired token"

    async def test_me_for_deleted_user(self, client: AsyncClient, db_session: AsyncSession) -> None:
        user = await make_user(db_session, username="ada")
        headers = auth_headers(user)
        await db_session.delete(user)
        await db_session.commit()
        resp = await client.get("/api/auth/me", headers=headers)
        assert resp.status_code == 404
        assert resp.json()["message"] == "User not found"


class TestLogout:
    async def test_logout_clears_cookie(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        user = await make_user(db_session, username="ada")
        await client.post(
            "/api/auth/login", json={"email": user.email, "password": TEST_PASSWORD}
        )
        assert client.cookies.get("auth_token")

        resp = await client.post("/api/auth/logout")
        assert resp.status_code == 200
        assert resp.json()["message"] == "Logged out successfully"
        assert client.cookies.get("auth_token") is None

        me = await client.get("/api/auth/me")
        assert me.status_code == 401
