# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

import os
from collections.abc import AsyncIterator
from datetime import timedelta
from pathlib import Path

# Settings are read on first use; the app module reads them at import time.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event, select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from aeroliths.api.auth import limiter
from aeroliths.auth.passwords import hash_password
from aeroliths.auth.tokens import create_access_token
from aeroliths.config import Settings, get_settings
from aeroliths.db.session import get_db
from aeroliths.main import app
from aeroliths.models.base import Base
from aeroliths.models.collection import Collection
from aeroliths.models.element import Element
from aeroliths.models.lithos import Lithos
from aeroliths.models.role import Role
from aeroliths.models.user import Authentication, User
from aeroliths.schemas.auth import TokenClaims

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"
TEST_PASSWORD = "correct-horse-battery"
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'aeroliths.db'}",
        environment="test",
        jwt_secret_key=TEST_SECRET,
        jwt_expires_in="7d",
        bcrypt_rounds=TEST_BCRYPT_ROUNDS,
        upload_dir=str(tmp_path / "public"),
    )


@pytest.fixture
async def async_engine(settings: Settings) -> AsyncIterator[AsyncEngine]:
    """A file-backed SQLite database with foreign keys enforced."""
    engine = create_async_engine(settings.database_url, echo=False)

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):  # type: ignore[no-untyped-def]
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(
    settings: Settings,
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncClient]:
    """HTTP client bound to the app, with its own session per request."""

    async def _get_db() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_settings] = lambda: settings
    limiter.enabled = False
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
    limiter.enabled = True
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Factory helpers for creating rows in tests
# ---------------------------------------------------------------------------


async def make_role(session: AsyncSession, name: str) -> Role:
    role = Role(name=name)
    session.add(role)
    await session.flush()
    return role


async def make_user(
    session: AsyncSession,
    *,
    username: str = "player",
    email: str | None = None,
    role: str = "user",
    password: str = TEST_PASSWORD,
) -> User:
    """Create and commit a user with a credential, creating the role on demand."""
    result = await session.execute(select(Role).where(Role.name == role))
    role_row = result.scalar_one_or_none() or await make_role(session, role)
    user = User(
        email=email or f"{username}@aeroliths.test",
        username=username,
        role_id=role_row.id,
        authentication=Authentication(
            password=hash_password(password, TEST_BCRYPT_ROUNDS),
        ),
    )
    session.add(user)
    await session.commit()
    return user


async def make_element(session: AsyncSession, name: str = "Fire") -> Element:
    element = Element(name=name, sprite=f"/elements/{name.lower()}.png")
    session.add(element)
    await session.commit()
    return element


async def make_lithos(
    session: AsyncSession,
    name: str = "Ember",
    *,
    element: Element | None = None,
    spikes: tuple[int, int, int, int] = (1, 2, 3, 4),
) -> Lithos:
    left, right, up, down = spikes
    lithos = Lithos(
        name=name,
        sprite=f"/lithos/{name.lower()}.png",
        type="common",
        spike_left=left,
        spike_right=right,
        spike_up=up,
        spike_down=down,
        element_id=element.id if element is not None else None,
    )
    session.add(lithos)
    await session.commit()
    return lithos


async def make_collection(
    session: AsyncSession, user: User, lithos: Lithos, quantity: int = 1
) -> Collection:
    collection = Collection(user_id=user.id, lithos_id=lithos.id, quantity=quantity)
    session.add(collection)
    await session.commit()
    return collection


def token_for(user: User, role: str = "user") -> str:
    claims = TokenClaims(
        user_id=str(user.id),
        email=user.email,
        username=user.username,
        role=role,
    )
    return create_access_token(claims, TEST_SECRET, timedelta(hours=1))


def auth_headers(user: User, role: str = "user") -> dict[str, str]:
    return {"Authorization": f"Bearer {token_for(user, role)}"}
