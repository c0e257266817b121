# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from uuid import UUID

from sqlalchemy import exists, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from aeroliths.models.collection import Collection
from aeroliths.models.user import Authentication, User
from aeroliths.repositories.base import BaseRepository, coerce_id


class UserRepository(BaseRepository[User]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> User | None:
        result = await self.session.execute(
            select(User)
            .where(User.email == email)
            .options(selectinload(User.role), selectinload(User.authentication))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_by_email_or_username(self, email: str, username: str) -> User | None:
        result = await self.session.execute(
            select(User).where(or_(User.email == email, User.username == username)).limit(1)
        )
        return result.scalar_one_or_none()

    async def email_taken(self, email: str, *, exclude_id: UUID | None = None) -> bool:
        conditions = [User.email == email]
        if exclude_id is not None:
            conditions.append(User.id != exclude_id)
        result = await self.session.execute(select(exists().where(*conditions)))
        return bool(result.scalar())

    async def username_taken(self, username: str, *, exclude_id: UUID | None = None) -> bool:
        conditions = [User.username == username]
        if exclude_id is not None:
            conditions.append(User.id != exclude_id)
        result = await self.session.execute(select(exists().where(*conditions)))
        return bool(result.scalar())

    async def get_detail(self, user_id: UUID | str) -> User | None:
        """Load a user together with its role."""
        key = coerce_id(user_id)
        if key is None:
            return None
        result = await self.session.execute(
            select(User)
            .where(User.id == key)
            .options(selectinload(User.role))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_with_authentication(self, user_id: UUID | str) -> User | None:
        key = coerce_id(user_id)
        if key is None:
            return None
        result = await self.session.execute(
            select(User)
            .where(User.id == key)
            .options(selectinload(User.role), selectinload(User.authentication))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_users(self) -> list[User]:
        result = await self.session.execute(
            select(User)
            .options(selectinload(User.role))
            .order_by(User.created_at.desc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def list_with_collections(self) -> list[User]:
        """Users newest first, with role and owned lithos loaded for the admin view."""
        result = await self.session.execute(
            select(User)
            .options(
                selectinload(User.role),
                selectinload(User.collections).selectinload(Collection.lithos),
            )
            .order_by(User.created_at.desc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())


class AuthenticationRepository(BaseRepository[Authentication]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Authentication)

    async def get_by_user_id(self, user_id: UUID) -> Authentication | None:
        result = await self.session.execute(
            select(Authentication).where(Authentication.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def set_password(self, authentication: Authentication, password_hash: str) -> None:
        authentication.password = password_hash
        await self.session.flush()
