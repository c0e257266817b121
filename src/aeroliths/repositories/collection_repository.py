# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from aeroliths.models.collection import Collection
from aeroliths.repositories.base import BaseRepository, coerce_id


class CollectionRepository(BaseRepository[Collection]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Collection)

    async def list_for_user(self, user_id: UUID) -> list[Collection]:
        result = await self.session.execute(
            select(Collection)
            .where(Collection.user_id == user_id)
            .options(selectinload(Collection.lithos))
            .order_by(Collection.created_at.desc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def get_detail(self, collection_id: UUID | str) -> Collection | None:
        """Load a collection with its lithos and its owner."""
        key = coerce_id(collection_id)
        if key is None:
            return None
        result = await self.session.execute(
            select(Collection)
            .where(Collection.id == key)
            .options(selectinload(Collection.lithos), selectinload(Collection.user))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_for_user_and_lithos(self, user_id: UUID, lithos_id: UUID) -> Collection | None:
        result = await self.session.execute(
            select(Collection).where(
                Collection.user_id == user_id,
                Collection.lithos_id == lithos_id,
            )
        )
        return result.scalar_one_or_none()
