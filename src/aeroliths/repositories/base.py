# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from collections.abc import Mapping
from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from aeroliths.models.base import Base

T = TypeVar("T", bound=Base)


def coerce_id(entity_id: UUID | str) -> UUID | None:
    """Return the id as a UUID, or None when it cannot name any row."""
    if isinstance(entity_id, UUID):
        return entity_id
    try:
        return UUID(str(entity_id))
    except ValueError:
        return None


class BaseRepository(Generic[T]):
    def __init__(self, session: AsyncSession, model: type[T]) -> None:
        self.session = session
        self.model = model

    async def get_by_id(self, entity_id: UUID | str) -> T | None:
        key = coerce_id(entity_id)
        if key is None:
            return None
        return await self.session.get(self.model, key)

    async def create(self, entity: T) -> T:
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def update(self, entity: T, changes: Mapping[str, object]) -> T:
        """Apply a partial patch: only the keys present in ``changes`` are written."""
        for field, value in changes.items():
            setattr(entity, field, value)
        await self.session.flush()
        return entity

    async def list_all(self, limit: int = 50, offset: int = 0) -> list[T]:
        result = await self.session.execute(select(self.model).limit(limit).offset(offset))
        return list(result.scalars().all())

    async def delete(self, entity: T) -> None:
        await self.session.delete(entity)
        await self.session.flush()
