# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from aeroliths.models.lithos import Lithos
from aeroliths.repositories.base import BaseRepository, coerce_id


class LithosRepository(BaseRepository[Lithos]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Lithos)

    async def get_by_name(self, name: str) -> Lithos | None:
        result = await self.session.execute(select(Lithos).where(Lithos.name == name))
        return result.scalar_one_or_none()

    async def list_lithos(self) -> list[Lithos]:
        result = await self.session.execute(
            select(Lithos)
            .options(selectinload(Lithos.element))
            .order_by(Lithos.name.asc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def get_detail(self, lithos_id: UUID | str) -> Lithos | None:
        key = coerce_id(lithos_id)
        if key is None:
            return None
        result = await self.session.execute(
            select(Lithos)
            .where(Lithos.id == key)
            .options(selectinload(Lithos.element))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
