# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from aeroliths.models.element import Element, StrengthElement, WeaknessElement
from aeroliths.repositories.base import BaseRepository, coerce_id

_WITH_RELATIONS = (
    selectinload(Element.strengths_from).selectinload(StrengthElement.strong_against),
    selectinload(Element.weaknesses_from).selectinload(WeaknessElement.weak_against),
)


class ElementRepository(BaseRepository[Element]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Element)

    async def get_by_name(self, name: str) -> Element | None:
        result = await self.session.execute(select(Element).where(Element.name == name))
        return result.scalar_one_or_none()

    async def list_elements(self) -> list[Element]:
        """All elements by name, each with its outgoing strengths and weaknesses.

        Edge targets are rows of this same result, so the query must not
        repopulate them: that would reset their already-loaded edge lists.
        """
        result = await self.session.execute(
            select(Element)
            .options(*_WITH_RELATIONS)
            .order_by(Element.name.asc())
        )
        return list(result.scalars().all())

    async def get_detail(self, element_id: UUID | str) -> Element | None:
        key = coerce_id(element_id)
        if key is None:
            return None
        result = await self.session.execute(
            select(Element)
            .where(Element.id == key)
            .options(*_WITH_RELATIONS, selectinload(Element.lithos))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()


class StrengthRepository(BaseRepository[StrengthElement]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, StrengthElement)

    async def get_detail(self, strength_id: UUID) -> StrengthElement | None:
        result = await self.session.execute(
            select(StrengthElement)
            .where(StrengthElement.id == strength_id)
            .options(
                selectinload(StrengthElement.element),
                selectinload(StrengthElement.strong_against),
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()


class WeaknessRepository(BaseRepository[WeaknessElement]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, WeaknessElement)

    async def get_detail(self, weakness_id: UUID) -> WeaknessElement | None:
        result = await self.session.execute(
            select(WeaknessElement)
            .where(WeaknessElement.id == weakness_id)
            .options(
                selectinload(WeaknessElement.element),
                selectinload(WeaknessElement.weak_against),
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
