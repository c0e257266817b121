# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from aeroliths.db.session import get_db
from aeroliths.errors import NotFound, handle_store_errors
from aeroliths.repositories.element_repository import ElementRepository
from aeroliths.schemas.common import ItemResponse, ListResponse
from aeroliths.schemas.element import ElementWithRelationsResponse
from aeroliths.schemas.lithos import ElementDetailResponse

router = APIRouter(prefix="/elements", tags=["elements"])


@router.get("", response_model=ListResponse[ElementWithRelationsResponse])
@handle_store_errors("Failed to fetch elements")
async def list_elements(
    db: AsyncSession = Depends(get_db),
) -> ListResponse[ElementWithRelationsResponse]:
    elements = await ElementRepository(db).list_elements()
    return ListResponse(
        data=[ElementWithRelationsResponse.model_validate(e) for e in elements],
        count=len(elements),
    )


@router.get("/{element_id}", response_model=ItemResponse[ElementDetailResponse])
@handle_store_errors("Failed to fetch element")
async def get_element(
    element_id: str,
    db: AsyncSession = Depends(get_db),
) -> ItemResponse[ElementDetailResponse]:
    element = await ElementRepository(db).get_detail(element_id)
    if element is None:
        raise NotFound("Element not found")
    return ItemResponse(data=ElementDetailResponse.model_validate(element))
