# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from aeroliths.api.body import parse_body, read_json_body
from aeroliths.auth.dependencies import get_current_admin
from aeroliths.db.session import get_db
from aeroliths.errors import BadRequest, Conflict, NotFound, handle_store_errors
from aeroliths.models.element import Element
from aeroliths.repositories.element_repository import ElementRepository
from aeroliths.schemas.auth import TokenClaims
from aeroliths.schemas.common import DataResponse, MessageResponse
from aeroliths.schemas.element import ElementCreate, ElementResponse, ElementUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/elements", tags=["admin"])

_DUPLICATE_NAME = "An element with this name already exists"


@router.post("", response_model=DataResponse[ElementResponse], status_code=201)
@handle_store_errors("Failed to create element", conflict=_DUPLICATE_NAME)
async def create_element(
    request: Request,
    admin: TokenClaims = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[ElementResponse]:
    body = parse_body(ElementCreate, await read_json_body(request))

    repo = ElementRepository(db)
    if await repo.get_by_name(body.name) is not None:
        raise Conflict(_DUPLICATE_NAME)
    element = await repo.create(Element(name=body.name, sprite=body.sprite))
    await db.commit()
    await db.refresh(element)
    logger.info("Element %s created by %s", element.name, admin.user_id)
    return DataResponse(
        message="Element created successfully",
        data=ElementResponse.model_validate(element),
    )


@router.patch("/{element_id}", response_model=DataResponse[ElementResponse])
@handle_store_errors("Failed to update element", conflict=_DUPLICATE_NAME)
async def update_element(
    element_id: str,
    request: Request,
    admin: TokenClaims = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[ElementResponse]:
    changes = parse_body(ElementUpdate, await read_json_body(request)).model_dump(
        exclude_unset=True
    )
    if not changes:
        raise BadRequest("No valid fields to update")

    repo = ElementRepository(db)
    element = await repo.get_by_id(element_id)
    if element is None:
        raise NotFound("Element not found")
    if "name" in changes and changes["name"] != element.name:
        if await repo.get_by_name(changes["name"]) is not None:
            raise Conflict(_DUPLICATE_NAME)

    await repo.update(element, changes)
    await db.commit()
    await db.refresh(element)
    return DataResponse(
        message="Element updated successfully",
        data=ElementResponse.model_validate(element),
    )


@router.delete("/{element_id}", response_model=MessageResponse)
@handle_store_errors("Failed to delete element")
async def delete_element(
    element_id: str,
    admin: TokenClaims = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    repo = ElementRepository(db)
    element = await repo.get_by_id(element_id)
    if element is None:
        raise NotFound("Element not found")
    await repo.delete(element)
    await db.commit()
    logger.info("Element %s deleted by %s", element.name, admin.user_id)
    return MessageResponse(message="Element deleted successfully")
