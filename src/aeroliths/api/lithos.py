# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from aeroliths.api.body import parse_body, read_json_body
from aeroliths.auth.dependencies import get_current_admin
from aeroliths.db.session import get_db
from aeroliths.errors import BadRequest, Conflict, NotFound, handle_store_errors
from aeroliths.models.lithos import Lithos
from aeroliths.repositories.element_repository import ElementRepository
from aeroliths.repositories.lithos_repository import LithosRepository
from aeroliths.schemas.auth import TokenClaims
from aeroliths.schemas.common import DataResponse, ItemResponse, ListResponse
from aeroliths.schemas.lithos import LithosCreate, LithosUpdate, LithosWithElementResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lithos", tags=["lithos"])

_DUPLICATE_NAME = "A lithos with this name already exists"


async def _resolve_element_id(db: AsyncSession, element_id: str | None) -> UUID | None:
    if element_id is None:
        return None
    element = await ElementRepository(db).get_by_id(element_id)
    if element is None:
        raise NotFound("Element not found")
    return element.id


@router.get("", response_model=ListResponse[LithosWithElementResponse])
@handle_store_errors("Failed to fetch lithos")
async def list_lithos(
    db: AsyncSession = Depends(get_db),
) -> ListResponse[LithosWithElementResponse]:
    lithos = await LithosRepository(db).list_lithos()
    return ListResponse(
        data=[LithosWithElementResponse.model_validate(item) for item in lithos],
        count=len(lithos),
    )


@router.get("/{lithos_id}", response_model=ItemResponse[LithosWithElementResponse])
@handle_store_errors("Failed to fetch lithos")
async def get_lithos(
    lithos_id: str,
    db: AsyncSession = Depends(get_db),
) -> ItemResponse[LithosWithElementResponse]:
    lithos = await LithosRepository(db).get_detail(lithos_id)
    if lithos is None:
        raise NotFound("Lithos not found")
    return ItemResponse(data=LithosWithElementResponse.model_validate(lithos))


@router.post("", response_model=DataResponse[LithosWithElementResponse], status_code=201)
@handle_store_errors("Error creating lithos", conflict=_DUPLICATE_NAME)
async def create_lithos(
    request: Request,
    admin: TokenClaims = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[LithosWithElementResponse]:
    body = parse_body(LithosCreate, await read_json_body(request))
    element_id = await _resolve_element_id(db, body.element_id)

    repo = LithosRepository(db)
    if await repo.get_by_name(body.name) is not None:
        raise Conflict(_DUPLICATE_NAME)
    lithos = await repo.create(
        Lithos(
            name=body.name,
            sprite=body.sprite,
            type=body.type,
            spike_left=body.spike_left,
            spike_right=body.spike_right,
            spike_up=body.spike_up,
            spike_down=body.spike_down,
            element_id=element_id,
        )
    )
    await db.commit()
    logger.info("Lithos %s created by %s", lithos.name, admin.user_id)

    created = await repo.get_detail(lithos.id)
    return DataResponse(
        message="Lithos created successfully",
        data=LithosWithElementResponse.model_validate(created),
    )


@router.patch("/{lithos_id}", response_model=DataResponse[LithosWithElementResponse])
@handle_store_errors("Error updating lithos", conflict=_DUPLICATE_NAME)
async def update_lithos(
    lithos_id: str,
    request: Request,
    admin: TokenClaims = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[LithosWithElementResponse]:
    changes = parse_body(LithosUpdate, await read_json_body(request)).model_dump(
        exclude_unset=True
    )
    if not changes:
        raise BadRequest("No valid fields to update")

    repo = LithosRepository(db)
    lithos = await repo.get_by_id(lithos_id)
    if lithos is None:
        raise NotFound("Lithos not found")
    if "element_id" in changes:
        changes["element_id"] = await _resolve_element_id(db, changes["element_id"])
    if "name" in changes and changes["name"] != lithos.name:
        if await repo.get_by_name(changes["name"]) is not None:
            raise Conflict(_DUPLICATE_NAME)

    await repo.update(lithos, changes)
    await db.commit()

    updated = await repo.get_detail(lithos.id)
    return DataResponse(
        message="Lithos updated successfully",
        data=LithosWithElementResponse.model_validate(updated),
    )
