# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

"""Admin endpoints for the directed strength and weakness edges between elements."""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from aeroliths.api.body import parse_body, read_json_body
from aeroliths.auth.dependencies import get_current_admin
from aeroliths.db.session import get_db
from aeroliths.errors import NotFound, handle_store_errors
from aeroliths.models.element import Element, StrengthElement, WeaknessElement
from aeroliths.repositories.element_repository import (
    ElementRepository,
    StrengthRepository,
    WeaknessRepository,
)
from aeroliths.schemas.auth import TokenClaims
from aeroliths.schemas.common import DataResponse, MessageResponse
from aeroliths.schemas.element import (
    StrengthCreate,
    StrengthDetailResponse,
    WeaknessCreate,
    WeaknessDetailResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


async def _require_elements(
    db: AsyncSession, element_id: str, target_id: str
) -> tuple[Element, Element]:
    repo = ElementRepository(db)
    element = await repo.get_by_id(element_id)
    if element is None:
        raise NotFound("Element not found")
    target = await repo.get_by_id(target_id)
    if target is None:
        raise NotFound("Target element not found")
    return element, target


@router.post("/strengths", response_model=DataResponse[StrengthDetailResponse], status_code=201)
@handle_store_errors(
    "Failed to create strength", conflict="This strength relationship already exists"
)
async def create_strength(
    request: Request,
    admin: TokenClaims = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[StrengthDetailResponse]:
    body = parse_body(StrengthCreate, await read_json_body(request))
    element, target = await _require_elements(db, body.element_id, body.strong_against_id)

    repo = StrengthRepository(db)
    strength = await repo.create(
        StrengthElement(element_id=element.id, strong_against_id=target.id)
    )
    await db.commit()
    logger.info("%s is now strong against %s", element.name, target.name)

    created = await repo.get_detail(strength.id)
    return DataResponse(
        message="Strength created successfully",
        data=StrengthDetailResponse.model_validate(created),
    )


@router.delete("/strengths/{strength_id}", response_model=MessageResponse)
@handle_store_errors("Failed to delete strength")
async def delete_strength(
    strength_id: str,
    admin: TokenClaims = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    repo = StrengthRepository(db)
    strength = await repo.get_by_id(strength_id)
    if strength is None:
        raise NotFound("Strength not found")
    await repo.delete(strength)
    await db.commit()
    return MessageResponse(message="Strength deleted successfully")


@router.post("/weaknesses", response_model=DataResponse[WeaknessDetailResponse], status_code=201)
@handle_store_errors(
    "Failed to create weakness", conflict="This weakness relationship already exists"
)
async def create_weakness(
    request: Request,
    admin: TokenClaims = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[WeaknessDetailResponse]:
    body = parse_body(WeaknessCreate, await read_json_body(request))
    element, target = await _require_elements(db, body.element_id, body.weak_against_id)

    repo = WeaknessRepository(db)
    weakness = await repo.create(
        WeaknessElement(element_id=element.id, weak_against_id=target.id)
    )
    await db.commit()
    logger.info("%s is now weak against %s", element.name, target.name)

    created = await repo.get_detail(weakness.id)
    return DataResponse(
        message="Weakness created successfully",
        data=WeaknessDetailResponse.model_validate(created),
    )


@router.delete("/weaknesses/{weakness_id}", response_model=MessageResponse)
@handle_store_errors("Failed to delete weakness")
async def delete_weakness(
    weakness_id: str,
    admin: TokenClaims = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    repo = WeaknessRepository(db)
    weakness = await repo.get_by_id(weakness_id)
    if weakness is None:
        raise NotFound("Weakness not found")
    await repo.delete(weakness)
    await db.commit()
    return MessageResponse(message="Weakness deleted successfully")
