# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from aeroliths.api.body import parse_body, read_json_body
from aeroliths.auth.dependencies import get_current_claims
from aeroliths.auth.guard import is_owner
from aeroliths.db.session import get_db
from aeroliths.errors import BadRequest, Conflict, Forbidden, NotFound, handle_store_errors
from aeroliths.models.collection import Collection
from aeroliths.repositories.collection_repository import CollectionRepository
from aeroliths.repositories.lithos_repository import LithosRepository
from aeroliths.schemas.auth import TokenClaims
from aeroliths.schemas.collection import (
    CollectionCreate,
    CollectionDetailResponse,
    CollectionResponse,
    CollectionUpdate,
)
from aeroliths.schemas.common import DataResponse, ItemResponse, ListResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/collections", tags=["collections"])

_ALREADY_COLLECTED = "This lithos is already in your collection"


async def _owned_collection(
    repo: CollectionRepository, collection_id: str, claims: TokenClaims, action: str
) -> Collection:
    """Load a collection entry, rejecting callers who do not own it."""
    collection = await repo.get_detail(collection_id)
    if collection is None:
        raise NotFound("Collection not found")
    if not is_owner(claims, collection.user_id):
        raise Forbidden(f"You do not have permission to {action} this collection")
    return collection


@router.get("", response_model=ListResponse[CollectionResponse])
@handle_store_errors("Failed to fetch collections")
async def list_collections(
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
) -> ListResponse[CollectionResponse]:
    collections = await CollectionRepository(db).list_for_user(UUID(claims.user_id))
    return ListResponse(
        data=[CollectionResponse.model_validate(c) for c in collections],
        count=len(collections),
    )


@router.post("", response_model=DataResponse[CollectionResponse], status_code=201)
@handle_store_errors("Failed to create collection", conflict=_ALREADY_COLLECTED)
async def create_collection(
    request: Request,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[CollectionResponse]:
    body = parse_body(CollectionCreate, await read_json_body(request))

    lithos = await LithosRepository(db).get_by_id(body.lithos_id)
    if lithos is None:
        raise NotFound("Lithos not found")

    repo = CollectionRepository(db)
    user_id = UUID(claims.user_id)
    if await repo.get_for_user_and_lithos(user_id, lithos.id) is not None:
        raise Conflict(_ALREADY_COLLECTED)
    collection = await repo.create(
        Collection(user_id=user_id, lithos_id=lithos.id, quantity=body.quantity)
    )
    await db.commit()

    created = await repo.get_detail(collection.id)
    return DataResponse(
        message="Collection created successfully",
        data=CollectionResponse.model_validate(created),
    )


@router.get("/{collection_id}", response_model=ItemResponse[CollectionDetailResponse])
@handle_store_errors("Failed to fetch collection")
async def get_collection(
    collection_id: str,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
) -> ItemResponse[CollectionDetailResponse]:
    collection = await _owned_collection(
        CollectionRepository(db), collection_id, claims, "access"
    )
    return ItemResponse(data=CollectionDetailResponse.model_validate(collection))


@router.patch("/{collection_id}", response_model=DataResponse[CollectionResponse])
@handle_store_errors("Error updating collection")
async def update_collection(
    collection_id: str,
    request: Request,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[CollectionResponse]:
    changes = parse_body(CollectionUpdate, await read_json_body(request)).model_dump(
        exclude_unset=True
    )
    if not changes:
        raise BadRequest("No valid fields to update")

    repo = CollectionRepository(db)
    collection = await _owned_collection(repo, collection_id, claims, "update")
    await repo.update(collection, changes)
    await db.commit()

    updated = await repo.get_detail(collection.id)
    return DataResponse(
        message="Collection updated successfully",
        data=CollectionResponse.model_validate(updated),
    )


@router.delete("/{collection_id}", response_model=MessageResponse)
@handle_store_errors("Error deleting collection")
async def delete_collection(
    collection_id: str,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    repo = CollectionRepository(db)
    collection = await _owned_collection(repo, collection_id, claims, "delete")
    await repo.delete(collection)
    await db.commit()
    return MessageResponse(message="Collection deleted successfully")
