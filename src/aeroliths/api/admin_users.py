# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from aeroliths.api.body import parse_body, read_json_body
from aeroliths.auth.dependencies import get_current_admin
from aeroliths.auth.guard import forbid_self
from aeroliths.db.session import get_db
from aeroliths.errors import BadRequest, NotFound, handle_store_errors
from aeroliths.repositories.role_repository import RoleRepository
from aeroliths.repositories.user_repository import UserRepository
from aeroliths.schemas.auth import TokenClaims
from aeroliths.schemas.common import DataResponse, MessageResponse
from aeroliths.schemas.user import AdminUserList, AdminUserResponse, RoleUpdate, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/users", tags=["admin"])


@router.get("", response_model=DataResponse[AdminUserList])
@handle_store_errors("Error retrieving users")
async def list_users(
    admin: TokenClaims = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[AdminUserList]:
    users = await UserRepository(db).list_with_collections()
    return DataResponse(
        message="Users retrieved successfully",
        data=AdminUserList(
            users=[AdminUserResponse.model_validate(u) for u in users],
            count=len(users),
        ),
    )


@router.delete("/{user_id}", response_model=MessageResponse)
@handle_store_errors("Error deleting user")
async def delete_user(
    user_id: str,
    admin: TokenClaims = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    forbid_self(admin, user_id, "You cannot delete your own account")

    repo = UserRepository(db)
    user = await repo.get_by_id(user_id)
    if user is None:
        raise NotFound("User not found")
    await repo.delete(user)
    await db.commit()
    logger.info("User %s (%s) deleted by %s", user.username, user.id, admin.user_id)
    return MessageResponse(message=f"User {user.username} deleted successfully")


@router.patch("/{user_id}/role", response_model=DataResponse[UserResponse])
@handle_store_errors("Error updating user role")
async def update_role(
    user_id: str,
    request: Request,
    admin: TokenClaims = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[UserResponse]:
    body = parse_body(RoleUpdate, await read_json_body(request))
    forbid_self(admin, user_id, "You cannot change your own role")

    repo = UserRepository(db)
    user = await repo.get_detail(user_id)
    if user is None:
        raise NotFound("User not found")
    role = await RoleRepository(db).get_by_name(body.role_name)
    if role is None:
        raise NotFound(f"Role '{body.role_name}' not found")
    if user.role_id == role.id:
        raise BadRequest(f"User already has the '{body.role_name}' role")

    await repo.update(user, {"role_id": role.id})
    await db.commit()
    logger.info("User %s role changed to %s by %s", user.id, role.name, admin.user_id)

    updated = await repo.get_detail(user.id)
    return DataResponse(
        message=f"User role updated to '{role.name}' successfully",
        data=UserResponse.model_validate(updated),
    )
