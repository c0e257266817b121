# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from aeroliths.api.auth import limiter
from aeroliths.api.body import parse_body, read_json_body
from aeroliths.auth.dependencies import get_current_claims
from aeroliths.auth.guard import ADMIN_ONLY, ROLE_USER, has_role, is_owner, require_owner_or_role
from aeroliths.auth.passwords import hash_password, verify_password
from aeroliths.config import Settings, get_settings
from aeroliths.db.session import get_db
from aeroliths.errors import BadRequest, Conflict, NotFound, Unauthorized, handle_store_errors
from aeroliths.models.user import Authentication, User
from aeroliths.repositories.role_repository import RoleRepository
from aeroliths.repositories.user_repository import AuthenticationRepository, UserRepository
from aeroliths.schemas.auth import TokenClaims
from aeroliths.schemas.common import DataResponse, ListResponse, MessageResponse
from aeroliths.schemas.user import PasswordUpdate, UserCreate, UserResponse, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=DataResponse[UserResponse], status_code=201)
@limiter.limit("10/minute")
@handle_store_errors("Failed to create user", conflict="User already exists")
async def register(
    request: Request,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> DataResponse[UserResponse]:
    body = parse_body(UserCreate, await read_json_body(request))

    repo = UserRepository(db)
    role = await RoleRepository(db).get_or_create(ROLE_USER)
    existing = await repo.get_by_email_or_username(body.email, body.username)
    if existing is not None:
        if existing.email == body.email:
            raise Conflict("Email already exists")
        raise Conflict("Username already exists")

    user = await repo.create(
        User(
            email=body.email,
            username=body.username,
            name=body.name,
            surname=body.surname,
            role_id=role.id,
            authentication=Authentication(
                password=hash_password(body.password, settings.bcrypt_rounds),
            ),
        )
    )
    await db.commit()
    logger.info("Registered user %s (%s)", user.username, user.id)

    created = await repo.get_detail(user.id)
    return DataResponse(
        message="User created successfully",
        data=UserResponse.model_validate(created),
    )


@router.get("", response_model=ListResponse[UserResponse])
@handle_store_errors("Failed to fetch users")
async def list_users(
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
) -> ListResponse[UserResponse]:
    users = await UserRepository(db).list_users()
    return ListResponse(
        data=[UserResponse.model_validate(u) for u in users],
        count=len(users),
    )


@router.patch("/{user_id}", response_model=DataResponse[UserResponse])
@handle_store_errors("Error updating user")
async def update_user(
    user_id: str,
    request: Request,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[UserResponse]:
    require_owner_or_role(
        claims, user_id, ADMIN_ONLY, "You do not have permission to update this user"
    )
    changes = parse_body(UserUpdate, await read_json_body(request)).model_dump(
        exclude_unset=True
    )
    if not changes:
        raise BadRequest("No valid fields to update")

    repo = UserRepository(db)
    user = await repo.get_detail(user_id)
    if user is None:
        raise NotFound("User not found")
    if "email" in changes and await repo.email_taken(changes["email"], exclude_id=user.id):
        raise Conflict("Email already exists")
    if "username" in changes and await repo.username_taken(
        changes["username"], exclude_id=user.id
    ):
        raise Conflict("Username already exists")

    await repo.update(user, changes)
    await db.commit()
    logger.info("Updated user %s: %s", user.id, sorted(changes))

    updated = await repo.get_detail(user.id)
    return DataResponse(
        message="User updated successfully",
        data=UserResponse.model_validate(updated),
    )


@router.patch("/{user_id}/password", response_model=MessageResponse)
@handle_store_errors("Error updating password")
async def update_password(
    user_id: str,
    request: Request,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    require_owner_or_role(
        claims, user_id, ADMIN_ONLY, "You do not have permission to update this password"
    )
    body = parse_body(PasswordUpdate, await read_json_body(request))

    user = await UserRepository(db).get_with_authentication(user_id)
    if user is None:
        raise NotFound("User not found")
    if user.authentication is None:
        raise NotFound("User authentication not found")

    # Admins reset passwords without knowing the old one.
    if is_owner(claims, user.id) and not has_role(claims, ADMIN_ONLY):
        if not body.current_password:
            raise BadRequest("Current password is required")
        if not verify_password(body.current_password, user.authentication.password):
            raise Unauthorized("Current password is incorrect")

    await AuthenticationRepository(db).set_password(
        user.authentication, hash_password(body.new_password, settings.bcrypt_rounds)
    )
    await db.commit()
    logger.info("Password changed for user %s by %s", user.id, claims.user_id)
    return MessageResponse(message="Password updated successfully")
