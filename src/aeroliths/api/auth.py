# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

import logging
import secrets
from functools import lru_cache

from fastapi import APIRouter, Depends, Request, Response
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy.ext.asyncio import AsyncSession

from aeroliths.api.body import parse_body, read_json_body
from aeroliths.auth.dependencies import get_current_claims
from aeroliths.auth.passwords import hash_password, verify_password
from aeroliths.auth.tokens import create_access_token, parse_duration
from aeroliths.config import Settings, get_settings
from aeroliths.db.session import get_db
from aeroliths.errors import NotFound, Unauthorized, handle_store_errors
from aeroliths.models.user import User
from aeroliths.repositories.user_repository import UserRepository
from aeroliths.schemas.auth import LoginRequest, LoginResult, TokenClaims
from aeroliths.schemas.common import DataResponse, ItemResponse, MessageResponse
from aeroliths.schemas.user import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

limiter = Limiter(key_func=get_remote_address)

_INVALID_CREDENTIALS = "Invalid email or password"


@lru_cache
def _dummy_hash(rounds: int) -> str:
    """Hash of a random string, verified against when the email is unknown."""
    return hash_password(secrets.token_urlsafe(32), rounds)


def claims_for(user: User) -> TokenClaims:
    return TokenClaims(
        user_id=str(user.id),
        email=user.email,
        username=user.username,
        role=user.role.name,
    )


@router.post("/login", response_model=DataResponse[LoginResult])
@limiter.limit("5/minute")
@handle_store_errors("Login failed")
async def login(
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> DataResponse[LoginResult]:
    body = parse_body(LoginRequest, await read_json_body(request))

    user = await UserRepository(db).get_by_email(body.email)
    if user is None or user.authentication is None:
        # Unknown accounts still pay for one bcrypt check.
        verify_password(body.password, _dummy_hash(settings.bcrypt_rounds))
        raise Unauthorized(_INVALID_CREDENTIALS)

    if not verify_password(body.password, user.authentication.password):
        raise Unauthorized(_INVALID_CREDENTIALS)

    expires_in = parse_duration(settings.jwt_expires_in)
    token = create_access_token(claims_for(user), settings.jwt_secret_key, expires_in)
    response.set_cookie(
        settings.auth_cookie_name,
        token,
        max_age=int(expires_in.total_seconds()),
        httponly=True,
        samesite="lax",
        secure=settings.environment == "production",
    )
    return DataResponse(
        message="Login successful",
        data=LoginResult(
            user=UserResponse.model_validate(user),
            token=token,
            expires_in=settings.jwt_expires_in,
        ),
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    response.delete_cookie(settings.auth_cookie_name)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=ItemResponse[UserResponse])
@handle_store_errors("Failed to fetch user details")
async def me(
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db),
) -> ItemResponse[UserResponse]:
    user = await UserRepository(db).get_detail(claims.user_id)
    if user is None:
        raise NotFound("User not found")
    return ItemResponse(data=UserResponse.model_validate(user))
