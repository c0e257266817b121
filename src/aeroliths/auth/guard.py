# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

"""Authorization checks over verified session claims."""

from __future__ import annotations

from collections.abc import Collection
from uuid import UUID

from aeroliths.errors import BadRequest, Forbidden, Unauthorized
from aeroliths.schemas.auth import TokenClaims

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ADMIN_ONLY = (ROLE_ADMIN,)


def extract_token(authorization: str | None, cookie: str | None) -> str:
    """Pick the bearer token from the Authorization header, else the cookie."""
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme != "Bearer" or not token.strip():
            raise Unauthorized("Invalid authorization format. Expected: Bearer <token>")
        return token.strip()
    if cookie:
        return cookie
    raise Unauthorized("Authorization header is required")


def has_role(claims: TokenClaims, allowed_roles: Collection[str]) -> bool:
    return claims.role in allowed_roles


def is_owner(claims: TokenClaims, owner_id: UUID | str) -> bool:
    return str(owner_id).lower() == claims.user_id.lower()


def require_role(claims: TokenClaims, allowed_roles: Collection[str]) -> None:
    if not has_role(claims, allowed_roles):
        raise Forbidden("Insufficient permissions")


def require_owner_or_role(
    claims: TokenClaims,
    owner_id: UUID | str,
    allowed_roles: Collection[str],
    message: str = "Insufficient permissions",
) -> None:
    if not (is_owner(claims, owner_id) or has_role(claims, allowed_roles)):
        raise Forbidden(message)


def forbid_self(claims: TokenClaims, target_id: UUID | str, message: str) -> None:
    """Reject admin mutations aimed at the caller's own account."""
    if is_owner(claims, target_id):
        raise BadRequest(message)
