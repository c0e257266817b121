# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from fastapi import Depends, Header, Request

from aeroliths.auth.guard import ADMIN_ONLY, extract_token, require_role
from aeroliths.auth.tokens import decode_access_token
from aeroliths.config import Settings, get_settings
from aeroliths.schemas.auth import TokenClaims


async def get_current_claims(
    request: Request,
    authorization: str | None = Header(None),
    settings: Settings = Depends(get_settings),
) -> TokenClaims:
    """Require a valid token from the Authorization header or auth cookie."""
    token = extract_token(authorization, request.cookies.get(settings.auth_cookie_name))
    return decode_access_token(token, settings.jwt_secret_key)


async def get_current_admin(
    claims: TokenClaims = Depends(get_current_claims),
) -> TokenClaims:
    """Require a valid token whose role is admin."""
    require_role(claims, ADMIN_ONLY)
    return claims
