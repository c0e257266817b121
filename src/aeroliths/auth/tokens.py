# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

import jwt
from pydantic import ValidationError

from aeroliths.errors import ServerConfigurationError, Unauthorized
from aeroliths.schemas.auth import TokenClaims

_ALGORITHM = "HS256"
_DURATION_PATTERN = re.compile(r"(\d+)\s*([smhdw]?)")
_DURATION_UNITS = {
    "": "seconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}


def parse_duration(value: str) -> timedelta:
    """Parse a compact duration such as ``7d``, ``12h`` or ``3600``."""
    match = _DURATION_PATTERN.fullmatch(value.strip().lower())
    if match is None:
        raise ServerConfigurationError()
    amount, unit = match.groups()
    return timedelta(**{_DURATION_UNITS[unit]: int(amount)})


def create_access_token(claims: TokenClaims, secret: str, expires_in: timedelta) -> str:
    """Create a signed JWT carrying the session claims."""
    if not secret:
        raise ServerConfigurationError()
    now = datetime.now(timezone.utc)
    payload = {
        **claims.model_dump(by_alias=True),
        "exp": now + expires_in,
        "iat": now,
    }
    return jwt.encode(payload, secret, algorithm=_ALGORITHM)


def decode_access_token(token: str, secret: str) -> TokenClaims:
    """Decode a JWT access token and return its claims.

    Raises Unauthorized on any validation failure.
    """
    if not secret:
        raise ServerConfigurationError()
    try:
        payload = jwt.decode(token, secret, algorithms=[_ALGORITHM])
        return TokenClaims.model_validate(payload)
    except (jwt.InvalidTokenError, ValidationError) as exc:
        raise Unauthorized("Invalid or expired token") from exc
