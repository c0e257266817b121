# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from typing import Any

from pydantic import model_validator

from aeroliths.schemas.common import CamelModel
from aeroliths.schemas.fields import require_present
from aeroliths.schemas.user import UserResponse


class TokenClaims(CamelModel):
    user_id: str
    email: str
    username: str
    role: str


class LoginRequest(CamelModel):
    email: str
    password: str

    @model_validator(mode="before")
    @classmethod
    def _require_credentials(cls, data: Any) -> Any:
        return require_present(data, ("email", "password"), "Email and password are required")


class LoginResult(CamelModel):
    user: UserResponse
    token: str
    expires_in: str
