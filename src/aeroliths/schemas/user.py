# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import field_validator, model_validator

from aeroliths.schemas.common import CamelModel
from aeroliths.schemas.fields import (
    MIN_PASSWORD_LENGTH,
    is_valid_email,
    require_present,
    require_string,
)


class RoleResponse(CamelModel):
    id: UUID
    name: str


class UserResponse(CamelModel):
    """Public user shape. Never carries the stored credential."""

    id: UUID
    email: str
    username: str
    name: str | None
    surname: str | None
    role_id: UUID
    role: RoleResponse
    created_at: datetime
    updated_at: datetime


class UserSummary(CamelModel):
    id: UUID
    username: str
    email: str


class OwnedLithosSummary(CamelModel):
    id: UUID
    name: str


class OwnedCollectionSummary(CamelModel):
    id: UUID
    quantity: int
    lithos: OwnedLithosSummary


class AdminUserResponse(CamelModel):
    id: UUID
    email: str
    username: str
    name: str | None
    surname: str | None
    created_at: datetime
    updated_at: datetime
    role: RoleResponse
    collections: list[OwnedCollectionSummary]


class AdminUserList(CamelModel):
    users: list[AdminUserResponse]
    count: int


def _blank_to_none(value: Any, message: str) -> str | None:
    if not value:
        return None
    return require_string(value, message)


class UserCreate(CamelModel):
    email: str
    username: str
    password: str
    name: str | None = None
    surname: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _require_fields(cls, data: Any) -> Any:
        return require_present(
            data,
            ("email", "username", "password"),
            "Email, username, and password are required",
        )

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        if not is_valid_email(value):
            raise ValueError("Invalid email format")
        return value

    @field_validator("password")
    @classmethod
    def _check_password(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError("Password must be at least 8 characters long")
        return value

    @field_validator("name", "surname", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> str | None:
        return _blank_to_none(value, "Name and surname must be strings")


class UserUpdate(CamelModel):
    """Partial update. Only keys present in the payload are applied."""

    email: str | None = None
    username: str | None = None
    name: str | None = None
    surname: str | None = None

    @field_validator("email", mode="before")
    @classmethod
    def _check_email(cls, value: Any) -> str:
        if not isinstance(value, str) or not is_valid_email(value):
            raise ValueError("Invalid email format")
        return value

    @field_validator("username", mode="before")
    @classmethod
    def _check_username(cls, value: Any) -> str:
        if not isinstance(value, str) or not value:
            raise ValueError("Username must be a non-empty string")
        return value

    @field_validator("name", "surname", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> str | None:
        return _blank_to_none(value, "Name and surname must be strings")


class PasswordUpdate(CamelModel):
    new_password: str
    current_password: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _require_new_password(cls, data: Any) -> Any:
        return require_present(data, ("newPassword",), "New password is required")

    @field_validator("new_password")
    @classmethod
    def _check_length(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError("New password must be at least 8 characters long")
        return value

    @field_validator("current_password", mode="before")
    @classmethod
    def _optional_current(cls, value: Any) -> str | None:
        return _blank_to_none(value, "Current password must be a string")


class RoleUpdate(CamelModel):
    role_name: str

    @model_validator(mode="before")
    @classmethod
    def _require_role_name(cls, data: Any) -> Any:
        data = require_present(data, ("roleName",), "Role name is required")
        require_string(data["roleName"], "Role name is required")
        return data
