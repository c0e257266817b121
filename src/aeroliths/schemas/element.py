# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import AliasChoices, Field, field_validator, model_validator

from aeroliths.schemas.common import CamelModel
from aeroliths.schemas.fields import require_string


class ElementResponse(CamelModel):
    id: UUID
    name: str
    sprite: str
    created_at: datetime
    updated_at: datetime


class StrengthResponse(CamelModel):
    id: UUID
    element_id: UUID
    strong_against_id: UUID
    created_at: datetime
    strong_against: ElementResponse


class WeaknessResponse(CamelModel):
    id: UUID
    element_id: UUID
    weak_against_id: UUID
    created_at: datetime
    weak_against: ElementResponse


class StrengthDetailResponse(StrengthResponse):
    element: ElementResponse


class WeaknessDetailResponse(WeaknessResponse):
    element: ElementResponse


class ElementWithRelationsResponse(ElementResponse):
    strengths_from: list[StrengthResponse]
    weaknesses_from: list[WeaknessResponse]


class ElementCreate(CamelModel):
    name: str
    sprite: str

    @model_validator(mode="before")
    @classmethod
    def _require_fields(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            raise ValueError("Element name is required and must be a string")
        if not data.get("name") or not isinstance(data["name"], str):
            raise ValueError("Element name is required and must be a string")
        if not data.get("sprite") or not isinstance(data["sprite"], str):
            raise ValueError("Element sprite is required and must be a string")
        return data


class ElementUpdate(CamelModel):
    name: str | None = None
    sprite: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value: Any) -> str:
        return require_string(value, "Element name must be a string")

    @field_validator("sprite", mode="before")
    @classmethod
    def _check_sprite(cls, value: Any) -> str:
        return require_string(value, "Element sprite must be a string")


def _require_edge_ids(data: Any, target_key: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError("elementId is required and must be a string")
    element_id = data.get("elementId", data.get("element_id"))
    if not element_id or not isinstance(element_id, str):
        raise ValueError("elementId is required and must be a string")
    target_id = data.get(target_key, data.get("targetId"))
    if not target_id or not isinstance(target_id, str):
        raise ValueError(f"{target_key} is required and must be a string")
    return data


class StrengthCreate(CamelModel):
    element_id: str
    strong_against_id: str = Field(
        validation_alias=AliasChoices("strongAgainstId", "targetId", "strong_against_id"),
    )

    @model_validator(mode="before")
    @classmethod
    def _require_ids(cls, data: Any) -> Any:
        return _require_edge_ids(data, "strongAgainstId")

    @model_validator(mode="after")
    def _reject_self_reference(self) -> StrengthCreate:
        if self.element_id.lower() == self.strong_against_id.lower():
            raise ValueError("An element cannot be strong against itself")
        return self


class WeaknessCreate(CamelModel):
    element_id: str
    weak_against_id: str = Field(
        validation_alias=AliasChoices("weakAgainstId", "targetId", "weak_against_id"),
    )

    @model_validator(mode="before")
    @classmethod
    def _require_ids(cls, data: Any) -> Any:
        return _require_edge_ids(data, "weakAgainstId")

    @model_validator(mode="after")
    def _reject_self_reference(self) -> WeaknessCreate:
        if self.element_id.lower() == self.weak_against_id.lower():
            raise ValueError("An element cannot be weak against itself")
        return self
