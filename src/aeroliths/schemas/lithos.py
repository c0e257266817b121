# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import ValidationInfo, field_validator, model_validator
from pydantic.alias_generators import to_camel

from aeroliths.schemas.common import CamelModel
from aeroliths.schemas.element import ElementResponse, ElementWithRelationsResponse
from aeroliths.schemas.fields import non_negative_int, require_present, require_string

_SPIKES = ("spike_left", "spike_right", "spike_up", "spike_down")


class LithosResponse(CamelModel):
    id: UUID
    name: str
    sprite: str
    type: str
    spike_left: int
    spike_right: int
    spike_up: int
    spike_down: int
    element_id: UUID | None
    created_at: datetime
    updated_at: datetime


class LithosWithElementResponse(LithosResponse):
    element: ElementResponse | None


# Element detail embeds its lithos, so it is declared beside the lithos shapes.
class ElementDetailResponse(ElementWithRelationsResponse):
    lithos: list[LithosResponse]


def _optional_element_id(value: Any) -> str | None:
    if value is None:
        return None
    return require_string(value, "elementId must be a string")


class LithosCreate(CamelModel):
    name: str
    sprite: str
    type: str
    spike_left: int = 0
    spike_right: int = 0
    spike_up: int = 0
    spike_down: int = 0
    element_id: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _require_fields(cls, data: Any) -> Any:
        return require_present(
            data, ("name", "sprite", "type"), "Fields name, sprite and type are required"
        )

    @field_validator(*_SPIKES, mode="before")
    @classmethod
    def _check_spike(cls, value: Any) -> int:
        return non_negative_int(
            value, "Spike values must be positive", "Spike values must be integers"
        )

    @field_validator("element_id", mode="before")
    @classmethod
    def _check_element_id(cls, value: Any) -> str | None:
        return _optional_element_id(value)


class LithosUpdate(CamelModel):
    """Partial update. Only keys present in the payload are applied."""

    name: str | None = None
    sprite: str | None = None
    type: str | None = None
    spike_left: int | None = None
    spike_right: int | None = None
    spike_up: int | None = None
    spike_down: int | None = None
    element_id: str | None = None

    @field_validator("name", "sprite", "type", mode="before")
    @classmethod
    def _check_text(cls, value: Any, info: ValidationInfo) -> str:
        return require_string(value, f"Lithos {info.field_name} must be a string")

    @field_validator(*_SPIKES, mode="before")
    @classmethod
    def _check_spike(cls, value: Any, info: ValidationInfo) -> int:
        field = to_camel(info.field_name or "")
        return non_negative_int(
            value, f"{field} must be a positive number", f"{field} must be an integer"
        )

    @field_validator("element_id", mode="before")
    @classmethod
    def _check_element_id(cls, value: Any) -> str | None:
        return _optional_element_id(value)
