# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import field_validator, model_validator

from aeroliths.schemas.common import CamelModel
from aeroliths.schemas.fields import non_negative_int, require_present, require_string
from aeroliths.schemas.lithos import LithosResponse
from aeroliths.schemas.user import UserSummary

_QUANTITY_MESSAGE = "Quantity must be a non-negative number"
_QUANTITY_INTEGER_MESSAGE = "Quantity must be an integer"


class CollectionResponse(CamelModel):
    id: UUID
    user_id: UUID
    lithos_id: UUID
    quantity: int
    created_at: datetime
    updated_at: datetime
    lithos: LithosResponse


class CollectionDetailResponse(CollectionResponse):
    user: UserSummary


class CollectionCreate(CamelModel):
    lithos_id: str
    quantity: int = 1

    @model_validator(mode="before")
    @classmethod
    def _require_lithos(cls, data: Any) -> Any:
        data = require_present(data, ("lithosId",), "lithosId is required")
        require_string(data["lithosId"], "lithosId must be a string")
        return data

    @field_validator("quantity", mode="before")
    @classmethod
    def _check_quantity(cls, value: Any) -> int:
        return non_negative_int(value, _QUANTITY_MESSAGE, _QUANTITY_INTEGER_MESSAGE)


class CollectionUpdate(CamelModel):
    quantity: int | None = None

    @field_validator("quantity", mode="before")
    @classmethod
    def _check_quantity(cls, value: Any) -> int:
        return non_negative_int(value, _QUANTITY_MESSAGE, _QUANTITY_INTEGER_MESSAGE)
