# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for every wire shape: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ItemResponse(CamelModel, Generic[T]):
    success: bool = True
    data: T


class DataResponse(CamelModel, Generic[T]):
    success: bool = True
    message: str
    data: T


class ListResponse(CamelModel, Generic[T]):
    success: bool = True
    data: list[T]
    count: int


class MessageResponse(CamelModel):
    success: bool = True
    message: str
