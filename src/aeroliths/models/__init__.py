# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from aeroliths.models.base import Base, TimestampMixin, UUIDMixin
from aeroliths.models.collection import Collection
from aeroliths.models.element import Element, StrengthElement, WeaknessElement
from aeroliths.models.lithos import Lithos
from aeroliths.models.role import Role
from aeroliths.models.user import Authentication, User

__all__ = [
    "Authentication",
    "Base",
    "Collection",
    "Element",
    "Lithos",
    "Role",
    "StrengthElement",
    "TimestampMixin",
    "UUIDMixin",
    "User",
    "WeaknessElement",
]
