# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from aeroliths.repositories.base import BaseRepository
from aeroliths.repositories.collection_repository import CollectionRepository
from aeroliths.repositories.element_repository import (
    ElementRepository,
    StrengthRepository,
    WeaknessRepository,
)
from aeroliths.repositories.lithos_repository import LithosRepository
from aeroliths.repositories.role_repository import RoleRepository
from aeroliths.repositories.user_repository import AuthenticationRepository, UserRepository

__all__ = [
    "AuthenticationRepository",
    "BaseRepository",
    "CollectionRepository",
    "ElementRepository",
    "LithosRepository",
    "RoleRepository",
    "StrengthRepository",
    "UserRepository",
    "WeaknessRepository",
]
