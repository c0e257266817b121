# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from fastapi import APIRouter

from aeroliths.api.admin_elements import router as admin_elements_router
from aeroliths.api.admin_lithos import router as admin_lithos_router
from aeroliths.api.admin_relations import router as admin_relations_router
from aeroliths.api.admin_users import router as admin_users_router
from aeroliths.api.auth import router as auth_router
from aeroliths.api.collections import router as collections_router
from aeroliths.api.elements import router as elements_router
from aeroliths.api.lithos import router as lithos_router
from aeroliths.api.uploads import router as uploads_router
from aeroliths.api.users import router as users_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(elements_router)
api_router.include_router(lithos_router)
api_router.include_router(collections_router)
api_router.include_router(admin_elements_router)
api_router.include_router(admin_relations_router)
api_router.include_router(admin_lithos_router)
api_router.include_router(admin_users_router)
api_router.include_router(uploads_router)
