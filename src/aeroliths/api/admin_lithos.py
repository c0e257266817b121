# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from aeroliths.auth.dependencies import get_current_admin
from aeroliths.db.session import get_db
from aeroliths.errors import NotFound, handle_store_errors
from aeroliths.repositories.lithos_repository import LithosRepository
from aeroliths.schemas.auth import TokenClaims
from aeroliths.schemas.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/lithos", tags=["admin"])


@router.delete("/{lithos_id}", response_model=MessageResponse)
@handle_store_errors("Error deleting lithos")
async def delete_lithos(
    lithos_id: str,
    admin: TokenClaims = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Delete a lithos. Every collection entry holding it goes with it."""
    repo = LithosRepository(db)
    lithos = await repo.get_by_id(lithos_id)
    if lithos is None:
        raise NotFound("Lithos not found")
    await repo.delete(lithos)
    await db.commit()
    logger.info("Lithos %s deleted by %s", lithos.name, admin.user_id)
    return MessageResponse(message=f"Lithos {lithos.name} deleted successfully")
