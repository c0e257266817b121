# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from fastapi import APIRouter, Depends, Query, Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from aeroliths.auth.dependencies import get_current_claims
from aeroliths.auth.guard import ADMIN_ONLY, require_role
from aeroliths.config import Settings, get_settings
from aeroliths.errors import BadRequest, handle_store_errors
from aeroliths.schemas.auth import TokenClaims
from aeroliths.schemas.common import DataResponse
from aeroliths.schemas.upload import UploadResult
from aeroliths.services.uploads import (
    ADMIN_UPLOAD_TYPES,
    check_content_type,
    check_upload_type,
    save_sprite,
)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/upload-sprite", response_model=DataResponse[UploadResult])
@handle_store_errors("Error uploading sprite")
async def upload_sprite(
    request: Request,
    requested_type: str = Query("lithos", alias="type"),
    claims: TokenClaims = Depends(get_current_claims),
    settings: Settings = Depends(get_settings),
) -> DataResponse[UploadResult]:
    """Store a lithos, element or profile image.

    Lithos and element sprites are admin-only; any signed-in user may upload a
    profile picture.
    """
    upload_type = check_upload_type(requested_type or "lithos")
    if upload_type in ADMIN_UPLOAD_TYPES:
        require_role(claims, ADMIN_ONLY)

    async with request.form() as form:
        files = [value for value in form.values() if isinstance(value, UploadFile)]
        if not files:
            raise BadRequest("No file uploaded")
        upload = files[0]
        data = await upload.read()
        if not upload.filename or not data:
            raise BadRequest("Invalid file data")
        check_content_type(upload.content_type)
        filename = upload.filename

    # File IO runs off the event loop.
    stored = await run_in_threadpool(
        save_sprite, settings.upload_dir, upload_type, filename, data, claims.user_id
    )
    return DataResponse(
        message=f"{upload_type.capitalize()} image uploaded successfully",
        data=UploadResult(filename=stored.filename, path=stored.path),
    )
