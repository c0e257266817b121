# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

"""Sprite storage on the local filesystem.

Files land in ``<upload_dir>/<subdir>/`` and are served back from
``/<subdir>/<filename>`` by whatever serves the public directory.
"""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from pathlib import Path

from aeroliths.errors import BadRequest

logger = logging.getLogger(__name__)

UPLOAD_SUBDIRS = {
    "lithos": "lithos",
    "elements": "elements",
    "profile": "profile_pictures",
}
ADMIN_UPLOAD_TYPES = frozenset({"lithos", "elements"})
ALLOWED_CONTENT_TYPES = frozenset(
    {"image/png", "image/jpeg", "image/jpg", "image/gif", "image/webp"}
)

_UNSAFE_EXTENSION_CHARS = re.compile(r"[^A-Za-z0-9]")


@dataclass(frozen=True, slots=True)
class StoredFile:
    filename: str
    path: str


def check_upload_type(upload_type: str) -> str:
    if upload_type not in UPLOAD_SUBDIRS:
        raise BadRequest("Invalid upload type. Must be: lithos, elements, or profile")
    return upload_type


def check_content_type(content_type: str | None) -> None:
    if content_type not in ALLOWED_CONTENT_TYPES:
        raise BadRequest("Only image files are allowed (PNG, JPG, GIF, WEBP)")


def file_extension(filename: str) -> str:
    """Last dotted segment of the client filename, reduced to alphanumerics."""
    extension = filename.rsplit(".", 1)[-1]
    return _UNSAFE_EXTENSION_CHARS.sub("", extension) or "bin"


def build_filename(upload_type: str, extension: str, user_id: str, timestamp_ms: int) -> str:
    if upload_type == "profile":
        return f"profile-{user_id}-{timestamp_ms}.{extension}"
    return f"{upload_type}-{timestamp_ms}.{extension}"


def save_sprite(
    upload_dir: str | Path,
    upload_type: str,
    filename: str,
    data: bytes,
    user_id: str,
) -> StoredFile:
    """Write an uploaded image under its type's directory and return its public path."""
    subdir = UPLOAD_SUBDIRS[check_upload_type(upload_type)]
    target_dir = Path(upload_dir) / subdir
    target_dir.mkdir(parents=True, exist_ok=True)

    stored_name = build_filename(
        upload_type, file_extension(filename), user_id, int(time.time() * 1000)
    )
    (target_dir / stored_name).write_bytes(data)
    logger.info("Stored %s upload %s (%d bytes)", upload_type, stored_name, len(data))
    return StoredFile(filename=stored_name, path=f"/{subdir}/{stored_name}")
