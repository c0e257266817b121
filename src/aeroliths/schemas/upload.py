# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from aeroliths.schemas.common import CamelModel


class UploadResult(CamelModel):
    filename: str
    path: str
