# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

"""Request body decoding shared by every JSON endpoint."""

import json
from typing import Any, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from aeroliths.errors import BadRequest

M = TypeVar("M", bound=BaseModel)


def decode_json_body(raw: bytes) -> dict[str, Any]:
    """Decode a JSON object body.

    An empty body is treated as ``{}``. A body that decodes to a JSON string is
    decoded once more, so clients that double-encode still work.
    """
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
        if isinstance(payload, str):
            payload = json.loads(payload)
    except ValueError as exc:
        raise BadRequest("Invalid JSON format") from exc
    if not isinstance(payload, dict):
        raise BadRequest("Request body must be a JSON object")
    return payload


async def read_json_body(request: Request) -> dict[str, Any]:
    return decode_json_body(await request.body())


def validation_message(exc: ValidationError) -> str:
    """The message of the first error, as the client should see it."""
    error = exc.errors()[0]
    if error["type"] == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}" if location else error["msg"]


def parse_body(model: type[M], payload: dict[str, Any]) -> M:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise BadRequest(validation_message(exc)) from exc
