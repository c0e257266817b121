# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

"""Domain errors and their translation from store failures.

Handlers raise these; the application boundary in ``aeroliths.main`` is the
only place that turns them into HTTP responses.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar

from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

_UNIQUE_VIOLATION = "23505"
_FOREIGN_KEY_VIOLATION = "23503"


class AppError(Exception):
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "statusMessage": self.message,
            "message": self.message,
        }


class BadRequest(AppError):
    status_code = 400


class Unauthorized(AppError):
    status_code = 401


class Forbidden(AppError):
    status_code = 403


class NotFound(AppError):
    status_code = 404


class Conflict(AppError):
    status_code = 409


class InternalError(AppError):
    status_code = 500


class ServerConfigurationError(InternalError):
    def __init__(self, message: str = "Server configuration error") -> None:
        super().__init__(message)


def _sqlstate(exc: IntegrityError) -> str | None:
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def is_unique_violation(exc: IntegrityError) -> bool:
    state = _sqlstate(exc)
    if state is not None:
        return state == _UNIQUE_VIOLATION
    return "unique" in str(exc.orig).lower()


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    state = _sqlstate(exc)
    if state is not None:
        return state == _FOREIGN_KEY_VIOLATION
    return "foreign key" in str(exc.orig).lower()


def handle_store_errors(
    failure_message: str,
    *,
    conflict: str | None = None,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Wrap a handler so that store failures surface as domain errors.

    ``AppError`` passes through untouched. Unique violations become
    ``Conflict(conflict)`` when a conflict message is given, dangling
    references become ``NotFound``, and everything else is logged and
    collapsed into ``InternalError(failure_message)``.
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return await func(*args, **kwargs)
            except AppError:
                raise
            except IntegrityError as exc:
                if conflict is not None and is_unique_violation(exc):
                    raise Conflict(conflict) from exc
                if is_foreign_key_violation(exc):
                    raise NotFound("Referenced record not found") from exc
                logger.exception(failure_message)
                raise InternalError(failure_message) from exc
            except Exception as exc:
                logger.exception(failure_message)
                raise InternalError(failure_message) from exc

        return wrapper

    return decorator
