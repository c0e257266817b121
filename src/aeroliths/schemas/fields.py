# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

"""Shared input coercions used by the request schemas."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from typing import Any

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
MIN_PASSWORD_LENGTH = 8

# String forms accepted by Number(). Python spellings such as "1_000", "inf"
# and "nan" are not among them.
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_PREFIXED_LITERAL = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_INFINITY_LITERAL = re.compile(r"([+-]?)Infinity")


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def js_number(value: Any) -> int | float:
    """Coerce a loosely typed JSON value the way ``Number(x)`` does.

    Null, blank strings and ``false`` become 0, ``true`` becomes 1, numeric
    strings are parsed, and anything else is NaN.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int | float):
        return value
    if isinstance(value, str):
        return _parse_numeric_string(value)
    return math.nan


def _parse_numeric_string(value: str) -> int | float:
    text = value.strip()
    if not text:
        return 0
    if _PREFIXED_LITERAL.fullmatch(text):
        return int(text, 0)
    infinity = _INFINITY_LITERAL.fullmatch(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    if not _DECIMAL_LITERAL.fullmatch(text):
        return math.nan
    if any(marker in text for marker in ".eE"):
        return float(text)
    return int(text)


def non_negative_int(value: Any, message: str, integer_message: str) -> int:
    number = js_number(value)
    if math.isnan(number) or number < 0:
        raise ValueError(message)
    if isinstance(number, float):
        if not number.is_integer():
            raise ValueError(integer_message)
        return int(number)
    return number


def require_present(data: Any, fields: Iterable[str], message: str) -> Any:
    """Reject a payload unless every listed key holds a truthy value."""
    if not isinstance(data, Mapping) or not all(data.get(f) for f in fields):
        raise ValueError(message)
    return data


def require_string(value: Any, message: str) -> str:
    if not isinstance(value, str):
        raise ValueError(message)
    return value
