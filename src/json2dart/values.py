"""Tagging of decoded JSON values and numeric classification."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from .descriptors import Kind
from .errors import ParseError


class ValueKind(Enum):
    """Shape of one decoded JSON value."""

    NUMBER = "number"
    TEXT = "text"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NULL = "null"


def value_kind(value: Any) -> ValueKind:
    """Tag a decoded JSON value. Booleans are checked before numbers."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, list):
        return ValueKind.ARRAY
    raise ParseError(f"Unsupported decoded value of type {type(value).__name__}")


def classify_number(value: int | float) -> Kind:
    """``INTEGER`` when the value has no fractional part, else ``DOUBLE``.

    Classification looks at the value only, so ``2.0`` is an integer.
    """
    if isinstance(value, int):
        return Kind.INTEGER
    if math.isfinite(value) and value.is_integer():
        return Kind.INTEGER
    return Kind.DOUBLE
