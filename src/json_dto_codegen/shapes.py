"""JSON value classification and the primitive type table."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .config import TypeMapping


class JsonKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


def kind_of(value: Any) -> JsonKind | None:
    """Classify a parsed JSON value; ``None`` for anything outside the JSON model."""
    if value is None:
        return JsonKind.NULL
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    return None


def primitive_type(value: Any, types: TypeMapping) -> str:
    """Map a value to its declared member type.

    Objects, arrays, nulls and unknown values all fall back to the generic type.
    """
    kind = kind_of(value)
    if kind is JsonKind.STRING:
        return types.text
    if kind is JsonKind.NUMBER:
        return types.number
    if kind is JsonKind.BOOLEAN:
        return types.boolean
    return types.generic
