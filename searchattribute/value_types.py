"""Indexed value types and the descriptors configuration uses to declare them.

Configuration backends disagree on how an attribute's type is written down:
older ones store the numeric code (JSON numbers arrive as floats), newer ones
store the canonical name, and in-process callers may hand over the enum
itself. ``describe`` classifies a raw value into one of three descriptor
shapes exactly once, at the boundary, and ``coerce`` resolves a descriptor to
an ``IndexedValueType``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from pydantic import BaseModel

from .constants import CANONICAL_CODES, CANONICAL_NAMES

__all__ = [
    "IndexedValueType",
    "NumericCode",
    "CanonicalName",
    "AlreadyTyped",
    "TypeDescriptor",
    "describe",
    "coerce",
]


class IndexedValueType(IntEnum):
    """Closed set of value kinds a search attribute may hold."""

    UNSPECIFIED = 0
    STRING = 1
    KEYWORD = 2
    INT = 3
    DOUBLE = 4
    BOOL = 5
    DATETIME = 6

    @property
    def canonical_name(self) -> str:
        return CANONICAL_NAMES[self.value]


class NumericCode(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    code: int


class CanonicalName(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    name: str


class AlreadyTyped(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    value: IndexedValueType


type TypeDescriptor = NumericCode | CanonicalName | AlreadyTyped


def describe(raw: Any) -> TypeDescriptor | None:
    """Classify a raw configuration value, or return None for unsupported shapes."""
    # bool is an int subclass but never a type code
    if isinstance(raw, bool):
        return None
    if isinstance(raw, IndexedValueType):
        return AlreadyTyped(value=raw)
    if isinstance(raw, int):
        return NumericCode(code=raw)
    if isinstance(raw, float):
        return NumericCode(code=int(raw)) if raw.is_integer() else None
    if isinstance(raw, str):
        return CanonicalName(name=raw)
    return None


def coerce(descriptor: TypeDescriptor) -> IndexedValueType | None:
    """Resolve a descriptor to a known indexed value type.

    Returns None when the code or name is outside the known set.
    """
    match descriptor:
        case NumericCode(code=code) if code in CANONICAL_NAMES:
            return IndexedValueType(code)
        case CanonicalName(name=name) if name in CANONICAL_CODES:
            return IndexedValueType(CANONICAL_CODES[name])
        case AlreadyTyped(value=value):
            return value
    return None
