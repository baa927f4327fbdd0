"""Exceptions raised while resolving search attribute types."""

from __future__ import annotations

from typing import Any

from .constants import ERROR

__all__ = [
    "SearchAttributeError",
    "InvalidNameError",
    "InvalidTypeError",
    "TypeMapEmptyError",
]


class SearchAttributeError(ValueError):
    """Base class for recoverable search attribute errors."""


class InvalidNameError(SearchAttributeError):
    """The attribute name is not defined in the type map."""

    def __init__(self, name: Any) -> None:
        self.name = name
        super().__init__(ERROR["invalid_name"].format(name))


class InvalidTypeError(SearchAttributeError):
    """A configured type descriptor can't be converted to an indexed value type."""

    def __init__(self, name: str, value: Any) -> None:
        self.name = name
        self.value = value
        self.value_type = type(value).__name__
        super().__init__(ERROR["invalid_type"].format(name, value, self.value_type))


class TypeMapEmptyError(SearchAttributeError):
    """Lookup against a type map that is absent or empty."""

    def __init__(self) -> None:
        super().__init__(ERROR["type_map_empty"])
