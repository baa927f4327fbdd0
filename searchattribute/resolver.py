"""Search attribute type lookup."""

from __future__ import annotations

from collections.abc import Mapping

from .errors import InvalidNameError, TypeMapEmptyError
from .value_types import IndexedValueType

__all__ = ["get_type"]


def get_type(
    name: str, type_map: Mapping[str, IndexedValueType] | None
) -> IndexedValueType:
    """Return the type of a search attribute from the type map.

    Raises:
        TypeMapEmptyError: The type map is None or empty, i.e. typing is not
            configured at all.
        InvalidNameError: The type map doesn't define ``name``.
    """
    if not type_map:
        raise TypeMapEmptyError()
    try:
        return type_map[name]
    except KeyError:
        raise InvalidNameError(name) from None
