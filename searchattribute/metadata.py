"""Stamps resolved types onto search attribute payload metadata."""

from __future__ import annotations

from collections.abc import Mapping

from loguru import logger

from .constants import CANONICAL_CODES, CANONICAL_NAMES, ERROR, METADATA_TYPE
from .models import AttributePayload
from .value_types import IndexedValueType

__all__ = ["apply_type_map", "get_metadata_type", "set_metadata_type"]


def apply_type_map(
    search_attributes: Mapping[str, AttributePayload] | None,
    type_map: Mapping[str, IndexedValueType] | None,
) -> None:
    """Set the type for every known search attribute that doesn't have one.

    This is annotation, not validation: payloads that already carry a type,
    and names the type map doesn't define, are left untouched.
    """
    if not type_map or not search_attributes:
        return

    stamped = 0
    for name, payload in search_attributes.items():
        if METADATA_TYPE in payload.metadata:
            continue
        value_type = type_map.get(name)
        if value_type is None:
            continue
        if set_metadata_type(payload, value_type):
            stamped += 1

    logger.debug(f"Applied type map to {stamped} of {len(search_attributes)} search attributes")


def set_metadata_type(payload: AttributePayload, value_type: IndexedValueType) -> bool:
    """Write the canonical type name to the payload metadata.

    Returns False when nothing was written (Unspecified). An enumeration value
    without a canonical name means validated data was corrupted and raises
    AssertionError.
    """
    if value_type == IndexedValueType.UNSPECIFIED:
        return False

    type_name = None
    if isinstance(value_type, int) and not isinstance(value_type, bool):
        type_name = CANONICAL_NAMES.get(int(value_type))
    if type_name is None:
        message = ERROR["unknown_type"].format(value_type)
        logger.critical(message)
        raise AssertionError(message)

    payload.metadata[METADATA_TYPE] = type_name.encode()
    return True


def get_metadata_type(payload: AttributePayload) -> IndexedValueType | None:
    """Read the stamped type back from a payload, or None if absent or unknown."""
    raw = payload.metadata.get(METADATA_TYPE)
    if raw is None:
        return None
    try:
        code = CANONICAL_CODES[raw.decode()]
    except (KeyError, UnicodeDecodeError):
        code = None
    if not code:
        logger.warning(f"Unrecognized search attribute type metadata: {raw!r}")
        return None
    return IndexedValueType(code)
