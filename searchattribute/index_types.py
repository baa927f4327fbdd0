"""Translates indexed value types into search backend field types.

1. get_es_type: Elasticsearch mapping type for one indexed value type
2. get_qdrant_schema_type: Qdrant payload index type for one indexed value type
3. build_index_schema: field name to backend type for a whole type map
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from qdrant_client.http.models import PayloadSchemaType

from .constants import DEFAULTS, ES_TYPES, QDRANT_TYPES
from .value_types import IndexedValueType

__all__ = [
    "BACKENDS",
    "get_es_type",
    "get_qdrant_schema_type",
    "build_index_schema",
]

BACKENDS = ("elasticsearch", "qdrant")


def _code(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return int(value)
    return None


def get_es_type(value: IndexedValueType) -> str:
    """Return the Elasticsearch field type, or "" when there is no mapping."""
    return ES_TYPES.get(_code(value), "")


def get_qdrant_schema_type(value: IndexedValueType) -> PayloadSchemaType | None:
    return QDRANT_TYPES.get(_code(value))


def build_index_schema(
    type_map: Mapping[str, IndexedValueType] | None,
    backend: str = DEFAULTS["backend"],
) -> dict[str, str]:
    """Render a type map as field name to backend field type.

    Attributes without a backend mapping are left out.
    """
    if backend not in BACKENDS:
        raise ValueError(f"Unknown index backend: {backend}")
    if not type_map:
        return {}

    schema = {}
    for name, value_type in type_map.items():
        if backend == "elasticsearch":
            field_type = get_es_type(value_type)
        else:
            qdrant_type = get_qdrant_schema_type(value_type)
            field_type = qdrant_type.value if qdrant_type is not None else ""
        if field_type:
            schema[name] = field_type
    return schema
