"""Search attribute typing - resolve, validate and annotate indexed value types.

Search attributes are typed key/value metadata attached to records that get
indexed for querying. This package turns loosely typed configuration into a
validated type map and uses it to:

- Look up the declared type of a single attribute
- Stamp the canonical type name onto attribute payload metadata
- Translate types into Elasticsearch and Qdrant field type vocabularies

Key Components:
    build_type_map: Validated name to IndexedValueType map from config
    get_type: Safe lookup of one attribute's type
    apply_type_map: Best-effort type annotation of attribute payloads
    get_es_type: Indexed value type to Elasticsearch field type

Example:
    >>> from searchattribute import build_type_map, get_type, IndexedValueType
    >>> type_map = build_type_map(lambda: {"CustomKeywordField": "Keyword"})
    >>> get_type("CustomKeywordField", type_map) is IndexedValueType.KEYWORD
    True

Architecture:
    Config source → build_type_map → TypeMap → get_type / apply_type_map → Index schema

"""

from __future__ import annotations

from .constants import METADATA_TYPE
from .errors import (
    InvalidNameError,
    InvalidTypeError,
    SearchAttributeError,
    TypeMapEmptyError,
)
from .index_types import build_index_schema, get_es_type, get_qdrant_schema_type
from .metadata import apply_type_map, get_metadata_type
from .models import AttributePayload, SearchAttributes
from .resolver import get_type
from .type_map import TypeMap, build_type_map
from .value_types import IndexedValueType

__version__ = "1.0.0"
__all__ = [
    "METADATA_TYPE",
    "IndexedValueType",
    "TypeMap",
    "AttributePayload",
    "SearchAttributes",
    "SearchAttributeError",
    "InvalidNameError",
    "InvalidTypeError",
    "TypeMapEmptyError",
    "build_type_map",
    "get_type",
    "apply_type_map",
    "get_metadata_type",
    "get_es_type",
    "get_qdrant_schema_type",
    "build_index_schema",
]
