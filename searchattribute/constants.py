"""
Project-wide search attribute definitions

This module contains constant definitions used throughout the package:

1. METADATA_TYPE: Reserved payload metadata key holding the resolved type
2. CANONICAL_NAMES: Wire names of the indexed value type codes
3. ES_TYPES: Elasticsearch field type for each indexed value type
4. QDRANT_TYPES: Qdrant payload index type for each indexed value type
5. DEFAULTS: Default values for configuration
6. ERROR: Standard error message templates

Note: The index type vocabularies are a contract with the downstream index
schema and must not change without a migration.
"""
from qdrant_client.http.models import PayloadSchemaType

METADATA_TYPE = "type"

# Format: numeric code: canonical name
CANONICAL_NAMES = {
    0: "Unspecified",
    1: "String",
    2: "Keyword",
    3: "Int",
    4: "Double",
    5: "Bool",
    6: "Datetime",
}

# Reverse lookup for names coming from configuration
CANONICAL_CODES = {name: code for code, name in CANONICAL_NAMES.items()}

# Index mapping for Elasticsearch schema, keyed by numeric code
ES_TYPES = {
    1: "text",
    2: "keyword",
    3: "long",
    4: "double",
    5: "boolean",
    6: "date",
}

# Index mapping for Qdrant schema, keyed by numeric code
QDRANT_TYPES = {
    1: PayloadSchemaType.TEXT,
    2: PayloadSchemaType.KEYWORD,
    3: PayloadSchemaType.INTEGER,
    4: PayloadSchemaType.FLOAT,
    5: PayloadSchemaType.BOOL,
    6: PayloadSchemaType.DATETIME,
}

DEFAULTS = {
    "config_path": "config/search_attributes.yaml",
    "config_key": "validSearchAttributes",
    "backend": "elasticsearch",
}

ERROR = {
    "invalid_name": "invalid search attribute name: {}",
    "invalid_type": "invalid search attribute type: {}: {!r} of type {}",
    "type_map_empty": "search attributes type map is empty",
    "unknown_type": "unknown indexed value type {!r}",
}
