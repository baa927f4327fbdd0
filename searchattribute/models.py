# searchattribute/models.py
from __future__ import annotations

from pydantic import BaseModel, Field


class AttributePayload(BaseModel):
    """Encoded search attribute value with its metadata.

    Both the metadata values and ``data`` are opaque bytes; the metadata
    mapping is shared with unrelated features and only the ``type`` key is
    owned by this package.
    """

    metadata: dict[str, bytes] = Field(default_factory=dict)
    data: bytes = b""


# Attribute name to payload, owned by the caller
type SearchAttributes = dict[str, AttributePayload]
