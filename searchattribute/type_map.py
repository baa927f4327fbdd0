"""Builds validated search attribute type maps from dynamic configuration."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any

from loguru import logger

from .errors import InvalidNameError, InvalidTypeError
from .value_types import IndexedValueType, coerce, describe

__all__ = [
    "TypeMap",
    "ConfigSource",
    "build_type_map",
    "convert_config_type",
]

type ConfigSource = Callable[[], Mapping[str, Any]]


class TypeMap(Mapping[str, IndexedValueType]):
    """Read-only mapping of search attribute name to its indexed value type."""

    __slots__ = ("_types",)

    def __init__(self, types: Mapping[str, IndexedValueType] | None = None) -> None:
        self._types = dict(types or {})

    def __getitem__(self, name: str) -> IndexedValueType:
        return self._types[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"TypeMap({self._types!r})"


def convert_config_type(name: str, raw: Any) -> IndexedValueType:
    """Convert one configured type descriptor, raising InvalidTypeError if unknown.

    Unspecified is the zero value of the enumeration and is rejected like any
    other unknown type, so a built map never contains it.
    """
    descriptor = describe(raw)
    value = coerce(descriptor) if descriptor is not None else None
    if value is None or value is IndexedValueType.UNSPECIFIED:
        raise InvalidTypeError(name, raw)
    return value


def build_type_map(source: ConfigSource | None) -> TypeMap | None:
    """Convert search attribute types from dynamic config to a type map.

    Args:
        source: Zero-argument callable returning attribute name to type
            descriptor (numeric code, canonical name or IndexedValueType).

    Returns:
        The validated TypeMap, or None when nothing is configured.

    Raises:
        InvalidTypeError: A descriptor is not a known type. No partial map is
            returned.
        InvalidNameError: An attribute name is empty or not a string.
    """
    if source is None:
        logger.debug("No search attributes config source, skipping type map")
        return None
    config = source()
    if not config:
        logger.debug("Search attributes config is empty, skipping type map")
        return None

    result: dict[str, IndexedValueType] = {}
    for name, raw in config.items():
        if not isinstance(name, str) or not name:
            logger.error(f"Invalid search attribute name in config: {name!r}")
            raise InvalidNameError(name)
        try:
            result[name] = convert_config_type(name, raw)
        except InvalidTypeError as e:
            logger.error(f"Rejecting search attributes config: {e}")
            raise

    logger.info(f"Built search attributes type map with {len(result)} attributes")
    return TypeMap(result)
