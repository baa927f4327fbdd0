import argparse
import json
import sys

from loguru import logger

from .config import SearchAttributeSettings
from .constants import DEFAULTS
from .dynamic_config import YamlConfigSource
from .index_types import BACKENDS, build_index_schema
from .type_map import build_type_map


def main(argv=None):
    """
    Search attribute schema entry point

    Loads the YAML search attributes config, validates every declared type
    and prints the resulting index schema (field name to backend field type)
    as JSON. Any invalid entry rejects the whole config with exit status 1.
    Options left unset fall back to the environment settings.
    """
    parser = argparse.ArgumentParser(
        description="Validate search attribute types and print the index schema"
    )
    parser.add_argument(
        "--config",
        help="Path to the YAML file declaring search attributes",
    )
    parser.add_argument(
        "--key",
        help="Top-level key holding the search attribute name to type mapping",
    )
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default=DEFAULTS["backend"],
        help="Search backend whose field type vocabulary to emit",
    )
    args = parser.parse_args(argv)

    # pydantic's ValidationError is a ValueError
    try:
        settings = SearchAttributeSettings()
    except ValueError as e:
        logger.error(f"Invalid search attributes settings: {e}")
        return 1

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if settings.debug else "INFO")

    source = YamlConfigSource(
        args.config or settings.config_path,
        args.key or settings.config_key,
    )
    try:
        type_map = build_type_map(source)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Search attributes config rejected: {e}")
        return 1

    schema = build_index_schema(type_map, args.backend)
    print(json.dumps(schema, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
