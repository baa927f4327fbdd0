"""
Runtime configuration for search attribute typing

Provides the Pydantic-based settings model locating the YAML file that
declares valid search attributes and controlling log verbosity.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from .constants import DEFAULTS

__all__ = ["SearchAttributeSettings"]


class SearchAttributeSettings(BaseSettings):
    """
    Search attribute typing settings.

    These settings are loaded from environment variables:
    - SEARCH_ATTRIBUTES_CONFIG: Path to the YAML file declaring search attributes
    - SEARCH_ATTRIBUTES_KEY: Top-level key holding the name to type mapping
    - DEBUG: Enable debug logging
    """
    config_path: str = Field(
        default=DEFAULTS["config_path"],
        validation_alias="SEARCH_ATTRIBUTES_CONFIG",
    )
    config_key: str = Field(
        default=DEFAULTS["config_key"],
        validation_alias="SEARCH_ATTRIBUTES_KEY",
    )
    debug: bool = Field(
        default=False,
        validation_alias="DEBUG",
    )
