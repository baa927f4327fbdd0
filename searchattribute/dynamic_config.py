"""YAML-backed source of valid search attributes.

The file is re-read only when its modification time changes, so the source
can be called on every type map build and still pick up edits made while the
process is running.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from loguru import logger

from .constants import DEFAULTS

if TYPE_CHECKING:
    from .config import SearchAttributeSettings

__all__ = ["YamlConfigSource"]


class YamlConfigSource:
    """Zero-argument callable returning attribute name to type descriptor."""

    def __init__(self, path: Path | str, key: str = DEFAULTS["config_key"]) -> None:
        self.path = Path(path)
        self.key = key
        self._mtime: float | None = None
        self._snapshot: dict[str, Any] = {}

    @classmethod
    def from_settings(cls, settings: SearchAttributeSettings) -> YamlConfigSource:
        return cls(settings.config_path, settings.config_key)

    def __call__(self) -> dict[str, Any]:
        if not self.path.exists():
            raise FileNotFoundError(f"Search attributes config not found: {self.path}")

        mtime = self.path.stat().st_mtime
        if mtime != self._mtime:
            self._snapshot = self._load()
            self._mtime = mtime
        return dict(self._snapshot)

    def _load(self) -> dict[str, Any]:
        logger.info(f"Loading search attributes config from: {self.path}")
        with open(self.path, encoding="utf-8") as f:
            try:
                document = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.path}: {e}") from e

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ValueError(f"Search attributes config must be a mapping: {self.path}")

        section = document.get(self.key)
        if section is None:
            logger.warning(f"No search attributes under '{self.key}' in {self.path}")
            return {}
        if not isinstance(section, dict):
            raise ValueError(f"'{self.key}' in {self.path} must be a mapping")
        return section
