"""Read-only loading of configuration overrides from disk."""

import json
import logging
from dataclasses import fields
from pathlib import Path
from typing import Any

from .config import IconPaneConfig
from .defaults import create_default_config

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads configuration overrides from a JSON file.

    The file is optional and never written by the application; missing or
    invalid files fall back to the default configuration.
    """

    CONFIG_FILE = Path.home() / ".icon_pane" / "config.json"

    @classmethod
    def load_config(cls, path: Path | None = None) -> IconPaneConfig:
        """Load configuration from JSON file.

        Args:
            path: Optional file to read instead of CONFIG_FILE

        Returns:
            Loaded configuration, or default configuration if file doesn't exist
        """
        config_file = path or cls.CONFIG_FILE
        if not config_file.exists():
            return create_default_config()

        try:
            with config_file.open("r", encoding="utf-8") as f:
                config_dict = json.load(f)

            if not isinstance(config_dict, dict):
                raise ValueError("top-level JSON value must be an object")

            return create_default_config(**cls._known_keys(config_dict))

        except (json.JSONDecodeError, TypeError, ValueError, OSError) as e:
            logger.warning(f"Unusable config file, using defaults: {e}")
            return create_default_config()

    @staticmethod
    def _known_keys(data: dict[str, Any]) -> dict[str, Any]:
        """Drop keys that are not IconPaneConfig fields."""
        known = {f.name for f in fields(IconPaneConfig)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")
        return {key: value for key, value in data.items() if key in known}
