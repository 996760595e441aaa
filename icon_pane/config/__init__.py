"""Configuration management for Icon Pane."""

from .config import IconPaneConfig, is_url
from .defaults import create_default_config
from .loader import ConfigLoader

__all__ = ["IconPaneConfig", "ConfigLoader", "create_default_config", "is_url"]
