"""Bundled resources (icon catalogs)."""

import sys
from pathlib import Path

__all__ = ["get_resource_dir", "get_catalog_dir"]


def get_resource_dir() -> Path:
    """Get the path to the bundled resources directory.

    In a normal Python environment, this resolves relative to this file.
    In a PyInstaller frozen bundle, it resolves relative to sys._MEIPASS.
    """
    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        return Path(sys._MEIPASS) / "icon_pane" / "resources"
    return Path(__file__).parent


def get_catalog_dir() -> Path:
    """Get the directory holding the bundled ``<set>_icons.json`` catalogs."""
    return get_resource_dir() / "catalogs"
