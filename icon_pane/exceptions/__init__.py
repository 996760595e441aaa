"""Custom exceptions for Icon Pane."""

from .base import IconPaneException
from .catalog import CatalogLoadError
from .render import InvalidThemeError, RenderFetchError

__all__ = [
    "IconPaneException",
    "CatalogLoadError",
    "RenderFetchError",
    "InvalidThemeError",
]
