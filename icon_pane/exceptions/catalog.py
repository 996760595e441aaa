"""Catalog loading exceptions."""

from .base import IconPaneException


class CatalogLoadError(IconPaneException):
    """Raised when the icon catalog is unreachable or malformed."""

    pass
