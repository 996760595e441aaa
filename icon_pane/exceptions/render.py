"""Icon rendering exceptions."""

from .base import IconPaneException


class RenderFetchError(IconPaneException):
    """Raised when an icon asset cannot be retrieved or transformed."""

    pass


class InvalidThemeError(IconPaneException):
    """Raised when a theme value falls outside the icon set's closed theme list.

    This signals a programming error, not a user-facing condition.
    """

    pass
