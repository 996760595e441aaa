"""Base exception classes for Icon Pane."""


class IconPaneException(Exception):
    """Base exception for all Icon Pane errors.

    All custom exceptions in the icon_pane package should inherit
    from this base class for consistent error handling.
    """

    pass
