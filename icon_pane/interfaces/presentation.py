"""Protocols for the surfaces an icon set draws on."""

from collections.abc import Iterable
from typing import Protocol


class PresentationSurface(Protocol):
    """The section hosting the icon grid, as seen by an icon set."""

    def attach_stylesheet(self, url: str) -> None:
        """Register an external stylesheet (and the fonts it references)."""
        ...

    def set_theme_class(self, class_name: str, all_classes: Iterable[str]) -> None:
        """Remove every class in all_classes, then apply class_name."""
        ...

    def set_color(self, color: str) -> None:
        """Apply a foreground color to the grid."""
        ...


class IconButtonLike(Protocol):
    """A selectable grid control (structurally matches QPushButton)."""

    def setText(self, text: str) -> None: ...

    def setToolTip(self, text: str) -> None: ...
