"""Protocol for the document-insertion sink."""

from typing import Protocol

from icon_pane.models import InsertionHints, RenderedIcon


class InsertionSink(Protocol):
    """Accepts a rendered icon for insertion into a host document.

    Fire-and-forget: callers neither observe nor retry the outcome.
    """

    def insert(self, icon: RenderedIcon, hints: InsertionHints) -> None:
        """Insert an icon.

        Args:
            icon: Encoded image plus its image type
            hints: Placement hints (left, top, width)
        """
        ...
