"""Presenter protocol for output abstraction."""

from typing import Protocol


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (console, GUI, etc).

    The messages area shows only the active icon set's warnings; errors and
    notices go through the separate show_* channels.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_messages(self, messages: list[str]) -> None:
        """Replace the contents of the messages area.

        Args:
            messages: Current icon set warnings, possibly empty
        """
        ...
