"""Widgets for the Icon Pane GUI."""

from .icon_grid import CategoryGroup, IconButton, IconGridWidget
from .messages_widget import MessagesWidget
from .option_controls import ChoiceListControl, ColorPickerControl, QtControlFactory

__all__ = [
    "CategoryGroup",
    "IconButton",
    "IconGridWidget",
    "MessagesWidget",
    "ChoiceListControl",
    "ColorPickerControl",
    "QtControlFactory",
]
