"""Qt option controls created from an icon set's option schema."""

import re
from collections.abc import Callable

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QBoxLayout, QColorDialog, QComboBox, QPushButton, QWidget

from icon_pane.gui.constants import ICON_BUTTON_SIZE

_RGB_PATTERN = re.compile(r"rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)")


def css_rgb(color: QColor) -> str:
    """Format a color the way browsers serialize it (e.g. ``rgb(0, 0, 0)``)."""
    return f"rgb({color.red()}, {color.green()}, {color.blue()})"


def qcolor_from_css(value: str) -> QColor:
    """Parse a color name, hex code or ``rgb(r, g, b)`` string.

    QColor does not accept the ``rgb()`` notation itself.
    """
    match = _RGB_PATTERN.fullmatch(value.strip())
    if match:
        return QColor(*(int(channel) for channel in match.groups()))
    return QColor(value)


class ColorPickerControl(QPushButton):
    """Swatch button that opens a color dialog.

    Holds the initial value verbatim (e.g. ``black``) until the user picks a
    color; picked colors are reported as ``rgb(r, g, b)``.
    """

    def __init__(self, name: str, initial: str, on_change: Callable[[], None], parent=None):
        super().__init__(parent)
        self._name = name
        self._value = initial
        self._qcolor = qcolor_from_css(initial)
        self._on_change = on_change

        self.setObjectName("colorPicker")
        self.setToolTip(name)
        self.setFixedSize(ICON_BUTTON_SIZE // 2, ICON_BUTTON_SIZE // 2)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self._paint_swatch()

        self.clicked.connect(self._open_dialog)

    def current_value(self) -> str:
        return self._value

    @property
    def qcolor(self) -> QColor:
        """Color the dialog opens on."""
        return QColor(self._qcolor)

    def set_color(self, value: str, color: QColor | None = None) -> None:
        """Apply a color as if picked by the user.

        Args:
            value: Option value to report
            color: Parsed color, when the caller already has one
        """
        self._value = value
        self._qcolor = QColor(color) if color is not None else qcolor_from_css(value)
        self._paint_swatch()
        self._on_change()

    def _open_dialog(self) -> None:
        color = QColorDialog.getColor(self._qcolor, self, f"Choose {self._name}")
        if color.isValid():
            self.set_color(css_rgb(color), color)

    def _paint_swatch(self) -> None:
        self.setStyleSheet(
            f"#colorPicker {{ background: {self._value}; border: 1px solid gray; border-radius: 4px; }}"
        )


class ChoiceListControl(QComboBox):
    """Single-selection drop-down populated with an option's declared values."""

    def __init__(
        self, name: str, choices: tuple[str, ...], on_change: Callable[[], None], parent=None
    ):
        super().__init__(parent)
        self.setToolTip(name)
        self.addItems(list(choices))

        # Connected after population so filling the list is not a user change
        self.currentTextChanged.connect(lambda _text: on_change())

    def current_value(self) -> str:
        return self.currentText()

    def set_value(self, value: str) -> None:
        """Select a value as if chosen by the user.

        Raises:
            ValueError: If the value is not one of the declared choices
        """
        index = self.findText(value)
        if index < 0:
            raise ValueError(f"'{value}' is not a choice of {self.toolTip()}")
        self.setCurrentIndex(index)


class QtControlFactory:
    """Creates option controls and appends them to a layout.

    Implements ControlFactory protocol.
    """

    def __init__(self, layout: QBoxLayout, parent: QWidget | None = None):
        self.layout = layout
        self.parent = parent

    def create_color_picker(
        self, name: str, initial: str, on_change: Callable[[], None]
    ) -> ColorPickerControl:
        control = ColorPickerControl(name, initial, on_change, self.parent)
        self.layout.addWidget(control)
        return control

    def create_choice_list(
        self, name: str, choices: tuple[str, ...], on_change: Callable[[], None]
    ) -> ChoiceListControl:
        control = ChoiceListControl(name, choices, on_change, self.parent)
        self.layout.addWidget(control)
        return control
