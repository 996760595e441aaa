"""Messages area showing the active icon set's warnings."""

from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from icon_pane.gui.styles import COLORS, FONT_SIZES, SPACING


class MessagesWidget(QWidget):
    """Shows one line per icon set warning; hidden when there are none."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("messages")
        self.setStyleSheet(
            f"#messages QLabel {{ background: {COLORS.warning_bg}; color: {COLORS.warning_fg};"
            f" font-size: {FONT_SIZES.caption}px; padding: {SPACING.xxs}px; }}"
        )
        self._layout = QVBoxLayout()
        self._layout.setContentsMargins(0, 0, 0, 0)
        self.setLayout(self._layout)
        self._labels: list[QLabel] = []
        self.setVisible(False)

    @property
    def messages(self) -> list[str]:
        return [label.text() for label in self._labels]

    def set_messages(self, messages: list[str]) -> None:
        """Replace the displayed messages."""
        for label in self._labels:
            self._layout.removeWidget(label)
            label.deleteLater()
        self._labels = []

        for message in messages:
            label = QLabel(message)
            label.setWordWrap(True)
            self._layout.addWidget(label)
            self._labels.append(label)

        self.setVisible(bool(self._labels))
