"""Icon grid widget: catalog groups plus the presentation surface icon sets draw on."""

import logging
from collections.abc import Iterable

from PyQt6.QtCore import QByteArray, pyqtSignal
from PyQt6.QtGui import QFont, QFontDatabase
from PyQt6.QtWidgets import (
    QAbstractButton,
    QButtonGroup,
    QGridLayout,
    QGroupBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from icon_pane.gui.constants import (
    GRID_COLUMNS,
    ICON_BUTTON_SIZE,
    ICON_FONT_PIXEL_SIZE,
    THEME_FONT_FAMILIES,
)
from icon_pane.gui.styles import FONT_SIZES, SPACING
from icon_pane.gui.workers import FontDownloadWorker
from icon_pane.models import IconIdentity

logger = logging.getLogger(__name__)


class IconButton(QPushButton):
    """Grid control for one catalog entry, carrying its identity."""

    def __init__(self, identity: IconIdentity, parent=None):
        super().__init__(parent)
        self.icon_identity = identity
        self.setObjectName("iconButton")
        self.setFixedSize(ICON_BUTTON_SIZE, ICON_BUTTON_SIZE)


class CategoryGroup(QGroupBox):
    """Labeled group holding a category's icon buttons in a fixed-width grid."""

    def __init__(self, category: str, parent=None):
        super().__init__(category, parent)
        self.setObjectName("iconsCategory")
        self.setStyleSheet(f"QGroupBox#iconsCategory {{ font-size: {FONT_SIZES.h3}px; }}")
        self._layout = QGridLayout()
        self._layout.setSpacing(SPACING.xxs)
        self.setLayout(self._layout)
        self.buttons = QButtonGroup(self)

    def add_button(self, button: IconButton) -> None:
        index = len(self.buttons.buttons())
        self._layout.addWidget(button, index // GRID_COLUMNS, index % GRID_COLUMNS)
        self.buttons.addButton(button)


class IconGridWidget(QWidget):
    """Holds one group per category and acts as the icon set's presentation surface.

    Implements CatalogGrid and PresentationSurface protocols. Theme classes
    select the icon font family; the color applies to every icon button.
    """

    icon_clicked = pyqtSignal(object)  # the clicked control

    def __init__(self, request_timeout: float | None = None, parent=None):
        super().__init__(parent)
        self.setObjectName("icons")
        self._request_timeout = request_timeout
        self._classes: set[str] = set()
        self._color = ""
        self._font_worker: FontDownloadWorker | None = None
        self.groups: list[CategoryGroup] = []

        self._layout = QVBoxLayout()
        self._layout.setContentsMargins(SPACING.xs, SPACING.xs, SPACING.xs, SPACING.xs)
        self._layout.setSpacing(SPACING.sm)
        self._layout.addStretch()
        self.setLayout(self._layout)

    # CatalogGrid

    def add_group(self, category: str) -> CategoryGroup:
        group = CategoryGroup(category, self)
        group.buttons.buttonClicked.connect(self._on_button_clicked)
        # Keep the trailing stretch last
        self._layout.insertWidget(self._layout.count() - 1, group)
        self.groups.append(group)
        return group

    def add_button(self, group: object, identity: IconIdentity) -> IconButton:
        if not isinstance(group, CategoryGroup):
            raise TypeError(f"Not a category group of this grid: {group!r}")
        button = IconButton(identity, group)
        button.setFont(self._icon_font())
        group.add_button(button)
        return button

    def _on_button_clicked(self, button: QAbstractButton) -> None:
        self.icon_clicked.emit(button)

    # PresentationSurface

    @property
    def classes(self) -> set[str]:
        return set(self._classes)

    @property
    def color(self) -> str:
        return self._color

    def attach_stylesheet(self, url: str) -> None:
        if self._font_worker is not None:
            logger.warning(f"Stylesheet already attached, ignoring {url}")
            return
        self._font_worker = FontDownloadWorker(url, self._request_timeout, self)
        self._font_worker.fonts_ready.connect(self._register_fonts)
        self._font_worker.error.connect(lambda message: logger.warning(message))
        self._font_worker.start()

    def set_theme_class(self, class_name: str, all_classes: Iterable[str]) -> None:
        self._classes.difference_update(all_classes)
        self._classes.add(class_name)
        self._apply_font()

    def set_color(self, color: str) -> None:
        self._color = color
        self.setStyleSheet(f"QPushButton#iconButton {{ color: {color}; }}" if color else "")

    def shutdown(self, timeout_ms: int) -> None:
        """Stop the font download (window closing)."""
        if self._font_worker is not None:
            self._font_worker.shutdown(timeout_ms)

    # Fonts

    def _font_family(self) -> str | None:
        for class_name in self._classes:
            if class_name in THEME_FONT_FAMILIES:
                return THEME_FONT_FAMILIES[class_name]
        return None

    def _icon_font(self) -> QFont:
        font = QFont()
        family = self._font_family()
        if family:
            font.setFamily(family)
        font.setPixelSize(ICON_FONT_PIXEL_SIZE)
        return font

    def _apply_font(self) -> None:
        font = self._icon_font()
        for group in self.groups:
            for button in group.buttons.buttons():
                button.setFont(font)

    def _register_fonts(self, fonts: list) -> None:
        for family, data in fonts:
            if QFontDatabase.addApplicationFontFromData(QByteArray(data)) < 0:
                logger.warning(f"Could not register font '{family}'")
        self._apply_font()
