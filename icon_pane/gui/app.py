"""Main GUI application entry point."""

import logging
import sys

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication

from icon_pane.config import ConfigLoader, IconPaneConfig
from icon_pane.gui.clipboard_sink import ClipboardInsertionSink
from icon_pane.gui.main_window import MainWindow
from icon_pane.interfaces import InsertionSink
from icon_pane.services import create_icon_set
from icon_pane.sinks import SvgFileSink


def create_sink(config: IconPaneConfig) -> InsertionSink:
    """Pick the insertion sink: a directory when configured, else the clipboard."""
    if config.output_dir is not None:
        return SvgFileSink(config.output_dir)
    return ClipboardInsertionSink()


def main():
    """Launch the Icon Pane GUI application."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Icon Pane")
    app.setOrganizationName("IconPane")

    config = ConfigLoader.load_config()
    icon_set = create_icon_set(config.icon_set_name, config)

    window = MainWindow(config, icon_set, create_sink(config))
    window.start()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
