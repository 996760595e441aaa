"""Worker thread for downloading icon fonts."""

import requests
from PyQt6.QtCore import pyqtSignal

from icon_pane.gui.workers.base_worker import CancellableWorker
from icon_pane.services.font_stylesheet import download_font_faces


class FontDownloadWorker(CancellableWorker):
    """Downloads the font files referenced by a stylesheet.

    Emits fonts_ready with a list of (family, bytes) tuples.
    """

    fonts_ready = pyqtSignal(list)

    def __init__(self, stylesheet_url: str, timeout: float | None = None, parent=None):
        super().__init__(parent)
        self.stylesheet_url = stylesheet_url
        self.timeout = timeout

    def run(self) -> None:
        try:
            fonts = download_font_faces(self.stylesheet_url, self.timeout)
        except requests.RequestException as e:
            self.emit_unless_cancelled(self.error, f"Could not load icon fonts: {e}")
            return

        self.emit_unless_cancelled(self.fonts_ready, fonts)
