"""Worker thread for loading an icon set's catalog."""

import logging

from PyQt6.QtCore import pyqtSignal

from icon_pane.exceptions import CatalogLoadError
from icon_pane.gui.workers.base_worker import CancellableWorker
from icon_pane.interfaces import IconSetProvider

logger = logging.getLogger(__name__)


class CatalogLoadWorker(CancellableWorker):
    """Loads the catalog in the background.

    Emits loaded with the IconCatalog, or failed with the CatalogLoadError.
    Unexpected exceptions are wrapped in CatalogLoadError so startup has a
    single failure path.
    """

    loaded = pyqtSignal(object)  # IconCatalog
    failed = pyqtSignal(object)  # CatalogLoadError

    def __init__(self, icon_set: IconSetProvider, parent=None):
        super().__init__(parent)
        self.icon_set = icon_set

    def run(self) -> None:
        try:
            catalog = self.icon_set.load_catalog()
        except CatalogLoadError as e:
            self.emit_unless_cancelled(self.failed, e)
            return
        except Exception as e:
            logger.exception("Unexpected error loading catalog")
            self.emit_unless_cancelled(
                self.failed, CatalogLoadError(f"Unexpected error loading catalog: {e}")
            )
            return

        self.emit_unless_cancelled(self.loaded, catalog)
