"""Worker thread for fetching and rendering a selected icon."""

import logging

from PyQt6.QtCore import pyqtSignal

from icon_pane.exceptions import RenderFetchError
from icon_pane.gui.workers.base_worker import CancellableWorker
from icon_pane.models import SelectionRequest
from icon_pane.orchestration import CatalogRenderer

logger = logging.getLogger(__name__)


class RenderIconWorker(CancellableWorker):
    """Fetches one selected icon in the background.

    Emits rendered with the RenderedIcon or failed with the RenderFetchError.
    Insertion itself happens on the UI thread, in the slot for rendered.
    """

    rendered = pyqtSignal(object, object)  # SelectionRequest, RenderedIcon
    failed = pyqtSignal(object, object)  # SelectionRequest, RenderFetchError

    def __init__(self, renderer: CatalogRenderer, request: SelectionRequest, parent=None):
        """Initialize the render worker.

        Args:
            renderer: Catalog renderer that performs the fetch
            request: Selection to render
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self.renderer = renderer
        self.request = request

    def run(self) -> None:
        """Execute the icon fetch in background thread."""
        try:
            icon = self.renderer.fetch(self.request)
        except RenderFetchError as e:
            self.emit_unless_cancelled(self.failed, self.request, e)
            return
        except Exception as e:
            logger.exception(f"Unexpected error rendering {self.request.identity}")
            self.emit_unless_cancelled(
                self.error, f"Unexpected error rendering '{self.request.identity.name}': {e}"
            )
            return

        self.emit_unless_cancelled(self.rendered, self.request, icon)
