"""Background worker threads for GUI."""

from .base_worker import CancellableWorker
from .catalog_worker import CatalogLoadWorker
from .font_worker import FontDownloadWorker
from .render_worker import RenderIconWorker

__all__ = [
    "CancellableWorker",
    "CatalogLoadWorker",
    "FontDownloadWorker",
    "RenderIconWorker",
]
