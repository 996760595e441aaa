"""Insertion sink that places rendered icons on the system clipboard."""

import logging

from PyQt6.QtCore import QByteArray, QMimeData, QRectF
from PyQt6.QtGui import QColor, QImage, QPainter
from PyQt6.QtSvg import QSvgRenderer
from PyQt6.QtWidgets import QApplication

from icon_pane.models import ImageType, InsertionHints, RenderedIcon

logger = logging.getLogger(__name__)

SVG_MIME_TYPE = "image/svg+xml"


def rasterize_svg(markup: str, width: int) -> QImage | None:
    """Render SVG markup to a transparent image of the given width.

    Returns:
        The image, or None if Qt cannot render the markup
    """
    renderer = QSvgRenderer(QByteArray(markup.encode("utf-8")))
    if not renderer.isValid():
        return None

    size = renderer.defaultSize()
    height = round(width * size.height() / size.width()) if size.width() > 0 else width
    image = QImage(width, height, QImage.Format.Format_ARGB32)
    image.fill(QColor(0, 0, 0, 0))

    painter = QPainter(image)
    renderer.render(painter, QRectF(0, 0, width, height))
    painter.end()
    return image


class ClipboardInsertionSink:
    """Copies each inserted icon to the clipboard for pasting into a document.

    Implements InsertionSink protocol. The clipboard gets the SVG markup (as
    ``image/svg+xml`` and plain text) plus a bitmap rendered at the hinted
    width, so hosts without SVG support still paste an image.
    """

    def insert(self, icon: RenderedIcon, hints: InsertionHints) -> None:
        mime = QMimeData()

        if icon.image_type is ImageType.XML_SVG:
            mime.setData(SVG_MIME_TYPE, QByteArray(icon.payload.encode("utf-8")))
            mime.setText(icon.payload)
            image = rasterize_svg(icon.payload, hints.width)
            if image is not None:
                mime.setImageData(image)
            else:
                logger.warning(f"Could not rasterize {icon.name}; copying markup only")

        QApplication.clipboard().setMimeData(mime)
        logger.info(f"Copied {icon.name} to clipboard (width {hints.width}px)")
