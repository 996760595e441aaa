"""Insertion sink that writes rendered icons to a directory."""

import logging
from pathlib import Path

from icon_pane.models import ImageType, InsertionHints, RenderedIcon

logger = logging.getLogger(__name__)


class SvgFileSink:
    """Writes each inserted icon to ``<output_dir>/<name>.svg``.

    Implements InsertionSink protocol. Later insertions of the same icon
    overwrite the earlier file.
    """

    EXTENSIONS = {ImageType.XML_SVG: ".svg"}

    def __init__(self, output_dir: Path):
        """Initialize with the target directory.

        Args:
            output_dir: Directory to write icons into (created on first insert)
        """
        self.output_dir = output_dir

    def path_for(self, icon: RenderedIcon) -> Path:
        return self.output_dir / f"{icon.name}{self.EXTENSIONS[icon.image_type]}"

    def insert(self, icon: RenderedIcon, hints: InsertionHints) -> None:
        path = self.path_for(icon)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(icon.payload, encoding="utf-8")
        except OSError as e:
            logger.warning(f"Failed to write icon {path}: {e}")
            return

        logger.info(
            f"Wrote {path} (placement left={hints.left}, top={hints.top}, width={hints.width})"
        )
