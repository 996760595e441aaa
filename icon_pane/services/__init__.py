"""Services for Icon Pane."""

from .catalog_loader import CatalogLoader
from .icon_sets import ICON_SETS, MaterialIconSet, create_icon_set
from .svg_recolor import recolor_svg

__all__ = [
    "CatalogLoader",
    "ICON_SETS",
    "MaterialIconSet",
    "create_icon_set",
    "recolor_svg",
]
