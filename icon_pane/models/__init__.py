"""Data models for Icon Pane."""

from .catalog import IconCatalog, IconCategory, IconEntry, IconRef
from .options import OptionKind, OptionSchema, OptionSpec, OptionValues, default_values
from .presentation import PresentationState
from .rendering import (
    IconIdentity,
    ImageType,
    InsertionHints,
    RenderedIcon,
    SelectionRequest,
)

__all__ = [
    "IconCatalog",
    "IconCategory",
    "IconEntry",
    "IconRef",
    "OptionKind",
    "OptionSpec",
    "OptionSchema",
    "OptionValues",
    "default_values",
    "PresentationState",
    "ImageType",
    "RenderedIcon",
    "InsertionHints",
    "IconIdentity",
    "SelectionRequest",
]
