"""Interface protocols for Icon Pane."""

from .icon_set import IconSetProvider
from .insertion_sink import InsertionSink
from .presentation import IconButtonLike, PresentationSurface
from .presenter import PresenterProtocol

__all__ = [
    "IconSetProvider",
    "InsertionSink",
    "IconButtonLike",
    "PresentationSurface",
    "PresenterProtocol",
]
