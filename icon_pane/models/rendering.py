"""Data models for rendered icons and their insertion."""

from dataclasses import dataclass
from enum import Enum

from .catalog import IconRef
from .options import OptionValues


class ImageType(Enum):
    """Encoding of a rendered icon payload, as understood by the insertion sink."""

    XML_SVG = "XmlSvg"


@dataclass(frozen=True)
class RenderedIcon:
    """A ready-to-insert encoded image. Created per request, never cached."""

    name: str
    payload: str
    image_type: ImageType

    def __str__(self) -> str:
        return f"{self.name} [{self.image_type.value}, {len(self.payload)} chars]"


@dataclass(frozen=True)
class InsertionHints:
    """Placement hints passed to the insertion sink.

    Presentation defaults, not computed from icon dimensions.
    """

    left: int = 50
    top: int = 50
    width: int = 400


@dataclass(frozen=True)
class IconIdentity:
    """Identity attached to a catalog grid control."""

    category: str
    name: str

    def __str__(self) -> str:
        return f"{self.category}/{self.name}"


@dataclass(frozen=True)
class SelectionRequest:
    """A user selection resolved to everything needed to fetch the icon."""

    identity: IconIdentity
    ref: IconRef
    values: OptionValues
