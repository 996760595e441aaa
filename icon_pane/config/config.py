"""Configuration classes for Icon Pane."""

from dataclasses import dataclass, field
from pathlib import Path

from icon_pane.models import InsertionHints
from icon_pane.resources import get_catalog_dir


def is_url(location: str | Path) -> bool:
    """Check whether a catalog location points at an HTTP(S) resource."""
    return isinstance(location, str) and location.startswith(("http://", "https://"))


@dataclass(frozen=True)
class IconPaneConfig:
    """Immutable configuration for the icon pane.

    All configuration is frozen (immutable) so worker threads can share it
    with the UI thread without copies.
    """

    # Icon set settings
    icon_set_name: str = "material"

    # Catalog source: a directory or an http(s) base URL holding <set>_icons.json
    catalog_location: Path | str = field(default_factory=get_catalog_dir)

    # Remote asset settings
    asset_url_template: str = (
        "https://fonts.gstatic.com/s/i/{bucket}/{name}/v{version}/24px.svg"
    )
    stylesheet_url: str = (
        "https://fonts.googleapis.com/css?family=Material+Icons|Material+Icons+Outlined"
        "|Material+Icons+Sharp|Material+Icons+Round|Material+Icons+Two+Tone"
    )
    request_timeout: float | None = None  # None = wait indefinitely

    # Placement hints handed to the insertion sink
    insert_left: int = 50
    insert_top: int = 50
    insert_width: int = 400

    # When set, rendered icons are written here instead of the clipboard
    output_dir: Path | None = None

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.catalog_location, str) and not is_url(self.catalog_location):
            object.__setattr__(self, "catalog_location", Path(self.catalog_location))
        if isinstance(self.output_dir, str):
            object.__setattr__(self, "output_dir", Path(self.output_dir) if self.output_dir else None)

    @property
    def insertion_hints(self) -> InsertionHints:
        """Fixed placement hints for every insertion."""
        return InsertionHints(left=self.insert_left, top=self.insert_top, width=self.insert_width)
