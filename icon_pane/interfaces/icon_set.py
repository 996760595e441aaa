"""Protocol for pluggable icon sets."""

from typing import Protocol

from icon_pane.interfaces.presentation import IconButtonLike, PresentationSurface
from icon_pane.models import IconCatalog, IconRef, ImageType, OptionSchema, OptionValues, RenderedIcon


class IconSetProvider(Protocol):
    """Interface for an icon family the browser can display and insert.

    The browser, options controller and catalog renderer are written only
    against this protocol. Adding an icon family means adding a new
    implementation, never changing the call sites.
    """

    @property
    def name(self) -> str:
        """Registry name of this set (e.g., 'material'); also names its catalog file."""
        ...

    @property
    def image_type(self) -> ImageType:
        """Encoding of the payloads returned by fetch_rendered_icon."""
        ...

    @property
    def messages(self) -> list[str]:
        """Warnings derived from the last options change."""
        ...

    def load_catalog(self) -> IconCatalog:
        """Load the set's icon catalog.

        May block on network I/O.

        Raises:
            CatalogLoadError: If the source is unreachable or malformed.
        """
        ...

    def declare_option_schema(self) -> OptionSchema:
        """Return the set's option schema. Pure and constant per instance."""
        ...

    def initialize_presentation(self, surface: PresentationSurface) -> None:
        """Attach external presentation resources. Called once before any render."""
        ...

    def on_options_changed(self, values: OptionValues, surface: PresentationSurface) -> None:
        """Recompute presentation state and apply it to the surface.

        Args:
            values: Complete snapshot of the current option values.
            surface: Presentation surface the icon grid lives on.
        """
        ...

    def render_icon_button(
        self, category: str, name: str, ref: IconRef, button: IconButtonLike
    ) -> None:
        """Populate a grid control's visible label for one catalog entry. No network."""
        ...

    def fetch_rendered_icon(self, name: str, ref: IconRef, values: OptionValues) -> RenderedIcon:
        """Fetch and transform an icon for insertion.

        Args:
            name: Icon name.
            ref: Catalog version/variant token for the icon.
            values: Option values to render with.

        Returns:
            A fresh RenderedIcon.

        Raises:
            RenderFetchError: If the asset cannot be retrieved or transformed.
        """
        ...
