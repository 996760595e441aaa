"""Google Material Icons icon set."""

import logging
from enum import Enum

import requests

from icon_pane.config import IconPaneConfig
from icon_pane.exceptions import InvalidThemeError, RenderFetchError
from icon_pane.interfaces import IconButtonLike, PresentationSurface
from icon_pane.models import (
    IconCatalog,
    IconRef,
    ImageType,
    OptionSchema,
    OptionSpec,
    OptionValues,
    PresentationState,
    RenderedIcon,
)
from icon_pane.services.catalog_loader import CatalogLoader
from icon_pane.services.svg_recolor import recolor_svg

logger = logging.getLogger(__name__)


class MaterialTheme(Enum):
    """The five Material Icons visual themes, in menu order."""

    SHARP = "Sharp"
    FILLED = "Filled"
    OUTLINED = "Outlined"
    ROUNDED = "Rounded"
    TWO_TONE = "Two-Tone"

    @classmethod
    def from_value(cls, value: str | None) -> "MaterialTheme":
        """Resolve a theme option value. An unset value means SHARP.

        Raises:
            InvalidThemeError: If the value is not one of the five theme names
        """
        if not value:
            return cls.SHARP
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidThemeError(f"Unknown Material theme: {value!r}") from e


THEME_BUCKETS: dict[MaterialTheme, str] = {
    MaterialTheme.SHARP: "materialiconssharp",
    MaterialTheme.FILLED: "materialicons",
    MaterialTheme.OUTLINED: "materialiconsoutlined",
    MaterialTheme.ROUNDED: "materialiconsround",
    MaterialTheme.TWO_TONE: "materialiconstwotone",
}

THEME_CLASSES: dict[MaterialTheme, str] = {
    MaterialTheme.SHARP: "mat-sharp",
    MaterialTheme.FILLED: "mat-fill",
    MaterialTheme.OUTLINED: "mat-outlined",
    MaterialTheme.ROUNDED: "mat-round",
    MaterialTheme.TWO_TONE: "mat-two-tone",
}

DEFAULT_COLOR = "black"
DEFAULT_VERSION = 1

# Only these two spellings of black are exempt from the Two-Tone warning
BLACK_LITERALS = ("black", "rgb(0, 0, 0)")

# Two-Tone glyphs in the preview font ignore the text color
TWO_TONE_WARNING = (
    "Os ícones serão inseridos com a cor correta apesar de alguns estarem sempre pretos abaixo"
)


class MaterialIconSet:
    """Material Icons, recolorable and available in five themes.

    Implements IconSetProvider protocol.
    """

    def __init__(self, config: IconPaneConfig, catalog_loader: CatalogLoader | None = None):
        """Initialize the icon set.

        Args:
            config: Configuration with asset and stylesheet URLs
            catalog_loader: Optional loader override (defaults to one built from config)
        """
        self.config = config
        self._catalog_loader = catalog_loader or CatalogLoader(config)
        self._state = PresentationState()

    @property
    def name(self) -> str:
        return "material"

    @property
    def image_type(self) -> ImageType:
        return ImageType.XML_SVG

    @property
    def messages(self) -> list[str]:
        return list(self._state.warnings)

    @property
    def presentation_state(self) -> PresentationState:
        """Presentation applied by the last options change."""
        return self._state

    def load_catalog(self) -> IconCatalog:
        return self._catalog_loader.load(self.name)

    def declare_option_schema(self) -> OptionSchema:
        return {
            "color": OptionSpec.color_picker(DEFAULT_COLOR),
            "theme": OptionSpec.choice_list([theme.value for theme in MaterialTheme]),
        }

    def initialize_presentation(self, surface: PresentationSurface) -> None:
        surface.attach_stylesheet(self.config.stylesheet_url)

    def on_options_changed(self, values: OptionValues, surface: PresentationSurface) -> None:
        state = self.compute_presentation(values)
        surface.set_theme_class(state.theme_class, THEME_CLASSES.values())
        surface.set_color(state.color)
        self._state = state

    @staticmethod
    def compute_presentation(values: OptionValues) -> PresentationState:
        """Derive the presentation state for a set of option values.

        Args:
            values: Current option values

        Returns:
            New PresentationState; identical inputs give equal states
        """
        theme = MaterialTheme.from_value(values.get("theme"))
        color = values.get("color") or DEFAULT_COLOR

        warnings: tuple[str, ...] = ()
        if theme is MaterialTheme.TWO_TONE and color not in BLACK_LITERALS:
            warnings = (TWO_TONE_WARNING,)

        return PresentationState(theme_class=THEME_CLASSES[theme], color=color, warnings=warnings)

    def render_icon_button(
        self, category: str, name: str, ref: IconRef, button: IconButtonLike
    ) -> None:
        # The icon fonts turn the ligature text into the glyph
        button.setText(name)

    def asset_url(self, theme: MaterialTheme, name: str, ref: IconRef) -> str:
        """Build the SVG asset URL for an icon in a theme."""
        version = DEFAULT_VERSION if ref is None else ref
        return self.config.asset_url_template.format(
            bucket=THEME_BUCKETS[theme], name=name, version=version
        )

    def fetch_rendered_icon(self, name: str, ref: IconRef, values: OptionValues) -> RenderedIcon:
        """Download an icon's SVG for the selected theme and recolor it.

        Args:
            name: Icon name
            ref: Catalog version token
            values: Option values (theme and color)

        Returns:
            RenderedIcon with SVG markup

        Raises:
            RenderFetchError: On network failure or unparseable markup
            InvalidThemeError: If the theme value is not a Material theme
        """
        theme = MaterialTheme.from_value(values.get("theme"))
        color = values.get("color") or DEFAULT_COLOR
        url = self.asset_url(theme, name, ref)

        logger.debug(f"Fetching icon asset {url}")
        try:
            response = requests.get(url, timeout=self.config.request_timeout)
            response.raise_for_status()
            markup = response.text
        except requests.exceptions.ConnectionError as e:
            raise RenderFetchError(f"Cannot reach icon source for '{name}'") from e
        except requests.RequestException as e:
            raise RenderFetchError(f"Error fetching icon '{name}': {e}") from e

        return RenderedIcon(name=name, payload=recolor_svg(markup, color), image_type=self.image_type)
