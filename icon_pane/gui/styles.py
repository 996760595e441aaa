"""Design variables for consistent UI styling.

Usage:
    from icon_pane.gui.styles import SPACING, FONT_SIZES

    layout.setSpacing(SPACING.sm)
    font.setPixelSize(FONT_SIZES.caption)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Spacing:
    """Spacing values based on 4px/8px grid system."""

    xxs: int = 4
    xs: int = 8
    sm: int = 12


@dataclass(frozen=True)
class FontSizes:
    """Font size values in pixels."""

    h3: int = 16  # Category group titles
    caption: int = 12  # Messages area, notices


@dataclass(frozen=True)
class Colors:
    """Fixed colors for notices (not themed by icon sets)."""

    warning_bg: str = "#fff4e5"
    warning_fg: str = "#8a4b00"
    error_fg: str = "#b00020"


SPACING = Spacing()
FONT_SIZES = FontSizes()
COLORS = Colors()
