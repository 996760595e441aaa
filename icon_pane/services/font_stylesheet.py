"""Service for resolving web-font stylesheets into downloadable font files."""

import logging
import re
from dataclasses import dataclass

import requests

logger = logging.getLogger(__name__)

_FONT_FACE_PATTERN = re.compile(r"@font-face\s*\{([^}]*)\}", re.DOTALL)
_FAMILY_PATTERN = re.compile(r"font-family\s*:\s*['\"]?([^;'\"]+)['\"]?\s*;")
_SRC_URL_PATTERN = re.compile(r"src\s*:\s*url\(\s*['\"]?([^)'\"]+)['\"]?\s*\)")


@dataclass(frozen=True)
class FontFace:
    """One ``@font-face`` rule: a family name and the URL of its font file."""

    family: str
    url: str


def parse_font_faces(css: str) -> list[FontFace]:
    """Extract the font faces declared in a stylesheet.

    Rules without a family or a ``url(...)`` source are skipped.

    Args:
        css: Stylesheet text

    Returns:
        Font faces in stylesheet order
    """
    faces = []
    for block in _FONT_FACE_PATTERN.findall(css):
        family = _FAMILY_PATTERN.search(block)
        src = _SRC_URL_PATTERN.search(block)
        if family and src:
            faces.append(FontFace(family.group(1).strip(), src.group(1).strip()))
    return faces


def download_font_faces(
    stylesheet_url: str, timeout: float | None = None
) -> list[tuple[str, bytes]]:
    """Download a stylesheet and every font file it references.

    Args:
        stylesheet_url: URL of the stylesheet
        timeout: Optional request timeout in seconds

    Returns:
        List of (family, font file bytes); faces whose file fails to
        download are left out

    Raises:
        requests.RequestException: If the stylesheet itself cannot be fetched
    """
    response = requests.get(stylesheet_url, timeout=timeout)
    response.raise_for_status()

    fonts = []
    for face in parse_font_faces(response.text):
        try:
            font_response = requests.get(face.url, timeout=timeout)
            font_response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"Failed to download font '{face.family}' from {face.url}: {e}")
            continue
        fonts.append((face.family, font_response.content))

    logger.info(f"Downloaded {len(fonts)} font(s) from {stylesheet_url}")
    return fonts
