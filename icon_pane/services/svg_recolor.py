"""Recoloring of SVG icon markup."""

import re
import xml.etree.ElementTree as ET

from icon_pane.exceptions import RenderFetchError

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

# Serialize without ns0: prefixes
ET.register_namespace("", SVG_NAMESPACE)
ET.register_namespace("xlink", XLINK_NAMESPACE)

_STYLE_FILL_PATTERN = re.compile(r"(^|;)\s*fill\s*:[^;]*;?")


def recolor_svg(markup: str, color: str) -> str:
    """Overwrite the root fill color of an SVG document.

    Child shapes inherit the root fill unless they set their own. A ``fill``
    declaration in the root ``style`` attribute is dropped so it cannot
    override the new attribute.

    Args:
        markup: SVG document text
        color: Any CSS color value (e.g., "#ff0000", "rgb(255, 0, 0)", "red")

    Returns:
        Serialized SVG markup with the new fill

    Raises:
        RenderFetchError: If the markup is not a parseable SVG document
    """
    try:
        root = ET.fromstring(markup)
    except ET.ParseError as e:
        raise RenderFetchError(f"Icon markup is not valid XML: {e}") from e

    if root.tag not in (f"{{{SVG_NAMESPACE}}}svg", "svg"):
        raise RenderFetchError(f"Icon markup root is <{root.tag}>, expected <svg>")

    style = root.get("style")
    if style is not None:
        remaining = _STYLE_FILL_PATTERN.sub(r"\1", style).strip().strip(";").strip()
        if remaining:
            root.set("style", remaining)
        else:
            del root.attrib["style"]

    root.set("fill", color)
    return ET.tostring(root, encoding="unicode")
