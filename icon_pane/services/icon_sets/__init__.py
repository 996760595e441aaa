"""Icon set implementations."""

from icon_pane.config import IconPaneConfig
from icon_pane.interfaces import IconSetProvider

from .material_icon_set import MaterialIconSet, MaterialTheme

ICON_SETS = {
    "material": MaterialIconSet,
}


def create_icon_set(name: str, config: IconPaneConfig) -> IconSetProvider:
    """Create the icon set registered under a name.

    Raises:
        ValueError: If no icon set is registered under the name
    """
    try:
        icon_set_class = ICON_SETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown icon set '{name}'. Available: {', '.join(sorted(ICON_SETS))}"
        ) from None
    return icon_set_class(config)


__all__ = ["ICON_SETS", "MaterialIconSet", "MaterialTheme", "create_icon_set"]
