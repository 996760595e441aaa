"""Default configuration values for Icon Pane."""

from .config import IconPaneConfig


def create_default_config(**overrides) -> IconPaneConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        IconPaneConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            catalog_location="https://example.com/catalogs",
            request_timeout=10.0,
        )
    """
    return IconPaneConfig(**overrides)
