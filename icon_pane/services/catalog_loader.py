"""Service for loading icon catalogs from disk or over HTTP."""

import json
import logging
from pathlib import Path

import requests

from icon_pane.config import IconPaneConfig, is_url
from icon_pane.exceptions import CatalogLoadError
from icon_pane.models import IconCatalog

logger = logging.getLogger(__name__)


class CatalogLoader:
    """Loads ``<set>_icons.json`` catalogs from the configured location (stateless service)."""

    def __init__(self, config: IconPaneConfig):
        """Initialize the catalog loader.

        Args:
            config: Configuration holding the catalog location and timeout
        """
        self.config = config

    @staticmethod
    def catalog_filename(set_name: str) -> str:
        return f"{set_name}_icons.json"

    def load(self, set_name: str) -> IconCatalog:
        """Load and validate the catalog for an icon set.

        Args:
            set_name: Icon set registry name

        Returns:
            The parsed catalog

        Raises:
            CatalogLoadError: If the catalog is unreachable or malformed
        """
        location = self.config.catalog_location
        filename = self.catalog_filename(set_name)

        if is_url(location):
            document = self._fetch_document(f"{location.rstrip('/')}/{filename}")
        else:
            document = self._read_document(Path(location) / filename)

        catalog = IconCatalog.from_document(document)
        logger.info(
            f"Loaded '{set_name}' catalog: {len(catalog)} categories, {catalog.icon_count} icons"
        )
        return catalog

    def _fetch_document(self, url: str) -> object:
        logger.debug(f"Fetching catalog from {url}")
        try:
            response = requests.get(url, timeout=self.config.request_timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.ConnectionError as e:
            raise CatalogLoadError(f"Cannot reach catalog source: {url}") from e
        except requests.RequestException as e:
            raise CatalogLoadError(f"Error fetching catalog {url}: {e}") from e
        except ValueError as e:
            raise CatalogLoadError(f"Catalog at {url} is not valid JSON: {e}") from e

    @staticmethod
    def _read_document(path: Path) -> object:
        if not path.exists():
            raise CatalogLoadError(f"Catalog file not found at: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CatalogLoadError(f"Catalog file {path} is not valid JSON: {e}") from e
        except OSError as e:
            raise CatalogLoadError(f"Error reading catalog file {path}: {e}") from e
