"""Data models for the icon catalog."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from icon_pane.exceptions import CatalogLoadError

IconRef = str | int | float | None  # Opaque version/variant token


@dataclass(frozen=True)
class IconEntry:
    """A single icon in a catalog category."""

    name: str
    ref: IconRef = None  # None for list-shaped categories

    def __str__(self) -> str:
        return self.name if self.ref is None else f"{self.name} (v{self.ref})"


@dataclass(frozen=True)
class IconCategory:
    """An ordered group of icons sharing a category name."""

    name: str
    entries: tuple[IconEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[IconEntry]:
        return iter(self.entries)


@dataclass(frozen=True)
class IconCatalog:
    """Immutable, ordered catalog of icon categories.

    Loaded once per session and never mutated afterwards.
    """

    categories: tuple[IconCategory, ...]

    @classmethod
    def from_document(cls, document: object) -> "IconCatalog":
        """Build a catalog from a decoded catalog document.

        The document maps category names to either a list of icon names or
        a mapping of icon name to a string/number version token.

        Args:
            document: Decoded JSON document

        Returns:
            IconCatalog preserving the document's iteration order

        Raises:
            CatalogLoadError: If the document does not have the expected shape
        """
        if not isinstance(document, Mapping):
            raise CatalogLoadError("Catalog must be a mapping of category names to icons")

        categories = []
        for category_name, icons in document.items():
            if not isinstance(category_name, str):
                raise CatalogLoadError(f"Invalid category name: {category_name!r}")
            categories.append(IconCategory(category_name, cls._parse_entries(category_name, icons)))

        return cls(tuple(categories))

    @staticmethod
    def _parse_entries(category_name: str, icons: object) -> tuple[IconEntry, ...]:
        if isinstance(icons, list):
            entries = []
            seen: set[str] = set()
            for name in icons:
                if not isinstance(name, str):
                    raise CatalogLoadError(f"Invalid icon name in '{category_name}': {name!r}")
                if name in seen:
                    raise CatalogLoadError(f"Duplicate icon '{name}' in category '{category_name}'")
                seen.add(name)
                entries.append(IconEntry(name))
            return tuple(entries)

        if isinstance(icons, Mapping):
            entries = []
            for name, version in icons.items():
                # bool is an int subclass but never a valid version token
                if isinstance(version, bool) or not isinstance(version, (str, int, float)):
                    raise CatalogLoadError(
                        f"Invalid version for '{name}' in '{category_name}': {version!r}"
                    )
                entries.append(IconEntry(name, version))
            return tuple(entries)

        raise CatalogLoadError(
            f"Category '{category_name}' must be a list or a mapping, got {type(icons).__name__}"
        )

    def __len__(self) -> int:
        return len(self.categories)

    def __iter__(self) -> Iterator[IconCategory]:
        return iter(self.categories)

    @property
    def category_names(self) -> list[str]:
        """Category names in catalog order."""
        return [category.name for category in self.categories]

    @property
    def icon_count(self) -> int:
        """Total number of icons across all categories."""
        return sum(len(category) for category in self.categories)

    def get_category(self, category_name: str) -> IconCategory:
        """Get a category by name.

        Raises:
            KeyError: If the category is not in the catalog
        """
        for category in self.categories:
            if category.name == category_name:
                return category
        raise KeyError(category_name)

    def lookup(self, category_name: str, icon_name: str) -> IconEntry:
        """Get an icon entry by category and icon name.

        Raises:
            KeyError: If the category or icon is not in the catalog
        """
        for entry in self.get_category(category_name):
            if entry.name == icon_name:
                return entry
        raise KeyError(f"{category_name}/{icon_name}")
