"""Derived presentation state owned by an icon set."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PresentationState:
    """Presentation derived from the current option values.

    Replaced wholesale on every options change; never mutated in place.
    """

    theme_class: str = ""
    color: str = ""
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)
