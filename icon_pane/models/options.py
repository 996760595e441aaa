"""Data models for icon set rendering options."""

from dataclasses import dataclass
from enum import Enum

OptionValues = dict[str, str]


class OptionKind(Enum):
    """Kind of control an option is edited with."""

    COLOR_PICKER = "colorPicker"
    CHOICE_LIST = "choiceList"


@dataclass(frozen=True)
class OptionSpec:
    """Declaration of a single rendering option."""

    kind: OptionKind
    choices: tuple[str, ...] = ()
    default: str | None = None

    def __post_init__(self):
        if self.kind is OptionKind.CHOICE_LIST and not self.choices:
            raise ValueError("A choice list option needs at least one choice")
        if self.kind is OptionKind.COLOR_PICKER and self.choices:
            raise ValueError("A color picker option takes no choices")

    @classmethod
    def color_picker(cls, default: str) -> "OptionSpec":
        return cls(OptionKind.COLOR_PICKER, default=default)

    @classmethod
    def choice_list(cls, choices: list[str] | tuple[str, ...]) -> "OptionSpec":
        return cls(OptionKind.CHOICE_LIST, choices=tuple(choices))

    @property
    def initial_value(self) -> str:
        """Value a freshly built control starts with."""
        if self.default is not None:
            return self.default
        if self.choices:
            return self.choices[0]
        return ""


OptionSchema = dict[str, OptionSpec]


def default_values(schema: OptionSchema) -> OptionValues:
    """Values a schema's controls hold before the user touches them."""
    return {name: spec.initial_value for name, spec in schema.items()}
