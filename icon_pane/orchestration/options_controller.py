"""Generic options controller built from an icon set's option schema."""

from collections.abc import Callable
from typing import Protocol

from icon_pane.interfaces import IconSetProvider, PresentationSurface, PresenterProtocol
from icon_pane.models import OptionKind, OptionSchema, OptionValues, default_values


class OptionControl(Protocol):
    """A built option control that can report its current value."""

    def current_value(self) -> str: ...


class ControlFactory(Protocol):
    """Creates option controls in a UI toolkit.

    Every control must call ``on_change`` once per discrete user change.
    """

    def create_color_picker(
        self, name: str, initial: str, on_change: Callable[[], None]
    ) -> OptionControl: ...

    def create_choice_list(
        self, name: str, choices: tuple[str, ...], on_change: Callable[[], None]
    ) -> OptionControl: ...


class OptionsController:
    """Turns an option schema into controls and aggregates their values.

    Knows nothing about what any option means; it only reads the schema.
    The option values are recomputed from the controls on every change.
    """

    def __init__(
        self,
        icon_set: IconSetProvider,
        surface: PresentationSurface,
        presenter: PresenterProtocol,
    ):
        """Initialize the controller.

        Args:
            icon_set: Icon set whose schema drives the controls
            surface: Presentation surface handed to on_options_changed
            presenter: Presenter whose messages area shows the set's warnings
        """
        self.icon_set = icon_set
        self.surface = surface
        self.presenter = presenter
        self.schema: OptionSchema = icon_set.declare_option_schema()
        self._controls: dict[str, OptionControl] = {}
        self._built = False

    @property
    def is_built(self) -> bool:
        return self._built

    @property
    def controls(self) -> dict[str, OptionControl]:
        return dict(self._controls)

    def build(self, factory: ControlFactory) -> None:
        """Create exactly one control per declared option, in schema order.

        Raises:
            RuntimeError: If the controls were already built
        """
        if self._built:
            raise RuntimeError("Option controls have already been built")

        for name, spec in self.schema.items():
            if spec.kind is OptionKind.COLOR_PICKER:
                control = factory.create_color_picker(name, spec.initial_value, self.options_changed)
            elif spec.kind is OptionKind.CHOICE_LIST:
                control = factory.create_choice_list(name, spec.choices, self.options_changed)
            else:
                raise ValueError(f"Unsupported option kind for '{name}': {spec.kind}")
            self._controls[name] = control

        self._built = True

    def current_values(self) -> OptionValues:
        """Snapshot every option's current value.

        Before build() the schema defaults are returned, so the keys always
        equal the schema's keys.
        """
        values = default_values(self.schema)
        for name, control in self._controls.items():
            values[name] = control.current_value()
        return values

    def options_changed(self) -> None:
        """Recompute values, let the icon set re-apply presentation, refresh messages."""
        self.icon_set.on_options_changed(self.current_values(), self.surface)
        self.presenter.show_messages(self.icon_set.messages)
