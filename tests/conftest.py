"""Pytest configuration and shared fixtures."""

import json

import pytest

from icon_pane.config import IconPaneConfig
from icon_pane.presenters import NullPresenter

SAMPLE_CATALOG = {
    "action": {"home": 13, "settings": 12, "search": 13},
    "alert": {"warning": 13, "error": 13},
    "shapes": ["circle", "square", "triangle"],
}

SAMPLE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" height="24" viewBox="0 0 24 24" width="24">'
    '<path d="M0 0h24v24H0z" fill="none"/>'
    '<path d="M10 20v-6h4v6h5v-8h3L12 3 2 12h3v8z"/>'
    "</svg>"
)


@pytest.fixture
def catalog_dir(tmp_path):
    """Provide a directory holding a sample material_icons.json catalog."""
    directory = tmp_path / "catalogs"
    directory.mkdir()
    (directory / "material_icons.json").write_text(json.dumps(SAMPLE_CATALOG), encoding="utf-8")
    return directory


@pytest.fixture
def test_config(catalog_dir, tmp_path):
    """Provide a test configuration with temporary paths."""
    return IconPaneConfig(
        catalog_location=catalog_dir,
        asset_url_template="https://assets.test/{bucket}/{name}/v{version}/24px.svg",
        stylesheet_url="https://fonts.test/css",
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


class RecordingPresenter:
    """A real PresenterProtocol implementation that records all calls for assertion."""

    def __init__(self):
        self.infos = []
        self.warnings = []
        self.errors = []
        self.message_updates = []

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_messages(self, messages: list[str]) -> None:
        self.message_updates.append(list(messages))

    @property
    def current_messages(self) -> list[str]:
        return self.message_updates[-1] if self.message_updates else []


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()


class RecordingSurface:
    """A PresentationSurface that records what icon sets apply to it."""

    def __init__(self):
        self.classes = set()
        self.color = ""
        self.stylesheets = []

    def attach_stylesheet(self, url: str) -> None:
        self.stylesheets.append(url)

    def set_theme_class(self, class_name, all_classes) -> None:
        self.classes.difference_update(all_classes)
        self.classes.add(class_name)

    def set_color(self, color: str) -> None:
        self.color = color


@pytest.fixture
def recording_surface():
    """Provide a presentation surface that records applied presentation."""
    return RecordingSurface()


class RecordingSink:
    """An InsertionSink that records every insertion."""

    def __init__(self):
        self.inserted = []

    def insert(self, icon, hints) -> None:
        self.inserted.append((icon, hints))


@pytest.fixture
def recording_sink():
    """Provide an insertion sink that records insertions."""
    return RecordingSink()


class FakeControl:
    """Option control with a settable value that fires on_change like a user edit."""

    def __init__(self, name, kind, value, on_change, choices=()):
        self.name = name
        self.kind = kind
        self.value = value
        self.choices = choices
        self._on_change = on_change

    def current_value(self) -> str:
        return self.value

    def set_value(self, value: str) -> None:
        self.value = value
        self._on_change()


class FakeControlFactory:
    """ControlFactory that builds FakeControls and remembers them in order."""

    def __init__(self):
        self.created = []

    def create_color_picker(self, name, initial, on_change):
        control = FakeControl(name, "color", initial, on_change)
        self.created.append(control)
        return control

    def create_choice_list(self, name, choices, on_change):
        control = FakeControl(name, "choice", choices[0], on_change, choices)
        self.created.append(control)
        return control

    def by_name(self, name):
        return next(control for control in self.created if control.name == name)


@pytest.fixture
def control_factory():
    """Provide a toolkit-free control factory."""
    return FakeControlFactory()


class FakeButton:
    """Grid control that records its label and tooltip."""

    def __init__(self, identity):
        self.icon_identity = identity
        self.text = ""
        self.tooltip = ""

    def setText(self, text: str) -> None:
        self.text = text

    def setToolTip(self, text: str) -> None:
        self.tooltip = text


class FakeGroup:
    def __init__(self, category):
        self.category = category
        self.buttons = []


class FakeGrid:
    """CatalogGrid that keeps groups and buttons in creation order."""

    def __init__(self):
        self.groups = []

    def add_group(self, category):
        group = FakeGroup(category)
        self.groups.append(group)
        return group

    def add_button(self, group, identity):
        button = FakeButton(identity)
        group.buttons.append(button)
        return button

    def find(self, category, name):
        for group in self.groups:
            for button in group.buttons:
                if group.category == category and button.icon_identity.name == name:
                    return button
        raise LookupError(f"{category}/{name}")


@pytest.fixture
def fake_grid():
    """Provide a toolkit-free catalog grid."""
    return FakeGrid()


@pytest.fixture
def sample_svg():
    """Provide a minimal Material-style SVG document."""
    return SAMPLE_SVG


@pytest.fixture
def sample_catalog():
    """Provide the sample catalog as a parsed IconCatalog."""
    from icon_pane.models import IconCatalog

    return IconCatalog.from_document(SAMPLE_CATALOG)
