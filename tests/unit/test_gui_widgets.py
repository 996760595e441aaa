"""Tests for the Qt option controls, icon grid and messages area.

Requires PyQt6 to be importable. Tests are skipped if PyQt6 or a display is unavailable.
"""

import os
from unittest.mock import patch

import pytest

from icon_pane.models import IconIdentity, OptionSpec
from icon_pane.orchestration import OptionsController

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Skip all tests in this module if PyQt6 is not available or no display
try:
    from PyQt6.QtGui import QColor
    from PyQt6.QtWidgets import QApplication, QColorDialog, QHBoxLayout, QWidget

    # Create QApplication if not already running (needed for any widget)
    _app = QApplication.instance() or QApplication([])

    from icon_pane.gui.widgets import (
        CategoryGroup,
        ChoiceListControl,
        ColorPickerControl,
        IconButton,
        IconGridWidget,
        MessagesWidget,
        QtControlFactory,
    )
    from icon_pane.gui.widgets.option_controls import qcolor_from_css

    _HAS_QT = True
except (ImportError, RuntimeError):
    _HAS_QT = False

pytestmark = pytest.mark.skipif(not _HAS_QT, reason="PyQt6 or display not available")


class _SchemaIconSet:
    """Icon set stand-in that records option changes."""

    def __init__(self, schema):
        self.schema = schema
        self.messages = []
        self.changes = []

    def declare_option_schema(self):
        return self.schema

    def on_options_changed(self, values, surface):
        self.changes.append(dict(values))


@pytest.fixture
def host():
    widget = QWidget()
    layout = QHBoxLayout(widget)
    yield widget, layout
    widget.deleteLater()


class TestOptionControls:
    """Tests for Qt option controls driven by OptionsController."""

    def _build(self, host, recording_surface, recording_presenter):
        widget, layout = host
        icon_set = _SchemaIconSet(
            {
                "color": OptionSpec.color_picker("black"),
                "theme": OptionSpec.choice_list(["Sharp", "Filled", "Two-Tone"]),
            }
        )
        controller = OptionsController(icon_set, recording_surface, recording_presenter)
        controller.build(QtControlFactory(layout, widget))
        return icon_set, controller

    def test_controls_created_in_order(self, host, recording_surface, recording_presenter):
        _widget, layout = host
        _icon_set, controller = self._build(host, recording_surface, recording_presenter)

        assert layout.count() == 2
        assert isinstance(layout.itemAt(0).widget(), ColorPickerControl)
        assert isinstance(layout.itemAt(1).widget(), ChoiceListControl)
        assert controller.current_values() == {"color": "black", "theme": "Sharp"}

    def test_building_does_not_fire_changes(self, host, recording_surface, recording_presenter):
        icon_set, _controller = self._build(host, recording_surface, recording_presenter)
        assert icon_set.changes == []

    def test_choice_change_notifies_once(self, host, recording_surface, recording_presenter):
        icon_set, controller = self._build(host, recording_surface, recording_presenter)

        controller.controls["theme"].set_value("Two-Tone")

        assert icon_set.changes == [{"color": "black", "theme": "Two-Tone"}]
        assert recording_presenter.message_updates == [[]]

    def test_color_change_notifies_once(self, host, recording_surface, recording_presenter):
        icon_set, controller = self._build(host, recording_surface, recording_presenter)

        controller.controls["color"].set_color("rgb(255, 0, 0)")

        assert icon_set.changes == [{"color": "rgb(255, 0, 0)", "theme": "Sharp"}]

    def test_unknown_choice_rejected(self, host, recording_surface, recording_presenter):
        _icon_set, controller = self._build(host, recording_surface, recording_presenter)

        with pytest.raises(ValueError):
            controller.controls["theme"].set_value("Glossy")


class TestColorPickerControl:
    """Tests for the color picker's dialog seeding and reported values."""

    def test_initial_name_seeds_dialog(self):
        control = ColorPickerControl("color", "black", lambda: None)
        assert control.qcolor == QColor(0, 0, 0)

    def test_second_pick_opens_on_first(self):
        changes = []
        control = ColorPickerControl(
            "color", "black", lambda: changes.append(control.current_value())
        )

        with patch.object(
            QColorDialog, "getColor", side_effect=[QColor(255, 0, 0), QColor(0, 0, 255)]
        ) as get_color:
            control.click()
            control.click()

        assert get_color.call_args_list[0].args[0] == QColor(0, 0, 0)
        assert get_color.call_args_list[1].args[0] == QColor(255, 0, 0)
        assert changes == ["rgb(255, 0, 0)", "rgb(0, 0, 255)"]
        assert control.current_value() == "rgb(0, 0, 255)"

    def test_cancelled_dialog_keeps_value(self):
        changes = []
        control = ColorPickerControl("color", "black", lambda: changes.append(True))

        with patch.object(QColorDialog, "getColor", return_value=QColor()):
            control.click()

        assert changes == []
        assert control.current_value() == "black"

    def test_set_rgb_value_is_parsed(self):
        control = ColorPickerControl("color", "black", lambda: None)

        control.set_color("rgb(12, 34, 56)")

        assert control.qcolor == QColor(12, 34, 56)

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("rgb(255, 0, 0)", (255, 0, 0)),
            ("rgb(1,2,3)", (1, 2, 3)),
            ("#00ff00", (0, 255, 0)),
            ("black", (0, 0, 0)),
        ],
    )
    def test_qcolor_from_css(self, value, expected):
        color = qcolor_from_css(value)
        assert color.isValid()
        assert (color.red(), color.green(), color.blue()) == expected


class TestIconGridWidget:
    """Tests for IconGridWidget as catalog grid and presentation surface."""

    @pytest.fixture
    def grid(self):
        widget = IconGridWidget()
        yield widget
        widget.deleteLater()

    def test_groups_and_buttons(self, grid):
        group = grid.add_group("action")
        button = grid.add_button(group, IconIdentity("action", "home"))

        assert isinstance(group, CategoryGroup)
        assert group.title() == "action"
        assert isinstance(button, IconButton)
        assert button.icon_identity == IconIdentity("action", "home")
        assert grid.groups == [group]
        assert group.buttons.buttons() == [button]

    def test_add_button_requires_group(self, grid):
        with pytest.raises(TypeError):
            grid.add_button(object(), IconIdentity("action", "home"))

    def test_click_emits_button(self, grid):
        group = grid.add_group("action")
        button = grid.add_button(group, IconIdentity("action", "home"))
        clicked = []
        grid.icon_clicked.connect(clicked.append)

        button.click()

        assert clicked == [button]

    def test_theme_class_replaces_previous(self, grid):
        themes = ["mat-sharp", "mat-fill", "mat-outlined"]

        grid.set_theme_class("mat-sharp", themes)
        grid.set_theme_class("mat-fill", themes)

        assert grid.classes == {"mat-fill"}

    def test_theme_class_sets_icon_font(self, grid):
        group = grid.add_group("action")
        button = grid.add_button(group, IconIdentity("action", "home"))

        grid.set_theme_class("mat-outlined", ["mat-sharp", "mat-outlined"])

        assert button.font().family() == "Material Icons Outlined"

    def test_set_color(self, grid):
        grid.set_color("#ff0000")

        assert grid.color == "#ff0000"
        assert "color: #ff0000" in grid.styleSheet()


class TestMessagesWidget:
    """Tests for the messages area."""

    def test_hidden_when_empty(self):
        widget = MessagesWidget()
        assert widget.isHidden()
        assert widget.messages == []

    def test_shows_messages(self):
        widget = MessagesWidget()

        widget.set_messages(["first", "second"])

        assert widget.messages == ["first", "second"]
        assert not widget.isHidden()

    def test_clears_messages(self):
        widget = MessagesWidget()
        widget.set_messages(["first"])

        widget.set_messages([])

        assert widget.messages == []
        assert widget.isHidden()
