"""Tests for CatalogRenderer."""

from unittest.mock import MagicMock

import pytest

from icon_pane.exceptions import RenderFetchError
from icon_pane.models import IconIdentity, ImageType, InsertionHints, RenderedIcon
from icon_pane.orchestration import CatalogRenderer, OptionsController


@pytest.fixture
def catalog(sample_catalog):
    return sample_catalog


@pytest.fixture
def icon_set():
    provider = MagicMock()
    provider.declare_option_schema.return_value = {}
    provider.messages = []
    provider.render_icon_button.side_effect = lambda category, name, ref, button: button.setText(
        name.upper()
    )
    provider.fetch_rendered_icon.side_effect = lambda name, ref, values: RenderedIcon(
        name=name, payload=f"<svg id='{name}'/>", image_type=ImageType.XML_SVG
    )
    return provider


@pytest.fixture
def options(icon_set, recording_surface, recording_presenter):
    return OptionsController(icon_set, recording_surface, recording_presenter)


@pytest.fixture
def renderer(icon_set, catalog, options, recording_sink, recording_presenter):
    return CatalogRenderer(icon_set, catalog, options, recording_sink, recording_presenter)


class TestRender:
    """Tests for materializing the grid."""

    def test_one_group_per_category_in_order(self, renderer, fake_grid):
        renderer.render(fake_grid)
        assert [group.category for group in fake_grid.groups] == ["action", "alert", "shapes"]

    def test_one_control_per_entry(self, renderer, fake_grid, catalog):
        count = renderer.render(fake_grid)

        assert count == catalog.icon_count
        for group in fake_grid.groups:
            assert len(group.buttons) == len(catalog.get_category(group.category))

    def test_list_category_preserves_order(self, renderer, fake_grid):
        renderer.render(fake_grid)

        shapes = fake_grid.groups[2]
        assert [b.icon_identity.name for b in shapes.buttons] == ["circle", "square", "triangle"]

    def test_buttons_carry_identity_and_tooltip(self, renderer, fake_grid):
        renderer.render(fake_grid)

        button = fake_grid.find("action", "settings")
        assert button.icon_identity == IconIdentity("action", "settings")
        assert button.tooltip == "settings"

    def test_icon_set_renders_labels(self, renderer, fake_grid, icon_set):
        renderer.render(fake_grid)

        assert fake_grid.find("alert", "warning").text == "WARNING"
        icon_set.render_icon_button.assert_any_call(
            "action", "home", 13, fake_grid.find("action", "home")
        )


class TestSelection:
    """Tests for click dispatch, rendering and insertion."""

    def test_click_inserts_with_fixed_hints(self, renderer, fake_grid, recording_sink, icon_set):
        renderer.render(fake_grid)

        renderer.handle_click(fake_grid.find("action", "home"))

        icon_set.fetch_rendered_icon.assert_called_once_with("home", 13, {})
        assert len(recording_sink.inserted) == 1
        icon, hints = recording_sink.inserted[0]
        assert icon.name == "home"
        assert hints == InsertionHints(left=50, top=50, width=400)

    def test_click_uses_current_option_values(
        self, icon_set, catalog, recording_sink, recording_presenter, recording_surface, fake_grid
    ):
        options = MagicMock()
        options.current_values.return_value = {"theme": "Outlined", "color": "#ff0000"}
        renderer = CatalogRenderer(icon_set, catalog, options, recording_sink, recording_presenter)
        renderer.render(fake_grid)

        renderer.handle_click(fake_grid.find("action", "settings"))

        icon_set.fetch_rendered_icon.assert_called_once_with(
            "settings", 12, {"theme": "Outlined", "color": "#ff0000"}
        )

    def test_list_entry_passes_no_ref(self, renderer, fake_grid, icon_set):
        renderer.render(fake_grid)
        renderer.handle_click(fake_grid.find("shapes", "square"))
        icon_set.fetch_rendered_icon.assert_called_once_with("square", None, {})

    def test_non_control_click_is_noop(self, renderer, fake_grid, recording_sink, icon_set):
        renderer.render(fake_grid)

        renderer.handle_click(fake_grid.groups[0])
        renderer.handle_click(object())
        renderer.handle_click(None)

        icon_set.fetch_rendered_icon.assert_not_called()
        assert recording_sink.inserted == []

    def test_identity_must_be_typed(self, renderer, icon_set):
        impostor = MagicMock()
        impostor.icon_identity = ("action", "home")

        assert renderer.resolve(impostor) is None
        icon_set.fetch_rendered_icon.assert_not_called()

    def test_unknown_identity_is_noop(self, renderer, icon_set):
        stray = MagicMock()
        stray.icon_identity = IconIdentity("action", "missing")

        renderer.handle_click(stray)

        icon_set.fetch_rendered_icon.assert_not_called()

    def test_render_failure_inserts_nothing(
        self, renderer, fake_grid, recording_sink, recording_presenter, icon_set
    ):
        icon_set.fetch_rendered_icon.side_effect = RenderFetchError("bad markup")
        renderer.render(fake_grid)

        result = renderer.process(renderer.resolve(fake_grid.find("action", "home")))

        assert result is None
        assert recording_sink.inserted == []
        assert len(recording_presenter.errors) == 1
        assert "home" in recording_presenter.errors[0]

    def test_grid_stays_usable_after_failure(self, renderer, fake_grid, recording_sink, icon_set):
        ok = icon_set.fetch_rendered_icon.side_effect
        icon_set.fetch_rendered_icon.side_effect = RenderFetchError("offline")
        renderer.render(fake_grid)
        renderer.handle_click(fake_grid.find("action", "home"))

        icon_set.fetch_rendered_icon.side_effect = ok
        renderer.handle_click(fake_grid.find("action", "home"))

        assert len(recording_sink.inserted) == 1

    def test_repeated_clicks_are_not_deduplicated(self, renderer, fake_grid, recording_sink):
        renderer.render(fake_grid)
        button = fake_grid.find("alert", "error")

        renderer.handle_click(button)
        renderer.handle_click(button)

        assert [icon.name for icon, _hints in recording_sink.inserted] == ["error", "error"]

    def test_custom_dispatcher_receives_request(self, icon_set, catalog, options, recording_sink, recording_presenter, fake_grid):
        requests_seen = []
        renderer = CatalogRenderer(
            icon_set, catalog, options, recording_sink, recording_presenter,
            dispatcher=requests_seen.append,
        )
        renderer.render(fake_grid)

        renderer.handle_click(fake_grid.find("action", "search"))

        assert [r.identity for r in requests_seen] == [IconIdentity("action", "search")]
        assert requests_seen[0].ref == 13
        assert recording_sink.inserted == []

    def test_invalid_theme_propagates(self, renderer, fake_grid, icon_set):
        from icon_pane.exceptions import InvalidThemeError

        icon_set.fetch_rendered_icon.side_effect = InvalidThemeError("Glossy")
        renderer.render(fake_grid)

        with pytest.raises(InvalidThemeError):
            renderer.handle_click(fake_grid.find("action", "home"))
