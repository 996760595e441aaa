"""Tests for the web-font stylesheet service."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from icon_pane.services.font_stylesheet import FontFace, download_font_faces, parse_font_faces

GOOGLE_CSS = """
/* fallback */
@font-face {
  font-family: 'Material Icons';
  font-style: normal;
  font-weight: 400;
  src: url(https://fonts.test/materialicons.woff2) format('woff2');
}

@font-face {
  font-family: 'Material Icons Outlined';
  font-style: normal;
  src: url("https://fonts.test/outlined.woff2") format('woff2');
}

.material-icons {
  font-family: 'Material Icons';
}
"""


def _response(text="", content=b""):
    response = MagicMock()
    response.text = text
    response.content = content
    response.raise_for_status.return_value = None
    return response


class TestParseFontFaces:
    """Tests for parse_font_faces."""

    def test_extracts_faces_in_order(self):
        assert parse_font_faces(GOOGLE_CSS) == [
            FontFace("Material Icons", "https://fonts.test/materialicons.woff2"),
            FontFace("Material Icons Outlined", "https://fonts.test/outlined.woff2"),
        ]

    def test_skips_rules_without_source(self):
        css = "@font-face { font-family: 'Lonely'; font-style: normal; }"
        assert parse_font_faces(css) == []

    def test_empty_stylesheet(self):
        assert parse_font_faces("") == []


class TestDownloadFontFaces:
    """Tests for download_font_faces."""

    @patch("icon_pane.services.font_stylesheet.requests.get")
    def test_downloads_each_face(self, mock_get):
        mock_get.side_effect = [
            _response(text=GOOGLE_CSS),
            _response(content=b"filled"),
            _response(content=b"outlined"),
        ]

        fonts = download_font_faces("https://fonts.test/css", timeout=5)

        assert fonts == [("Material Icons", b"filled"), ("Material Icons Outlined", b"outlined")]
        mock_get.assert_any_call("https://fonts.test/css", timeout=5)
        mock_get.assert_any_call("https://fonts.test/outlined.woff2", timeout=5)

    @patch("icon_pane.services.font_stylesheet.requests.get")
    def test_failed_font_is_skipped(self, mock_get):
        mock_get.side_effect = [
            _response(text=GOOGLE_CSS),
            requests.ConnectionError("offline"),
            _response(content=b"outlined"),
        ]

        fonts = download_font_faces("https://fonts.test/css")

        assert fonts == [("Material Icons Outlined", b"outlined")]

    @patch("icon_pane.services.font_stylesheet.requests.get")
    def test_stylesheet_failure_propagates(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("offline")

        with pytest.raises(requests.ConnectionError):
            download_font_faces("https://fonts.test/css")
