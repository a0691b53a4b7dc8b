"""
Tests for the minifier, formatter and storage adapters.
"""

from pathlib import Path

from svg_maker.adapters.formatter import pretty_print
from svg_maker.adapters.minifier import minify
from svg_maker.adapters.storage import resolve_svg_path, write_text_file

SOURCE = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!-- comment -->\n'
    '<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10" viewBox="0 0 10 10">\n'
    '  <rect width="10" height="10"/>\n'
    '</svg>\n'
)


class TestMinify:
    """Tests for minify."""

    def test_fixed_point(self):
        once = minify(SOURCE)

        assert minify(once) == once

    def test_prolog_and_comments_removed(self):
        minified = minify(SOURCE)

        assert not minified.startswith("<?xml")
        assert "comment" not in minified

    def test_keeps_dimensions_by_default(self):
        assert 'width="10"' in minify(SOURCE).split(">", 1)[0]

    def test_remove_dimensions_with_viewbox(self):
        root_tag = minify(SOURCE, remove_dimensions=True).split(">", 1)[0]

        assert "width=" not in root_tag
        assert "height=" not in root_tag
        assert 'viewBox="0 0 10 10"' in root_tag

    def test_remove_dimensions_without_viewbox(self):
        source = '<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10"><rect/></svg>'

        root_tag = minify(source, remove_dimensions=True).split(">", 1)[0]

        assert 'width="10"' in root_tag


class TestPrettyPrint:
    """Tests for pretty_print."""

    def test_blank_text_discarded(self):
        formatted = pretty_print("<svg>\n\n   <g>   <rect/></g>\n</svg>")

        assert formatted == "<svg>\n  <g>\n    <rect/>\n  </g>\n</svg>"

    def test_text_stays_inline(self):
        formatted = pretty_print("<svg><text>Hi</text></svg>")

        assert "  <text>Hi</text>" in formatted.splitlines()

    def test_custom_indent(self):
        formatted = pretty_print("<svg><g/></svg>", indent="\t")

        assert formatted.splitlines()[1] == "\t<g/>"


class TestStorage:
    """Tests for save path resolution and writing."""

    def test_extension_appended(self, tmp_path):
        assert resolve_svg_path("icon", tmp_path) == (tmp_path / "icon.svg").resolve()

    def test_extension_case_insensitive(self, tmp_path):
        assert resolve_svg_path("ICON.Svg", tmp_path).name == "ICON.Svg"

    def test_absolute_filename_wins(self, tmp_path):
        target = tmp_path / "abs" / "x"

        assert resolve_svg_path(str(target), Path("/elsewhere")) == target.resolve().with_suffix(".svg")

    def test_write_creates_parents(self, tmp_path):
        path = tmp_path / "a" / "b" / "c.svg"

        write_text_file(path, "<svg>é</svg>")

        assert path.read_bytes() == "<svg>é</svg>".encode("utf-8")
