"""
Tests for SVG source parsing (svg_maker/core/svg_parser.py).

Covers the labeled tree (element / attribute / text classification) and
root metadata extraction.
"""

import pytest

from svg_maker.core.svg_parser import (
    NodeKind,
    SvgSyntaxError,
    extract_svg_metadata,
    local_name,
    parse_svg_tree,
)


class TestParseSvgTree:
    """Tests for parse_svg_tree."""

    def test_root_and_children(self):
        """Test that elements, attributes and text are labeled separately."""
        document = parse_svg_tree(
            '<svg viewBox="0 0 10 10"><title>Logo</title><rect width="10"/></svg>'
        )

        root = document.root
        assert root.kind is NodeKind.ELEMENT
        assert root.name == "svg"
        assert root.attributes() == {"viewBox": "0 0 10 10"}
        assert [child.name for child in root.elements()] == ["title", "rect"]
        assert root.find("title").text() == "Logo"

        kinds = [child.kind for child in root.children]
        assert kinds == [NodeKind.ATTRIBUTE, NodeKind.ELEMENT, NodeKind.ELEMENT]

    def test_xml_declaration_is_not_an_element(self):
        """Test that the XML declaration never becomes a root candidate."""
        document = parse_svg_tree('<?xml version="1.0" encoding="UTF-8"?>\n<svg/>')

        assert len(document.children) == 1
        assert document.root.name == "svg"

    def test_iter_elements_is_preorder(self):
        """Test that the element walk visits every depth in document order."""
        document = parse_svg_tree(
            "<svg><g><a><b/></a></g><c/></svg>"
        )

        names = [node.name for node in document.root.iter_elements()]
        assert names == ["svg", "g", "a", "b", "c"]

    def test_attributes_are_not_walked_as_elements(self):
        """Test that attribute and text nodes are skipped by iter_elements."""
        document = parse_svg_tree('<svg fill="red">text<g id="x"/></svg>')

        names = [node.name for node in document.root.iter_elements()]
        assert names == ["svg", "g"]

    def test_prefixed_names_kept_verbatim(self):
        """Test that undeclared namespace prefixes parse without error."""
        document = parse_svg_tree("<ns:svg><ns:rect/></ns:svg>")

        assert document.root.name == "ns:svg"
        assert document.root.local_name == "svg"

    def test_malformed_xml_raises(self):
        """Test that an unclosed tag raises SvgSyntaxError."""
        with pytest.raises(SvgSyntaxError) as exc_info:
            parse_svg_tree("<svg><rect></svg>")

        assert "mismatched tag" in str(exc_info.value)

    def test_lone_surrogate_raises(self):
        """Test that unencodable text is reported as a syntax error."""
        with pytest.raises(SvgSyntaxError, match="surrogates not allowed"):
            parse_svg_tree("<svg>\ud800</svg>")

    @pytest.mark.parametrize("source", ["", "   \n\t "])
    def test_empty_input_raises(self, source):
        """Test that empty and whitespace-only input is not well-formed."""
        with pytest.raises(SvgSyntaxError):
            parse_svg_tree(source)


class TestLocalName:
    """Tests for namespace prefix stripping."""

    def test_strip_prefix(self):
        assert local_name("ns:svg") == "svg"
        assert local_name("svg") == "svg"
        assert local_name("a:b:c") == "c"


class TestExtractSvgMetadata:
    """Tests for extract_svg_metadata."""

    def test_all_fields(self):
        """Test extraction of width, height, viewBox and title."""
        metadata = extract_svg_metadata(
            '<svg xmlns="http://www.w3.org/2000/svg" width="200px" height="100" '
            'viewBox="0 0 200 100"><title> Chart </title><rect/></svg>'
        )

        assert metadata.width == "200px"
        assert metadata.height == "100"
        assert metadata.viewBox == "0 0 200 100"
        assert metadata.title == "Chart"

    def test_absent_fields_dropped(self):
        """Test that absent attributes are omitted from the dictionary."""
        metadata = extract_svg_metadata('<svg width="10"/>')

        assert metadata.height is None
        assert metadata.to_dict() == {"width": "10"}

    def test_non_svg_root_fallback(self):
        """Test that the first element is used when no svg root exists."""
        metadata = extract_svg_metadata('<?xml version="1.0"?><g width="5"/>')

        assert metadata.width == "5"

    def test_malformed_raises(self):
        """Test that malformed input raises SvgSyntaxError."""
        with pytest.raises(SvgSyntaxError):
            extract_svg_metadata("<svg>")
