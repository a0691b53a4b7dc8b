"""Tests for structural SVG validation."""

import pytest
from pydantic import ValidationError

from svg_maker.validators import (
    SVG_TAGS,
    InvalidSvgStructure,
    ValidationVerdict,
    require_valid_svg,
    validate_svg_content,
)

VALID_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">'
    '<defs><linearGradient id="g"><stop offset="0"/></linearGradient></defs>'
    '<g><rect width="10" height="10"/><circle cx="5" cy="5" r="2"/></g>'
    '<text x="1" y="9">label</text>'
    '</svg>'
)


class TestWellFormedness:
    """Step 1: fail-fast XML syntax check."""

    def test_unclosed_tag(self):
        verdict = validate_svg_content("<svg><rect></svg>")

        assert verdict.valid is False
        assert len(verdict.errors) == 1
        assert verdict.errors[0].startswith("XML Syntax Error: ")
        assert verdict.warnings == []

    @pytest.mark.parametrize("source", ["", "    ", "\n\n"])
    def test_empty_input(self, source):
        verdict = validate_svg_content(source)

        assert verdict.valid is False
        assert verdict.errors[0].startswith("XML Syntax Error: ")
        assert verdict.warnings == []

    def test_unencodable_text(self):
        """Test that a lone surrogate yields a verdict instead of raising."""
        verdict = validate_svg_content("<svg>\ud800</svg>")

        assert verdict.valid is False
        assert verdict.errors[0].startswith("XML Syntax Error: ")
        assert verdict.warnings == []

    def test_no_further_checks_on_malformed(self):
        """Test that non-standard tags in malformed input are not reported."""
        verdict = validate_svg_content("<g><customShape></g>")

        assert len(verdict.errors) == 1
        assert verdict.warnings == []


class TestRootElement:
    """Steps 3-4: root tag check."""

    def test_standard_document_is_valid(self):
        verdict = validate_svg_content(VALID_SVG)

        assert verdict.valid is True
        assert verdict.errors == []
        assert verdict.warnings == []

    def test_declaration_before_root(self):
        verdict = validate_svg_content('<?xml version="1.0" encoding="UTF-8"?>\n<svg/>')

        assert verdict.valid is True

    def test_wrong_root(self):
        verdict = validate_svg_content("<g><rect/></g>")

        assert verdict.valid is False
        assert verdict.errors == ["Root element must be 'svg', found 'g'"]

    def test_root_check_is_case_sensitive(self):
        verdict = validate_svg_content("<Svg/>")

        assert verdict.valid is False
        assert "found 'Svg'" in verdict.errors[0]

    def test_prefixed_root_accepted(self):
        verdict = validate_svg_content("<ns:svg><ns:rect/></ns:svg>")

        assert verdict.valid is True
        assert verdict.errors == []

    def test_wrong_root_does_not_short_circuit(self):
        """Test that tag warnings are still collected after a root error."""
        verdict = validate_svg_content("<notsvg><customShape/></notsvg>")

        assert verdict.valid is False
        assert "Non-standard SVG tag found: 'notsvg'" in verdict.warnings
        assert "Non-standard SVG tag found: 'customShape'" in verdict.warnings


class TestNonStandardTags:
    """Step 5: vocabulary warnings."""

    def test_custom_tag_is_warning_only(self):
        verdict = validate_svg_content(
            '<svg xmlns="http://www.w3.org/2000/svg"><customShape/></svg>'
        )

        assert verdict.valid is True
        assert verdict.errors == []
        assert any("customShape" in w for w in verdict.warnings)

    def test_warnings_follow_document_order(self):
        verdict = validate_svg_content(
            "<svg><g><foo><bar/></foo></g><rect/><baz/></svg>"
        )

        assert verdict.warnings == [
            "Non-standard SVG tag found: 'foo'",
            "Non-standard SVG tag found: 'bar'",
            "Non-standard SVG tag found: 'baz'",
        ]

    def test_all_children_non_standard_still_valid(self):
        verdict = validate_svg_content("<svg><a1/><b2><c3/></b2></svg>")

        assert verdict.valid is True
        assert len(verdict.warnings) == 3

    def test_attributes_and_text_are_not_tags(self):
        verdict = validate_svg_content(
            '<svg><rect customAttr="1" data-x="2"/><text>unknownWord</text></svg>'
        )

        assert verdict.warnings == []

    def test_prefixed_tags_are_stripped(self):
        verdict = validate_svg_content(
            '<svg xmlns:svg="http://www.w3.org/2000/svg"><svg:rect/></svg>'
        )

        assert verdict.warnings == []

    def test_vocabulary_is_immutable(self):
        assert isinstance(SVG_TAGS, frozenset)
        assert "path" in SVG_TAGS
        assert "feGaussianBlur" in SVG_TAGS


class TestVerdict:
    """Tests for the verdict model and the precondition helper."""

    def test_verdict_is_frozen(self):
        verdict = validate_svg_content(VALID_SVG)

        with pytest.raises(ValidationError):
            verdict.valid = False

    def test_json_shape(self):
        verdict = ValidationVerdict(valid=False, errors=["e"], warnings=["w"])

        assert verdict.model_dump() == {"valid": False, "errors": ["e"], "warnings": ["w"]}

    def test_require_valid_svg_raises(self):
        with pytest.raises(InvalidSvgStructure) as exc_info:
            require_valid_svg("<notsvg/>")

        assert str(exc_info.value) == "Invalid SVG: Root element must be 'svg', found 'notsvg'"
        assert exc_info.value.verdict.valid is False

    def test_require_valid_svg_returns_verdict(self):
        assert require_valid_svg(VALID_SVG).valid is True
