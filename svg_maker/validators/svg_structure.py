"""Structural validation of SVG source text.

Checks, in order:
- XML well-formedness (fail-fast: nothing else runs on malformed input)
- the root element is ``svg`` once any namespace prefix is stripped
- every element uses a standard SVG tag (non-standard tags are warnings only)
"""

import logging
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..core.svg_parser import SvgSyntaxError, parse_svg_tree
from .svg_tags import is_standard_tag

logger = logging.getLogger(__name__)


class ValidationVerdict(BaseModel):
    """Result of structural validation. Warnings never affect ``valid``."""
    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class InvalidSvgStructure(ValueError):
    """SVG source failed structural validation where a valid document is required."""

    def __init__(self, verdict: ValidationVerdict):
        self.verdict = verdict
        super().__init__(f"Invalid SVG: {'; '.join(verdict.errors)}")


def validate_svg_content(svg_code: str) -> ValidationVerdict:
    """
    Validate SVG source structure.

    Args:
        svg_code: SVG source text

    Returns:
        ValidationVerdict with errors and warnings in document order
    """
    try:
        document = parse_svg_tree(svg_code)
    except SvgSyntaxError as e:
        return ValidationVerdict(
            valid=False,
            errors=[f"XML Syntax Error: {e}"],
            warnings=[],
        )

    errors: List[str] = []
    warnings: List[str] = []

    root = document.root
    if root is None or root.local_name != "svg":
        found = root.name if root is not None else "none"
        errors.append(f"Root element must be 'svg', found '{found}'")

    for top_level in document.children:
        for element in top_level.iter_elements():
            tag = element.local_name
            if tag != "svg" and not is_standard_tag(tag):
                warnings.append(f"Non-standard SVG tag found: '{tag}'")

    logger.debug(
        f"Validated SVG: {len(errors)} error(s), {len(warnings)} warning(s)"
    )
    return ValidationVerdict(valid=not errors, errors=errors, warnings=warnings)


def require_valid_svg(svg_code: str) -> ValidationVerdict:
    """
    Run structural validation as a precondition.

    Raises:
        InvalidSvgStructure: If the verdict is invalid
    """
    verdict = validate_svg_content(svg_code)
    if not verdict.valid:
        raise InvalidSvgStructure(verdict)
    return verdict
