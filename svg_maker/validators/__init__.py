"""SVG validators."""

from .svg_structure import (
    ValidationVerdict,
    InvalidSvgStructure,
    validate_svg_content,
    require_valid_svg,
)
from .svg_tags import SVG_TAGS, is_standard_tag

__all__ = [
    'ValidationVerdict',
    'InvalidSvgStructure',
    'validate_svg_content',
    'require_valid_svg',
    'SVG_TAGS',
    'is_standard_tag',
]
