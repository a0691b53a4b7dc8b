"""
Core Layer - SVG source parsing shared by validation and inspection.

Modules:
- svg_parser: labeled tree builder and root metadata extraction
"""

from .svg_parser import (
    NodeKind,
    SvgNode,
    SvgDocument,
    SvgMetadata,
    SvgSyntaxError,
    parse_svg_tree,
    extract_svg_metadata,
    local_name,
)

__all__ = [
    'NodeKind',
    'SvgNode',
    'SvgDocument',
    'SvgMetadata',
    'SvgSyntaxError',
    'parse_svg_tree',
    'extract_svg_metadata',
    'local_name',
]
