"""SVG minification via Scour.

Scour runs repeatedly until its output stops changing, so a minified
document is a fixed point: minifying it again returns it unchanged.
"""

import logging
from types import SimpleNamespace

from lxml import etree
from scour import scour

logger = logging.getLogger(__name__)

MAX_PASSES = 10

# Options not listed keep Scour's defaults
SCOUR_OPTIONS = {
    "strip_comments": True,
    "remove_metadata": True,
    "strip_xml_prolog": True,
    "enable_viewboxing": False,
    "shorten_ids": False,
    "indent_type": "none",
    "newlines": False,
    "quiet": True,
}


def minify(svg_code: str, remove_dimensions: bool = False) -> str:
    """
    Minify SVG source.

    Args:
        svg_code: SVG source text
        remove_dimensions: Drop width/height from the root when it has a viewBox

    Returns:
        Minified SVG text
    """
    options = SimpleNamespace(**SCOUR_OPTIONS)

    current = svg_code
    for passes in range(1, MAX_PASSES + 1):
        result = scour.scourString(current, options)
        if result == current:
            break
        current = result
    logger.debug(f"Minified SVG in {passes} pass(es): {len(svg_code)} -> {len(current)} chars")

    if remove_dimensions:
        current = _remove_dimensions(current)

    return current


def _remove_dimensions(svg_code: str) -> str:
    """Remove root width/height when a viewBox makes them redundant."""
    parser = etree.XMLParser(resolve_entities=False, no_network=True, encoding="utf-8")
    root = etree.fromstring(svg_code.encode("utf-8"), parser)

    if root.get("viewBox") is None:
        return svg_code

    for attr in ("width", "height"):
        root.attrib.pop(attr, None)

    return etree.tostring(root, encoding="unicode")
