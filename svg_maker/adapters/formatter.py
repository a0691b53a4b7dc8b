"""Pretty printing of SVG source via lxml."""

import re

from lxml import etree

DEFAULT_INDENT = "  "

XML_DECLARATION_RE = re.compile(r"^\s*(<\?xml\b[^?]*\?>)")


def pretty_print(svg_code: str, indent: str = DEFAULT_INDENT) -> str:
    """
    Re-indent SVG source, one element per line.

    Whitespace-only text between elements is discarded; text content is kept
    on the same line as its element. An XML declaration in the source is
    preserved as written. The source is always read as the text it already
    is, whatever encoding the declaration names.

    Args:
        svg_code: SVG source text
        indent: Indentation unit

    Returns:
        Formatted SVG text
    """
    parser = etree.XMLParser(
        remove_blank_text=True, resolve_entities=False, no_network=True, encoding="utf-8"
    )
    root = etree.fromstring(svg_code.encode("utf-8"), parser)
    tree = root.getroottree()

    etree.indent(tree, space=indent)
    formatted = etree.tostring(tree, encoding="unicode")

    declaration = XML_DECLARATION_RE.match(svg_code)
    if declaration:
        formatted = f"{declaration.group(1)}\n{formatted}"

    return formatted
