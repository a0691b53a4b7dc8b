"""
SVG Source Parsing Module

Builds a labeled tree from SVG source text in which every node is tagged as
an element, an attribute or a text run. The structural validator walks this
tree, and metadata extraction reads the root element from it.

Parsing runs expat without namespace processing, so prefixed names such as
``ns:svg`` are kept verbatim and only stripped where callers ask for it.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional
from xml.parsers import expat

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class SvgSyntaxError(ValueError):
    """Source text is not well-formed XML."""
    pass


class NodeKind(Enum):
    """Classification of labeled tree nodes."""
    ELEMENT = "element"
    ATTRIBUTE = "attribute"
    TEXT = "text"


@dataclass
class SvgNode:
    """One node of the labeled tree."""
    kind: NodeKind
    name: str = ""
    value: Optional[str] = None
    children: List["SvgNode"] = field(default_factory=list)

    @property
    def local_name(self) -> str:
        return local_name(self.name)

    def elements(self) -> List["SvgNode"]:
        """Direct child elements, in document order."""
        return [c for c in self.children if c.kind is NodeKind.ELEMENT]

    def attributes(self) -> Dict[str, str]:
        """Attributes of this element as a name -> value mapping."""
        return {
            c.name: c.value for c in self.children
            if c.kind is NodeKind.ATTRIBUTE
        }

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes().get(name, default)

    def text(self) -> str:
        """Direct text content, whitespace-trimmed."""
        return "".join(
            c.value for c in self.children if c.kind is NodeKind.TEXT
        ).strip()

    def find(self, name: str) -> Optional["SvgNode"]:
        """First direct child element with the given name."""
        for child in self.elements():
            if child.name == name:
                return child
        return None

    def iter_elements(self) -> Iterator["SvgNode"]:
        """Pre-order walk over this element and every descendant element."""
        if self.kind is not NodeKind.ELEMENT:
            return
        yield self
        for child in self.elements():
            yield from child.iter_elements()


@dataclass
class SvgDocument:
    """Parsed document: the top-level elements (declarations excluded)."""
    children: List[SvgNode] = field(default_factory=list)

    @property
    def root(self) -> Optional[SvgNode]:
        """First top-level element, or None."""
        return self.children[0] if self.children else None


class SvgMetadata(BaseModel):
    """Dimension and title information read from the SVG root element."""
    width: Optional[str] = None
    height: Optional[str] = None
    viewBox: Optional[str] = None
    title: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for JSON serialization (absent fields dropped)."""
        return self.model_dump(exclude_none=True)


def local_name(tag: str) -> str:
    """Strip a namespace prefix (everything up to the last ':')."""
    return tag.rsplit(":", 1)[-1]


class _TreeBuilder:
    """Collects expat callbacks into a labeled tree."""

    def __init__(self):
        self.document = SvgDocument()
        self._stack: List[SvgNode] = []

    def start(self, name: str, attrs: List[str]) -> None:
        node = SvgNode(kind=NodeKind.ELEMENT, name=name)
        # ordered_attributes yields a flat [name, value, name, value, ...] list
        for attr_name, attr_value in zip(attrs[::2], attrs[1::2]):
            node.children.append(
                SvgNode(kind=NodeKind.ATTRIBUTE, name=attr_name, value=attr_value)
            )
        if self._stack:
            self._stack[-1].children.append(node)
        else:
            self.document.children.append(node)
        self._stack.append(node)

    def end(self, name: str) -> None:
        self._stack.pop()

    def data(self, text: str) -> None:
        if self._stack:
            self._stack[-1].children.append(SvgNode(kind=NodeKind.TEXT, value=text))


def parse_svg_tree(source: str) -> SvgDocument:
    """
    Parse SVG source into a labeled tree.

    Args:
        source: SVG/XML source text

    Returns:
        SvgDocument with the top-level elements

    Raises:
        SvgSyntaxError: If the source is not well-formed XML
    """
    builder = _TreeBuilder()
    parser = expat.ParserCreate(encoding="utf-8")
    parser.ordered_attributes = True
    parser.buffer_text = True
    parser.StartElementHandler = builder.start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data

    try:
        data = source.encode("utf-8")
        parser.Parse(data, True)
    except UnicodeEncodeError as e:
        # lone surrogates cannot be encoded
        raise SvgSyntaxError(f"not valid text: {e.reason} at position {e.start}") from e
    except expat.ExpatError as e:
        raise SvgSyntaxError(str(e)) from e

    return builder.document


def extract_svg_metadata(source: str) -> SvgMetadata:
    """
    Extract width, height, viewBox and title from the SVG root element.

    The root is the top-level ``svg`` element; when there is none, the first
    top-level element is used instead.

    Args:
        source: SVG source text

    Returns:
        SvgMetadata (fields are None when absent from the source)

    Raises:
        SvgSyntaxError: If the source is not well-formed XML
        ValueError: If no root element can be found
    """
    document = parse_svg_tree(source)

    root = next((node for node in document.children if node.name == "svg"), None)
    if root is None:
        root = document.root
    if root is None:
        raise ValueError("Could not find SVG root element")

    title_node = root.find("title")
    title = title_node.text() if title_node is not None else None

    return SvgMetadata(
        width=root.get("width"),
        height=root.get("height"),
        viewBox=root.get("viewBox"),
        title=title,
    )
