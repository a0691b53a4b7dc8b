"""
React component generation from SVG source.

Produces a functional component module for either React DOM or React Native
(react-native-svg). Attribute names are converted to their JSX spellings,
inline styles become style objects, and the caller's props are spread onto
the root element.
"""

import json
import logging
import re
from typing import Dict, List, Optional, Set, Tuple

from lxml import etree

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"

INDENT = "  "

COMPONENT_NAME_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# Attributes that keep their hyphenated spelling in JSX
PRESERVED_PREFIXES = ("data-", "aria-")

SPECIAL_ATTRIBUTES = {
    "class": "className",
    "for": "htmlFor",
}

# react-native-svg exports; elements not listed are dropped from native output
NATIVE_COMPONENTS: Dict[str, str] = {
    "svg": "Svg",
    "circle": "Circle",
    "clipPath": "ClipPath",
    "defs": "Defs",
    "ellipse": "Ellipse",
    "feBlend": "FeBlend",
    "feColorMatrix": "FeColorMatrix",
    "feComposite": "FeComposite",
    "feFlood": "FeFlood",
    "feGaussianBlur": "FeGaussianBlur",
    "feMerge": "FeMerge",
    "feMergeNode": "FeMergeNode",
    "feOffset": "FeOffset",
    "filter": "Filter",
    "foreignObject": "ForeignObject",
    "g": "G",
    "image": "Image",
    "line": "Line",
    "linearGradient": "LinearGradient",
    "marker": "Marker",
    "mask": "Mask",
    "path": "Path",
    "pattern": "Pattern",
    "polygon": "Polygon",
    "polyline": "Polyline",
    "radialGradient": "RadialGradient",
    "rect": "Rect",
    "stop": "Stop",
    "symbol": "Symbol",
    "text": "Text",
    "textPath": "TextPath",
    "tspan": "TSpan",
    "use": "Use",
}


def generate_component(
    svg_code: str,
    component_name: str = "SvgComponent",
    native: bool = False
) -> str:
    """
    Generate a React (or React Native) component module from SVG source.

    Args:
        svg_code: SVG source text
        component_name: Name of the generated component
        native: Target react-native-svg instead of React DOM

    Returns:
        JavaScript module source

    Raises:
        ValueError: If the component name is not a valid identifier
        lxml.etree.XMLSyntaxError: If the SVG is not well-formed
    """
    if not COMPONENT_NAME_RE.match(component_name):
        raise ValueError(f"Invalid component name: '{component_name}'")

    parser = etree.XMLParser(
        remove_comments=True, remove_pis=True, resolve_entities=False, no_network=True,
        encoding="utf-8",
    )
    root = etree.fromstring(svg_code.encode("utf-8"), parser)

    used: Set[str] = set()
    body = _render_element(root, depth=1, native=native, is_root=True, used=used)
    if body is None:
        raise ValueError(f"Root element '{etree.QName(root).localname}' is not supported")

    lines = ['import * as React from "react";']
    if native:
        lines.append(_native_import(used))
    lines.append(f"const {component_name} = (props) => (")
    lines.extend(body)
    lines.append(");")
    lines.append(f"export default {component_name};")

    logger.debug(f"Generated {'React Native' if native else 'React'} component {component_name}")
    return "\n".join(lines) + "\n"


def _native_import(used: Set[str]) -> str:
    named = sorted(name for name in used if name != "Svg")
    if not named:
        return 'import Svg from "react-native-svg";'
    return f'import Svg, {{ {", ".join(named)} }} from "react-native-svg";'


def _render_element(
    element: etree._Element,
    depth: int,
    native: bool,
    is_root: bool,
    used: Set[str]
) -> Optional[List[str]]:
    """Render one element and its subtree as indented JSX lines."""
    qname = etree.QName(element)
    if qname.namespace not in (None, SVG_NS):
        logger.debug(f"Dropping foreign element {element.tag}")
        return None

    tag = qname.localname
    if native:
        if tag not in NATIVE_COMPONENTS:
            logger.debug(f"Dropping <{tag}>: not supported by react-native-svg")
            return None
        tag = NATIVE_COMPONENTS[tag]
        used.add(tag)

    attributes = _convert_attributes(element, native)
    if is_root:
        attributes = _root_attributes(element, attributes, native)

    parts = [tag] + [_format_attribute(name, value) for name, value in attributes]
    if is_root:
        parts.append("{...props}")
    opening = " ".join(parts)

    pad = INDENT * depth
    children: List[str] = []
    text = _jsx_text(element.text)
    if text:
        children.append(INDENT * (depth + 1) + text)
    for child in element:
        if isinstance(child.tag, str):
            rendered = _render_element(child, depth + 1, native, False, used)
            if rendered:
                children.extend(rendered)
        tail = _jsx_text(child.tail)
        if tail:
            children.append(INDENT * (depth + 1) + tail)

    if not children:
        return [f"{pad}<{opening} />"]
    return [f"{pad}<{opening}>"] + children + [f"{pad}</{tag}>"]


def _root_attributes(
    element: etree._Element,
    attributes: List[Tuple[str, str]],
    native: bool
) -> List[Tuple[str, str]]:
    """Add xmlns (web) and icon dimensions to the root attribute list."""
    if native:
        return attributes

    attrs = [(n, v) for n, v in attributes if n not in ("width", "height")]
    if etree.QName(element).namespace == SVG_NS:
        attrs.insert(0, ("xmlns", SVG_NS))
    attrs.extend([("width", "1em"), ("height", "1em")])
    return attrs


def _convert_attributes(element: etree._Element, native: bool) -> List[Tuple[str, str]]:
    converted: List[Tuple[str, str]] = []
    for raw_name, value in element.attrib.items():
        name = _jsx_attribute_name(raw_name, native)
        if name is not None:
            converted.append((name, value))
    return converted


def _jsx_attribute_name(raw_name: str, native: bool) -> Optional[str]:
    qname = etree.QName(raw_name)
    if qname.namespace == XLINK_NS:
        return "xlink" + _upper_first(qname.localname)
    if qname.namespace == XML_NS:
        return "xml" + _upper_first(qname.localname)
    if qname.namespace is not None:
        # editor data (inkscape:, sodipodi:, ...)
        return None

    name = qname.localname
    if name in SPECIAL_ATTRIBUTES:
        # react-native-svg has no className
        return None if native else SPECIAL_ATTRIBUTES[name]
    if name.startswith(PRESERVED_PREFIXES):
        return name
    return _camel_case(name)


def _format_attribute(name: str, value: str) -> str:
    if name == "style":
        return f"style={{{_style_object(value)}}}"
    if '"' in value or "\n" in value:
        return f"{name}={{{json.dumps(value)}}}"
    return f'{name}="{value}"'


def _style_object(style: str) -> str:
    """Convert an inline CSS declaration list to a JS object literal."""
    entries = []
    for declaration in style.split(";"):
        if ":" not in declaration:
            continue
        prop, value = declaration.split(":", 1)
        prop, value = prop.strip(), value.strip()
        if not prop:
            continue
        key = prop if prop.startswith("--") else _camel_case(prop)
        if not re.match(r"^[A-Za-z_$][A-Za-z0-9_$]*$", key):
            key = json.dumps(key)
        entries.append(f"{key}: {json.dumps(value)}")
    return "{ " + ", ".join(entries) + " }" if entries else "{}"


def _jsx_text(text: Optional[str]) -> str:
    """Text content as a JSX expression, or "" for whitespace."""
    if text is None or not text.strip():
        return ""
    return "{" + json.dumps(" ".join(text.split())) + "}"


def _camel_case(name: str) -> str:
    head, *rest = name.split("-")
    return head + "".join(_upper_first(part) for part in rest)


def _upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]
