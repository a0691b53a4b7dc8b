"""Standard SVG element names (SVG 1.1 and SVG 2)."""

from typing import FrozenSet

SVG_TAGS: FrozenSet[str] = frozenset({
    # Structural and container elements
    "svg", "g", "defs", "desc", "metadata", "symbol", "title", "use",
    "switch", "a", "view",

    # Shapes
    "circle", "ellipse", "line", "path", "polygon", "polyline", "rect",

    # Text
    "text", "textPath", "tspan", "tref", "altGlyph", "altGlyphDef",
    "altGlyphItem", "glyphRef",

    # Paint servers
    "linearGradient", "radialGradient", "stop", "pattern", "hatch",
    "hatchpath", "meshgradient", "meshpatch", "meshrow", "solidcolor",

    # Clipping, masking and markers
    "clipPath", "mask", "marker",

    # Embedded content and styling
    "image", "foreignObject", "script", "style",

    # Animation
    "animate", "animateColor", "animateMotion", "animateTransform", "mpath",
    "set", "discard",

    # Filters
    "filter", "feBlend", "feColorMatrix", "feComponentTransfer",
    "feComposite", "feConvolveMatrix", "feDiffuseLighting",
    "feDisplacementMap", "feDistantLight", "feDropShadow", "feFlood",
    "feFuncA", "feFuncB", "feFuncG", "feFuncR", "feGaussianBlur", "feImage",
    "feMerge", "feMergeNode", "feMorphology", "feOffset", "fePointLight",
    "feSpecularLighting", "feSpotLight", "feTile", "feTurbulence",

    # Fonts (SVG 1.1)
    "font", "font-face", "font-face-format", "font-face-name",
    "font-face-src", "font-face-uri", "glyph", "hkern", "missing-glyph",
    "vkern",

    # Miscellaneous
    "color-profile", "cursor",
})


def is_standard_tag(name: str) -> bool:
    """Check a (namespace-stripped) tag name against the vocabulary."""
    return name in SVG_TAGS
