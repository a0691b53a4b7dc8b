"""PNG rasterization via CairoSVG."""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


def rasterize(
    svg_code: str,
    width: Optional[float] = None,
    height: Optional[float] = None
) -> bytes:
    """
    Render SVG source to PNG bytes.

    When only one of width/height is given, the other follows the
    document's aspect ratio.

    Args:
        svg_code: SVG source text
        width: Optional output width in pixels
        height: Optional output height in pixels

    Returns:
        PNG image bytes
    """
    # loads native cairo on import
    import cairosvg

    kwargs = {}
    if width:
        kwargs["output_width"] = int(round(width))
    if height:
        kwargs["output_height"] = int(round(height))

    logger.debug(f"Rasterizing SVG ({len(svg_code)} chars) with {kwargs or 'intrinsic size'}")
    return cairosvg.svg2png(bytestring=svg_code.encode("utf-8"), **kwargs)
