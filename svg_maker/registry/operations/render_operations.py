"""
Render operation registrations.

render_svg is the only operation with a structural precondition: invalid SVG
raises InvalidSvgStructure before any rasterization is attempted.
"""

import asyncio
import logging
from typing import Any, Dict

from ...adapters.rasterizer import rasterize
from ...utils.response import ToolEnvelope, error_response, image_response
from ...validators.svg_structure import require_valid_svg
from ..operation_registry import OperationCategory, OperationDescriptor, OperationMetadata
from ..parameters import number_param
from .common import SVG_CODE

logger = logging.getLogger(__name__)


# ============================================================================
# Operation Handlers
# ============================================================================

async def render_svg_handler(params: Dict[str, Any]) -> ToolEnvelope:
    """Rasterize SVG to PNG for visual verification."""
    svg_code = params["svg_code"]

    require_valid_svg(svg_code)

    try:
        png = await asyncio.to_thread(
            rasterize, svg_code, params.get("width"), params.get("height")
        )
    except Exception as e:
        logger.error(f"Error rendering SVG: {e}")
        return error_response("rendering SVG", e)

    return image_response(png, mime_type="image/png")


# ============================================================================
# Operation Descriptors
# ============================================================================

RENDER_SVG = OperationDescriptor(
    name="render_svg",
    title="Render SVG",
    description="Renders SVG code to a PNG image for visual verification.",
    category=OperationCategory.RENDER,
    parameters=(
        SVG_CODE,
        number_param("width", "Output width in pixels", required=False),
        number_param("height", "Output height in pixels", required=False),
    ),
    handler=render_svg_handler,
    metadata=OperationMetadata(tags=("render", "png", "image")),
)

RENDER_OPERATIONS = [RENDER_SVG]
