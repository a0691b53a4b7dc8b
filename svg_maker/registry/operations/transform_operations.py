"""SVG-to-SVG operation registrations: optimize_svg and format_svg."""

import asyncio
import logging
from typing import Any, Dict

from ...adapters.formatter import pretty_print
from ...adapters.minifier import minify
from ...utils.response import ToolEnvelope, error_response, text_response
from ..operation_registry import OperationCategory, OperationDescriptor, OperationMetadata
from .common import SVG_CODE

logger = logging.getLogger(__name__)


# ============================================================================
# Operation Handlers
# ============================================================================

async def optimize_svg_handler(params: Dict[str, Any]) -> ToolEnvelope:
    try:
        optimized = await asyncio.to_thread(minify, params["svg_code"])
    except Exception as e:
        logger.error(f"Error optimizing SVG: {e}")
        return error_response("optimizing SVG", e)

    return text_response(optimized)


async def format_svg_handler(params: Dict[str, Any]) -> ToolEnvelope:
    try:
        formatted = pretty_print(params["svg_code"], indent="  ")
    except Exception as e:
        logger.error(f"Error formatting SVG: {e}")
        return error_response("formatting SVG", e)

    return text_response(formatted)


# ============================================================================
# Operation Descriptors
# ============================================================================

OPTIMIZE_SVG = OperationDescriptor(
    name="optimize_svg",
    title="Optimize SVG",
    description="Optimizes and minifies SVG code.",
    category=OperationCategory.TRANSFORM,
    parameters=(SVG_CODE,),
    handler=optimize_svg_handler,
    metadata=OperationMetadata(tags=("optimize", "minify")),
)

FORMAT_SVG = OperationDescriptor(
    name="format_svg",
    title="Format SVG",
    description="Prettifies SVG code.",
    category=OperationCategory.TRANSFORM,
    parameters=(SVG_CODE,),
    handler=format_svg_handler,
    metadata=OperationMetadata(tags=("format", "pretty-print")),
)

TRANSFORM_OPERATIONS = [OPTIMIZE_SVG, FORMAT_SVG]
