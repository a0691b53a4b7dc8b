"""Read-only operation registrations: validate_svg and get_svg_metadata."""

import json
import logging
from typing import Any, Dict

from ...core.svg_parser import extract_svg_metadata
from ...utils.response import ToolEnvelope, error_response, text_response
from ...validators.svg_structure import validate_svg_content
from ..operation_registry import OperationCategory, OperationDescriptor, OperationMetadata
from .common import SVG_CODE

logger = logging.getLogger(__name__)


# ============================================================================
# Operation Handlers
# ============================================================================

async def validate_svg_handler(params: Dict[str, Any]) -> ToolEnvelope:
    """Structural validation; an invalid verdict is still a successful call."""
    verdict = validate_svg_content(params["svg_code"])
    return text_response(json.dumps(verdict.model_dump(), indent=2))


async def get_svg_metadata_handler(params: Dict[str, Any]) -> ToolEnvelope:
    try:
        metadata = extract_svg_metadata(params["svg_code"])
    except Exception as e:
        logger.error(f"Error extracting metadata: {e}")
        return error_response("extracting metadata", e)

    return text_response(json.dumps(metadata.to_dict(), indent=2))


# ============================================================================
# Operation Descriptors
# ============================================================================

VALIDATE_SVG = OperationDescriptor(
    name="validate_svg",
    title="Validate SVG",
    description="Validates SVG code.",
    category=OperationCategory.INSPECT,
    parameters=(SVG_CODE,),
    handler=validate_svg_handler,
    metadata=OperationMetadata(tags=("validate", "lint")),
)

GET_SVG_METADATA = OperationDescriptor(
    name="get_svg_metadata",
    title="Get SVG Metadata",
    description="Extracts metadata from SVG code.",
    category=OperationCategory.INSPECT,
    parameters=(SVG_CODE,),
    handler=get_svg_metadata_handler,
    metadata=OperationMetadata(tags=("metadata", "inspect")),
)

INSPECT_OPERATIONS = [VALIDATE_SVG, GET_SVG_METADATA]
