"""Conversion operation registrations: React, React Native and data URI."""

import base64
import logging
from typing import Any, Dict

from ...adapters.react_codegen import generate_component
from ...utils.response import ToolEnvelope, error_response, text_response
from ..operation_registry import OperationCategory, OperationDescriptor, OperationMetadata
from .common import COMPONENT_NAME, SVG_CODE

logger = logging.getLogger(__name__)

DATA_URI_PREFIX = "data:image/svg+xml;base64,"


# ============================================================================
# Operation Handlers
# ============================================================================

async def svg_to_react_handler(params: Dict[str, Any]) -> ToolEnvelope:
    try:
        code = generate_component(
            params["svg_code"], params["component_name"], native=False
        )
    except Exception as e:
        logger.error(f"Error converting to React: {e}")
        return error_response("converting to React", e)

    return text_response(code)


async def svg_to_react_native_handler(params: Dict[str, Any]) -> ToolEnvelope:
    try:
        code = generate_component(
            params["svg_code"], params["component_name"], native=True
        )
    except Exception as e:
        logger.error(f"Error converting to React Native: {e}")
        return error_response("converting to React Native", e)

    return text_response(code)


async def svg_to_data_uri_handler(params: Dict[str, Any]) -> ToolEnvelope:
    try:
        encoded = base64.b64encode(params["svg_code"].encode("utf-8")).decode("ascii")
    except Exception as e:
        logger.error(f"Error converting to Data URI: {e}")
        return error_response("converting to Data URI", e)

    return text_response(f"{DATA_URI_PREFIX}{encoded}")


# ============================================================================
# Operation Descriptors
# ============================================================================

SVG_TO_REACT = OperationDescriptor(
    name="svg_to_react",
    title="SVG to React",
    description="Converts SVG code to a React Functional Component.",
    category=OperationCategory.CONVERT,
    parameters=(SVG_CODE, COMPONENT_NAME),
    handler=svg_to_react_handler,
    metadata=OperationMetadata(tags=("convert", "react", "jsx")),
)

SVG_TO_REACT_NATIVE = OperationDescriptor(
    name="svg_to_react_native",
    title="SVG to React Native",
    description="Converts SVG code to a React Native Component.",
    category=OperationCategory.CONVERT,
    parameters=(SVG_CODE, COMPONENT_NAME),
    handler=svg_to_react_native_handler,
    metadata=OperationMetadata(tags=("convert", "react-native", "jsx")),
)

SVG_TO_DATA_URI = OperationDescriptor(
    name="svg_to_data_uri",
    title="SVG to Data URI",
    description="Converts SVG code into a base64-encoded Data URI.",
    category=OperationCategory.CONVERT,
    parameters=(SVG_CODE,),
    handler=svg_to_data_uri_handler,
    metadata=OperationMetadata(tags=("convert", "data-uri", "base64")),
)

CONVERT_OPERATIONS = [SVG_TO_REACT, SVG_TO_REACT_NATIVE, SVG_TO_DATA_URI]
