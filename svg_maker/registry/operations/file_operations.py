"""
File-producing operation registrations: save_svg and svg_to_pdf.

Writes run in a worker thread. A write that fails part-way may leave a
partial file behind.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict
from uuid import uuid4

from ...adapters.minifier import minify
from ...adapters.pdf_writer import draw_pdf
from ...adapters.storage import resolve_svg_path, write_text_file
from ...config.settings import get_output_dir, get_working_dir
from ...utils.response import ToolEnvelope, error_response, text_response
from ..operation_registry import OperationCategory, OperationDescriptor, OperationMetadata
from ..parameters import boolean_param, string_param
from .common import SVG_CODE

logger = logging.getLogger(__name__)


# ============================================================================
# Operation Handlers
# ============================================================================

async def save_svg_handler(params: Dict[str, Any]) -> ToolEnvelope:
    """Save SVG (optionally minified) to a file and return its absolute path."""
    svg_code = params["svg_code"]

    try:
        content = svg_code
        if params.get("optimize", True):
            try:
                content = await asyncio.to_thread(minify, svg_code, True)
            except Exception as e:
                logger.warning(f"Optimization failed, saving original: {e}")

        path = resolve_svg_path(params["filename"], get_working_dir())
        await asyncio.to_thread(write_text_file, path, content)
    except Exception as e:
        logger.error(f"Error saving SVG: {e}")
        return error_response("saving SVG", e)

    return text_response(str(path))


def _write_pdf(svg_code: str, output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    return draw_pdf(svg_code, output_dir / f"{uuid4()}.pdf")


async def svg_to_pdf_handler(params: Dict[str, Any]) -> ToolEnvelope:
    """Convert SVG into a PDF under the output directory."""
    try:
        path = await asyncio.to_thread(_write_pdf, params["svg_code"], get_output_dir())
    except Exception as e:
        logger.error(f"Error converting SVG to PDF: {e}")
        return error_response("converting SVG to PDF", e)

    return text_response(str(path))


# ============================================================================
# Operation Descriptors
# ============================================================================

SAVE_SVG = OperationDescriptor(
    name="save_svg",
    title="Save SVG",
    description="Saves the SVG code to a file on the local system.",
    category=OperationCategory.PERSIST,
    parameters=(
        SVG_CODE,
        string_param("filename", "Target file name; '.svg' is appended if missing"),
        boolean_param("optimize", "Minify before saving", required=False, default=True),
    ),
    handler=save_svg_handler,
    metadata=OperationMetadata(tags=("save", "file")),
)

SVG_TO_PDF = OperationDescriptor(
    name="svg_to_pdf",
    title="SVG to PDF",
    description="Converts SVG code into a PDF document.",
    category=OperationCategory.PERSIST,
    parameters=(SVG_CODE,),
    handler=svg_to_pdf_handler,
    metadata=OperationMetadata(tags=("convert", "pdf", "file")),
)

