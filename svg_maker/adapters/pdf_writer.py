"""PDF export via svglib and ReportLab."""

import io
import logging
from pathlib import Path

from reportlab.graphics import renderPDF
from svglib.svglib import svg2rlg

logger = logging.getLogger(__name__)


def draw_pdf(svg_code: str, output_path: Path) -> Path:
    """
    Draw SVG source into a new single-page PDF document.

    Args:
        svg_code: SVG source text
        output_path: Destination file (parent directory must exist)

    Returns:
        Absolute path of the written PDF

    Raises:
        ValueError: If the SVG cannot be converted to a drawing
    """
    drawing = svg2rlg(io.BytesIO(svg_code.encode("utf-8")))
    if drawing is None:
        raise ValueError("SVG could not be converted to a drawing")

    renderPDF.drawToFile(drawing, str(output_path))
    logger.info(f"Wrote PDF: {output_path}")

    return output_path.resolve()
