"""
Adapters over the SVG processing libraries.

Each adapter is a narrow function: SVG text (plus options) in, new value out.
"""

from .rasterizer import rasterize
from .minifier import minify
from .formatter import pretty_print
from .react_codegen import generate_component
from .pdf_writer import draw_pdf
from .storage import resolve_svg_path, write_text_file

__all__ = [
    'rasterize',
    'minify',
    'pretty_print',
    'generate_component',
    'draw_pdf',
    'resolve_svg_path',
    'write_text_file',
]
