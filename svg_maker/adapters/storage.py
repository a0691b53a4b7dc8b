"""Filesystem helpers for persisted SVG output."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SVG_EXTENSION = ".svg"


def resolve_svg_path(filename: str, base_dir: Path) -> Path:
    """
    Resolve a save_svg filename to an absolute path.

    ``.svg`` is appended unless the name already ends with it
    (case-insensitive). Relative names resolve against ``base_dir``.
    """
    if not filename.lower().endswith(SVG_EXTENSION):
        filename += SVG_EXTENSION

    return (base_dir / filename).resolve()


def write_text_file(path: Path, content: str) -> Path:
    """
    Write UTF-8 text, creating intermediate directories as needed.

    Returns:
        The written path
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content.encode("utf-8"))
    logger.info(f"Wrote {len(content)} chars to {path}")
    return path
