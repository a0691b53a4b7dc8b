"""
Runtime settings for the SVG Maker MCP server.

Settings are read from environment variables once at import time so the
server can be reconfigured without code changes.

Usage:
    from svg_maker.config.settings import get_setting, get_output_dir

    if get_setting('transport') == 'sse':
        serve_sse(port=get_setting('port'))

Environment Variables:
    MCP_TRANSPORT=stdio/sse          - Transport binding (default: stdio)
    HOST=0.0.0.0                     - SSE listen address
    PORT=3000                        - SSE listen port
    SVG_MAKER_OUTPUT_DIR=<path>      - Directory for generated PDFs (default: ./output)
    SVG_MAKER_WORKING_DIR=<path>     - Base directory for save_svg filenames (default: cwd)
    SVG_MAKER_LOG_LEVEL=INFO         - Logging level for the server process
"""

import os
from pathlib import Path
from typing import Any, Dict


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got '{raw}'")


# Settings with environment variable overrides
SETTINGS: Dict[str, Any] = {
    'transport': os.getenv('MCP_TRANSPORT', 'stdio').lower(),
    'host': os.getenv('HOST', '0.0.0.0'),
    'port': _int_env('PORT', 3000),
    'output_dir': os.getenv('SVG_MAKER_OUTPUT_DIR', str(Path.cwd() / 'output')),
    'working_dir': os.getenv('SVG_MAKER_WORKING_DIR', str(Path.cwd())),
    'log_level': os.getenv('SVG_MAKER_LOG_LEVEL', 'INFO').upper(),
}

TRANSPORTS = ('stdio', 'sse')


def get_setting(name: str) -> Any:
    """
    Look up a setting by name.

    Args:
        name: Setting name (e.g., 'transport')

    Returns:
        The configured value

    Raises:
        KeyError: If setting name is not recognized

    Example:
        >>> get_setting('port')
        3000  # Default

        >>> # After: export PORT=8080
        >>> get_setting('port')
        8080
    """
    if name not in SETTINGS:
        available = ', '.join(SETTINGS.keys())
        raise KeyError(
            f"Unknown setting: '{name}'. "
            f"Available settings: {available}"
        )

    return SETTINGS[name]


def get_all_settings() -> Dict[str, Any]:
    """Get a copy of all settings and their current values."""
    return SETTINGS.copy()


def set_setting(name: str, value: Any) -> None:
    """
    Programmatically override a setting (for testing only).

    Warning:
        This is for testing only. In production, use environment variables.
    """
    if name not in SETTINGS:
        available = ', '.join(SETTINGS.keys())
        raise KeyError(
            f"Unknown setting: '{name}'. "
            f"Available settings: {available}"
        )

    SETTINGS[name] = value


def get_output_dir() -> Path:
    """Directory where generated PDF files are written."""
    return Path(get_setting('output_dir')).resolve()


def get_working_dir() -> Path:
    """Base directory that relative save_svg filenames resolve against."""
    return Path(get_setting('working_dir')).resolve()
