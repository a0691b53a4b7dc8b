"""SVG Maker MCP server: render, optimize, format, convert and validate SVG."""

__version__ = "1.0.0"
