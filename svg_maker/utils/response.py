"""Standardized response envelope for MCP tools."""

import base64
from dataclasses import dataclass, field
from typing import List, Union

from mcp.types import CallToolResult, ImageContent, TextContent

ContentItem = Union[TextContent, ImageContent]


@dataclass
class ToolEnvelope:
    """Uniform success/error result returned by every operation handler.

    An error envelope carries a single text item describing the failure and
    never mixes in a partial payload.
    """
    content: List[ContentItem] = field(default_factory=list)
    is_error: bool = False

    @property
    def text(self) -> str:
        """Concatenated text of all text items."""
        return "".join(
            item.text for item in self.content if isinstance(item, TextContent)
        )

    def to_call_tool_result(self) -> CallToolResult:
        """Convert to the MCP wire result."""
        return CallToolResult(content=list(self.content), isError=self.is_error)


def is_success(envelope: ToolEnvelope) -> bool:
    """Check if an operation succeeded."""
    return not envelope.is_error


def text_response(text: str) -> ToolEnvelope:
    """Create a successful envelope holding one text item.

    Args:
        text: UTF-8 text payload

    Returns:
        Success envelope
    """
    return ToolEnvelope(content=[TextContent(type="text", text=text)])


def image_response(data: bytes, mime_type: str = "image/png") -> ToolEnvelope:
    """Create a successful envelope holding one base64-encoded image item.

    Args:
        data: Raw image bytes
        mime_type: Declared media type of the image

    Returns:
        Success envelope
    """
    encoded = base64.b64encode(data).decode("ascii")
    return ToolEnvelope(
        content=[ImageContent(type="image", data=encoded, mimeType=mime_type)]
    )


def error_response(action: str, error: Union[Exception, str]) -> ToolEnvelope:
    """Create an error envelope of the form "Error <action>: <message>".

    Args:
        action: What the handler was doing (e.g. "rendering SVG")
        error: Underlying failure

    Returns:
        Error envelope with is_error set
    """
    return ToolEnvelope(
        content=[TextContent(type="text", text=f"Error {action}: {error}")],
        is_error=True,
    )
