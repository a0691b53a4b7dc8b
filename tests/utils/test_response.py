"""Tests for the tool response envelope."""

import base64

from mcp.types import ImageContent, TextContent

from svg_maker.utils.response import (
    error_response,
    image_response,
    is_success,
    text_response,
)


def test_text_response():
    envelope = text_response("done")

    assert is_success(envelope)
    assert envelope.content == [TextContent(type="text", text="done")]
    assert envelope.text == "done"


def test_image_response():
    envelope = image_response(b"\x00\x01", "image/png")

    image = envelope.content[0]
    assert isinstance(image, ImageContent)
    assert base64.b64decode(image.data) == b"\x00\x01"
    assert envelope.text == ""


def test_error_response():
    envelope = error_response("saving SVG", PermissionError("denied"))

    assert not is_success(envelope)
    assert envelope.text == "Error saving SVG: denied"
    assert len(envelope.content) == 1


def test_call_tool_result():
    result = error_response("formatting SVG", "bad").to_call_tool_result()

    assert result.isError is True
    assert result.content[0].text == "Error formatting SVG: bad"
