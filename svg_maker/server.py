"""Main MCP server implementation for SVG tools."""

import asyncio
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.types import CallToolResult, Tool
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Mount, Route

from . import __version__
from .config.settings import TRANSPORTS, get_setting
from .registry import OperationRegistry
from .registry.operations import register_all_operations
from .utils.response import is_success

logger = logging.getLogger(__name__)

SERVER_NAME = "SVG Maker"


class SvgMakerMCPServer:
    """MCP Server exposing the SVG operation registry as tools."""

    def __init__(self, registry: Optional[OperationRegistry] = None):
        """Build the operation catalog and the MCP server instance.

        Args:
            registry: Registry to populate (default: process-wide singleton)
        """
        self.registry = register_all_operations(registry)

        # Create MCP server instance
        self.server = Server(SERVER_NAME)

        # Register handlers
        self._register_handlers()

    def _register_handlers(self):
        """Register all MCP handlers."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[Tool]:
            """List all available tools."""
            return self.registry.to_tools()

        # Arguments are checked by the registry's own request validation
        @self.server.call_tool(validate_input=False)
        async def handle_call_tool(name: str, arguments: dict) -> CallToolResult:
            """Route tool calls through the registry."""
            return await self.call_tool(name, arguments)

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
        """
        Dispatch one invocation and convert its envelope for the wire.

        Dispatch-level failures (unknown operation, missing or mistyped
        parameters, invalid SVG for render_svg) are logged and re-raised so the
        protocol layer reports them.
        """
        try:
            envelope = await self.registry.dispatch(name, arguments or {})
        except Exception as e:
            logger.error(f"Error executing tool {name}: {e}")
            raise

        if not is_success(envelope):
            logger.info(f"Tool {name} returned an error envelope")
        return envelope.to_call_tool_result()

    def _initialization_options(self) -> InitializationOptions:
        return InitializationOptions(
            server_name=SERVER_NAME,
            server_version=__version__,
            capabilities=self.server.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={}
            )
        )

    async def run(self):
        """Run the MCP server over stdio."""
        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self._initialization_options()
            )

    def create_sse_app(self) -> FastAPI:
        """Build the HTTP app serving the SSE transport (GET /sse, POST /messages/)."""
        from mcp.server.sse import SseServerTransport

        sse = SseServerTransport("/messages/")

        async def handle_sse(request: Request) -> Response:
            async with sse.connect_sse(
                request.scope, request.receive, request._send
            ) as (read_stream, write_stream):
                await self.server.run(
                    read_stream,
                    write_stream,
                    self._initialization_options()
                )
            return Response()

        return FastAPI(
            title="SVG Maker MCP",
            routes=[
                Route("/sse", endpoint=handle_sse, methods=["GET"]),
                Mount("/messages/", app=sse.handle_post_message),
            ],
        )

    def run_sse(self, host: str, port: int):
        """Serve the SSE transport with uvicorn (blocking)."""
        import uvicorn

        logger.info(f"SSE Server listening on {host}:{port}")
        uvicorn.run(self.create_sse_app(), host=host, port=port)


def main():
    """Main entry point for the MCP server."""
    logging.basicConfig(
        level=get_setting('log_level'),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    transport = get_setting('transport')
    if transport not in TRANSPORTS:
        raise SystemExit(
            f"Unknown MCP_TRANSPORT '{transport}'. Available: {', '.join(TRANSPORTS)}"
        )

    server = SvgMakerMCPServer()
    if transport == 'sse':
        server.run_sse(get_setting('host'), get_setting('port'))
    else:
        asyncio.run(server.run())


if __name__ == "__main__":
    main()
