"""Harvest MCP Server implementation."""

import asyncio
import contextlib
import logging
import sys
from typing import Any, Dict, List, Mapping, Optional

import uvicorn
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from mcp.types import TextContent, Tool
from starlette.applications import Starlette
from starlette.routing import Route

from mcp_server_harvest import __version__
from mcp_server_harvest.config import HarvestConfig, load_config
from mcp_server_harvest.errors import ConfigurationError
from mcp_server_harvest.logging_config import setup_logging
from mcp_server_harvest.resources import HarvestAPI
from mcp_server_harvest.tools import ToolRegistry, build_registry

SERVER_NAME = "harvest-mcp-server"
MCP_PATH = "/mcp"

logger = logging.getLogger(__name__)


class ToolCallFailed(Exception):
    """Carries an ``Error: ...`` text; the MCP server turns it into an isError result."""


def create_server(registry: ToolRegistry) -> Server:
    """Build the MCP server exposing every tool in ``registry``."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        """List available tools."""
        return registry.list_tools()

    # arguments are validated by the tool handlers, not against inputSchema
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        """Handle tool calls."""
        result = await registry.call(name, arguments)
        if result.isError:
            raise ToolCallFailed(result.content[0].text)
        return list(result.content)

    return server


class MCPEndpoint:
    """ASGI app forwarding every request to the streamable HTTP session manager."""

    def __init__(self, session_manager: StreamableHTTPSessionManager) -> None:
        self.session_manager = session_manager

    async def __call__(self, scope, receive, send) -> None:
        await self.session_manager.handle_request(scope, receive, send)


def create_http_app(server: Server) -> Starlette:
    session_manager = StreamableHTTPSessionManager(app=server, json_response=False, stateless=False)

    @contextlib.asynccontextmanager
    async def lifespan(app):
        async with session_manager.run():
            yield

    return Starlette(routes=[Route(MCP_PATH, endpoint=MCPEndpoint(session_manager))], lifespan=lifespan)


async def run_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


async def run_http(server: Server, config: HarvestConfig) -> None:
    app = create_http_app(server)
    logger.info("Listening on http://%s:%d%s", config.host, config.port, MCP_PATH)
    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level="warning" if config.log_level == "warn" else config.log_level,
        access_log=False,
    )
    await uvicorn.Server(uvicorn_config).serve()


async def main(environ: Optional[Mapping[str, str]] = None) -> int:
    """Main entry point for the server. Returns the process exit status."""
    try:
        config = load_config(environ)
    except ConfigurationError as e:
        setup_logging("error")
        logger.error("%s", e.message)
        return 1

    setup_logging(config.log_level)
    async with HarvestAPI(config) as api:
        registry = build_registry(api)
        server = create_server(registry)
        logger.info(
            "Starting %s %s with %d tools over %s", SERVER_NAME, __version__, len(registry), config.transport
        )
        if config.transport == "http":
            await run_http(server, config)
        else:
            await run_stdio(server)
    return 0


def run() -> None:
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    run()
