from __future__ import annotations

import asyncio
import logging
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from ..api import ToolDispatcher

logger = logging.getLogger(__name__)

SERVER_NAME = "google-calendar"
DISTRIBUTION_NAME = "google-calendar-mcp"


def server_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"


def build_mcp_server(dispatcher: ToolDispatcher) -> Server:
    server: Server = Server(SERVER_NAME, version=server_version())

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(name=tool["name"], description=tool["description"], inputSchema=tool["inputSchema"])
            for tool in dispatcher.list_tools()
        ]

    # Schema checks belong to the dispatcher so that bad arguments still get the uniform envelope.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        response = await dispatcher.call_tool(name, arguments)
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=item.text) for item in response.content],
            isError=response.is_error,
        )

    return server


async def serve_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Google Calendar MCP server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run_stdio_server(dispatcher: ToolDispatcher) -> None:
    asyncio.run(serve_stdio(build_mcp_server(dispatcher)))
