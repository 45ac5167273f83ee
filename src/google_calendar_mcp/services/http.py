from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from pydantic import BaseModel, Field
from starlette.routing import Route
from starlette.types import Receive, Scope, Send

from ..api import ToolDispatcher
from .mcp import build_mcp_server, server_version

logger = logging.getLogger(__name__)


class ToolCallRequest(BaseModel):
    arguments: Optional[Any] = Field(default=None)


class MCPEndpoint:
    """ASGI app forwarding requests to the streamable HTTP session manager."""

    def __init__(self, session_manager: StreamableHTTPSessionManager) -> None:
        self.session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.session_manager.handle_request(scope, receive, send)


def create_app(dispatcher: ToolDispatcher) -> FastAPI:
    session_manager = StreamableHTTPSessionManager(
        app=build_mcp_server(dispatcher),
        json_response=True,
        stateless=True,
    )

    @contextlib.asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        async with session_manager.run():
            logger.info("Streamable HTTP MCP session manager started")
            yield

    app = FastAPI(title="Google Calendar MCP", version=server_version(), lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Both "/mcp" and "/mcp/..." reach the session manager without a redirect.
    endpoint = MCPEndpoint(session_manager)
    app.router.routes.append(Route("/mcp", endpoint=endpoint, methods=["GET", "POST", "DELETE"]))
    app.mount("/mcp", endpoint)

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok", "adapter": dispatcher.adapter.name}

    @app.get("/api/tools")
    async def list_tools() -> JSONResponse:
        return JSONResponse({"tools": dispatcher.list_tools()})

    @app.post("/api/tools/{tool_name}")
    async def invoke_tool(tool_name: str, request: ToolCallRequest) -> JSONResponse:
        response = await dispatcher.call_tool(tool_name, request.arguments)
        logger.debug("HTTP tool call %s finished (error=%s)", tool_name, response.is_error)
        return JSONResponse(response.to_payload())

    return app


def run_http_server(app: FastAPI, host: str = "127.0.0.1", port: int = 8080) -> None:
    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("Google Calendar MCP server listening on http://%s:%s", host, port)
    asyncio.run(serve(app, config))
