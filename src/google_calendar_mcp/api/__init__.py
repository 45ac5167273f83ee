"""Tool surface shared by the MCP and HTTP transports."""

from __future__ import annotations

from .dispatcher import ToolDispatcher
from .models import ToolResponse
from .registry import ToolDefinition, get_tool, get_tool_definitions, register_tool

# Import tools so decorators run at module import time.
from . import tools  # noqa: F401

__all__ = ["ToolDefinition", "ToolDispatcher", "ToolResponse", "get_tool", "get_tool_definitions", "register_tool"]
