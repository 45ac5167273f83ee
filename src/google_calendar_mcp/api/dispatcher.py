from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List

from ..errors import CalendarError
from .models import ToolResponse
from .registry import get_tool, get_tool_definitions
from .validation import Invalid

if TYPE_CHECKING:
    from ..services.base import CalendarAdapter

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """Routes tool calls to the calendar adapter and wraps every outcome.

    Failures of any kind come back as an error envelope; nothing raised by the
    adapter reaches the transport.
    """

    def __init__(self, adapter: CalendarAdapter) -> None:
        self.adapter = adapter

    def list_tools(self) -> List[Dict[str, Any]]:
        return [definition.as_tool() for definition in get_tool_definitions()]

    async def call_tool(self, name: str, arguments: Any = None) -> ToolResponse:
        definition = get_tool(name)
        if definition is None:
            logger.warning("Unknown tool requested: %s", name)
            return ToolResponse.failure(f"Unknown tool: {name}")

        logger.info("Tool called: %s", name)
        parsed = definition.parser(arguments)
        if isinstance(parsed, Invalid):
            logger.warning("Rejected arguments for %s: %s", name, parsed.describe())
            return ToolResponse.failure(f"Error {definition.action}: {parsed.describe()}")

        try:
            text = await definition.handler(self.adapter, parsed.value)
        except CalendarError as exc:
            logger.warning("Tool %s failed: %s", name, exc)
            return ToolResponse.failure(f"Error {definition.action}: {exc}")
        except Exception as exc:  # noqa: BLE001
            logger.exception("Tool %s raised an unexpected error", name)
            return ToolResponse.failure(f"Error {definition.action}: {exc}")
        return ToolResponse.success(text)
