from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, List, Optional

from .validation import ArgumentParser

if TYPE_CHECKING:
    from ..services.base import CalendarAdapter

JsonSchema = Dict[str, Any]
ToolHandler = Callable[["CalendarAdapter", Any], Awaitable[str]]


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: JsonSchema
    parser: ArgumentParser
    handler: ToolHandler
    action: str

    def as_tool(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


REGISTRY: Dict[str, ToolDefinition] = {}


def register_tool(
    name: str,
    *,
    description: str,
    input_schema: JsonSchema,
    parser: ArgumentParser,
    action: str,
) -> Callable[[ToolHandler], ToolHandler]:
    def decorator(func: ToolHandler) -> ToolHandler:
        if name in REGISTRY:
            raise ValueError(f"Tool '{name}' is already registered.")
        REGISTRY[name] = ToolDefinition(
            name=name,
            description=description,
            input_schema=input_schema,
            parser=parser,
            handler=func,
            action=action,
        )
        return func

    return decorator


def get_tool_definitions() -> List[ToolDefinition]:
    return list(REGISTRY.values())


def get_tool(name: str) -> Optional[ToolDefinition]:
    return REGISTRY.get(name)
