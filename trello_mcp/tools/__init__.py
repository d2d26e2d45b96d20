"""
Trello tools - catalog, request builders, and dispatch.

A call flows: ToolExecutor -> validate_arguments -> builder -> TrelloClient.
Builders are pure functions, so the whole translation layer can be tested
without network access.
"""

from trello_mcp.tools.builders import BUILDERS, OutboundRequest
from trello_mcp.tools.catalog import TOOLS
from trello_mcp.tools.executor import ToolExecutor
from trello_mcp.tools.registry import RegistryError, ToolRegistry, default_registry
from trello_mcp.tools.schema import (
    ToolCall,
    ToolDef,
    ToolParam,
    ToolResult,
    ToolValidationError,
    validate_arguments,
)

__all__ = [
    "BUILDERS",
    "OutboundRequest",
    "TOOLS",
    "ToolExecutor",
    "RegistryError",
    "ToolRegistry",
    "default_registry",
    "ToolCall",
    "ToolDef",
    "ToolParam",
    "ToolResult",
    "ToolValidationError",
    "validate_arguments",
]
