"""MCP stdio server exposing the Trello tools."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from trello_mcp import MCP_NAME, __version__
from trello_mcp.api.transport import TrelloClient
from trello_mcp.tools.executor import ToolExecutor
from trello_mcp.tools.registry import ToolRegistry, default_registry
from trello_mcp.tools.schema import ToolResult
from trello_mcp.validation.config import Config, Credentials

logger = logging.getLogger(__name__)


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    """Wrap an executor envelope as an MCP ``CallToolResult``."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=result.payload)],
        isError=result.is_error,
    )


def build_server(executor: ToolExecutor, registry: Optional[ToolRegistry] = None) -> Server:
    """Create the MCP server with ``tools/list`` and ``tools/call`` handlers."""
    registry = registry or default_registry()
    server: Server = Server(f"{MCP_NAME}-mcp", version=__version__)
    tools = [types.Tool(**entry) for entry in registry.to_mcp_tools()]

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return tools

    # Arguments are checked by the executor against the same catalog.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        result = await executor.execute(name, arguments or {})
        return to_call_tool_result(result)

    return server


async def serve(config: Config, credentials: Credentials) -> None:
    """Run the server over stdin/stdout until the client disconnects."""
    async with TrelloClient(credentials, base_url=config.api_base, timeout=config.timeout) as client:
        registry = default_registry()
        server = build_server(ToolExecutor(registry, client), registry)

        async with stdio_server() as (read_stream, write_stream):
            logger.info("%s MCP server running on stdio", MCP_NAME)
            await server.run(read_stream, write_stream, server.create_initialization_options())
