"""Tool registry - the catalog advertised to the caller and the builder lookup."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Iterable, List, Mapping, Optional

from trello_mcp.tools.builders import BUILDERS, Builder
from trello_mcp.tools.catalog import TOOLS
from trello_mcp.tools.schema import ToolDef


class RegistryError(Exception):
    """Raised when the tool catalog and builder set are inconsistent."""


class ToolRegistry:
    """
    Ordered, read-only mapping from tool name to descriptor and builder.

    Descriptors and builders are supplied separately so either side can be
    extended or tested alone; construction fails if a name is duplicated or
    has no builder.
    """

    def __init__(self, tools: Iterable[ToolDef], builders: Mapping[str, Builder]):
        self._tools: Dict[str, ToolDef] = {}
        for tool in tools:
            if tool.name in self._tools:
                raise RegistryError(f"Duplicate tool name: {tool.name}")
            if tool.name not in builders:
                raise RegistryError(f"No request builder for tool: {tool.name}")
            self._tools[tool.name] = tool
        self._builders: Dict[str, Builder] = {name: builders[name] for name in self._tools}

    # ── Tool Lookup ───────────────────────────────────────────────────────

    def get_tool(self, name: str) -> Optional[ToolDef]:
        return self._tools.get(name)

    def get_builder(self, name: str) -> Optional[Builder]:
        return self._builders.get(name)

    def list_tools(self) -> List[ToolDef]:
        """Return all tools in catalog order."""
        return list(self._tools.values())

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    # ── Rendering ─────────────────────────────────────────────────────────

    def to_mcp_tools(self) -> List[Dict[str, Any]]:
        """Catalog as MCP ``tools/list`` entries (name, description, inputSchema)."""
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "inputSchema": tool.input_schema(),
            }
            for tool in self._tools.values()
        ]

    def build_full_schema(self, name: str) -> str:
        """Return the full parameter schema for ONE tool as text."""
        tool = self.get_tool(name)
        if not tool:
            return f"Tool not found: {name}"
        return tool.full_schema_text()


@lru_cache(maxsize=None)
def default_registry() -> ToolRegistry:
    """The process-wide Trello registry, built once on first use."""
    return ToolRegistry(TOOLS, BUILDERS)
