"""Tool executor - resolves a tool call to a Trello request and wraps the outcome."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, Optional

from trello_mcp.api.transport import TrelloClient, TrelloError
from trello_mcp.tools.registry import ToolRegistry
from trello_mcp.tools.schema import ToolCall, ToolResult, ToolValidationError, validate_arguments

logger = logging.getLogger(__name__)


class ToolExecutor:
    """
    Executes tool calls against the Trello API.

    ``execute()`` never raises: unknown tools, validation failures, remote
    errors and unexpected exceptions all come back as a ``ToolResult`` with
    ``is_error`` set, so one bad call cannot take down the serving loop.
    """

    def __init__(self, registry: ToolRegistry, client: TrelloClient):
        self._registry = registry
        self._client = client

    # ── Execution ─────────────────────────────────────────────────────────

    async def execute(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """
        Run one tool call.

        Parameters
        ----------
        tool_name : registered tool name like ``create_card``
        arguments : dict of parameter values
        """
        call = ToolCall(tool_name=tool_name, arguments=arguments or {})
        t0 = time.perf_counter()

        try:
            payload = await self._run(call)
        except (ToolValidationError, TrelloError) as exc:
            logger.warning("%s [%s] failed: %s", tool_name, call.call_id, exc)
            return self._error(call, str(exc), t0)
        except Exception as exc:
            logger.exception("%s [%s] raised unexpectedly", tool_name, call.call_id)
            return self._error(call, str(exc) or type(exc).__name__, t0)

        result = ToolResult(
            call_id=call.call_id,
            tool_name=tool_name,
            is_error=False,
            payload=payload,
            duration_ms=self._elapsed_ms(t0),
        )
        logger.info("%s [%s] ok in %dms", tool_name, call.call_id, result.duration_ms)
        return result

    async def _run(self, call: ToolCall) -> str:
        tool_def = self._registry.get_tool(call.tool_name)
        builder = self._registry.get_builder(call.tool_name)
        if tool_def is None or builder is None:
            raise ToolValidationError(f"Unknown tool: {call.tool_name}")

        args = validate_arguments(tool_def, call.arguments)
        request = builder(args)
        logger.debug("%s -> %s %s", call.tool_name, request.method, request.path)

        response = await self._client.request(request.method, request.target)
        return json.dumps(response, indent=2, ensure_ascii=False)

    # ── Results ───────────────────────────────────────────────────────────

    def _error(self, call: ToolCall, message: str, t0: float) -> ToolResult:
        return ToolResult(
            call_id=call.call_id,
            tool_name=call.tool_name,
            is_error=True,
            payload=f"Error: {message}",
            duration_ms=self._elapsed_ms(t0),
        )

    @staticmethod
    def _elapsed_ms(t0: float) -> int:
        return int((time.perf_counter() - t0) * 1000)
