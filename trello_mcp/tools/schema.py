"""Data models for tool definitions, calls, and results, plus argument validation."""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

ParamType = Literal["string", "number", "boolean", "array"]


class ToolValidationError(ValueError):
    """Raised when an argument bag does not satisfy a tool's schema."""


class ToolParam(BaseModel):
    """A single parameter for a tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: ParamType = "string"
    description: str = ""
    required: bool = False
    enum: Optional[Tuple[str, ...]] = None  # allowed values for string params
    items: Optional[ParamType] = None  # element type for arrays

    def json_schema(self) -> Dict[str, Any]:
        """JSON Schema fragment for this parameter."""
        schema: Dict[str, Any] = {"type": self.type}
        if self.enum:
            schema["enum"] = list(self.enum)
        if self.type == "array":
            schema["items"] = {"type": self.items or "string"}
        schema["description"] = self.description
        return schema


class ToolDef(BaseModel):
    """Operation descriptor: what the caller sees and what arguments are checked against."""

    model_config = ConfigDict(frozen=True)

    name: str  # e.g. "create_card"
    description: str
    params: Tuple[ToolParam, ...] = ()

    @property
    def required(self) -> List[str]:
        return [p.name for p in self.params if p.required]

    def get_param(self, name: str) -> Optional[ToolParam]:
        for p in self.params:
            if p.name == name:
                return p
        return None

    def input_schema(self) -> Dict[str, Any]:
        """The ``inputSchema`` object advertised over MCP."""
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.params},
        }
        if self.required:
            schema["required"] = self.required
        return schema

    def full_schema_text(self) -> str:
        """Full parameter schema as text (for on-demand lookup)."""
        lines = [f"Tool: {self.name}", f"  {self.description}", "  Parameters:"]
        if not self.params:
            lines.append("    (none)")
        for p in self.params:
            req = " (required)" if p.required else ""
            allowed = f" [{' | '.join(p.enum)}]" if p.enum else ""
            lines.append(f"    - {p.name}: {p.type}{allowed}{req} - {p.description}")
        return "\n".join(lines)


class ToolCall(BaseModel):
    """Record of a single tool invocation."""

    call_id: str = ""
    tool_name: str = ""
    arguments: Dict[str, Any] = Field(default_factory=dict)
    timestamp: str = ""

    def model_post_init(self, __context: Any) -> None:
        if not self.call_id:
            raw = f"{self.tool_name}:{self.arguments}:{datetime.now(timezone.utc).isoformat()}"
            self.call_id = hashlib.sha256(raw.encode()).hexdigest()[:12]
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat()


class ToolResult(BaseModel):
    """Envelope returned for every invocation. ``payload`` is always text."""

    call_id: str = ""
    tool_name: str = ""
    is_error: bool = False
    payload: str = ""
    duration_ms: int = 0


# ── Validation ────────────────────────────────────────────────────────────


def _check_value(tool: ToolDef, param: ToolParam, value: Any) -> Any:
    """Return the normalized value, or raise ToolValidationError."""
    where = f"{tool.name}: parameter '{param.name}'"

    if param.type == "string":
        # Positions and similar fields are often sent as numbers.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str):
            raise ToolValidationError(f"{where} must be a string, got {type(value).__name__}")
        if param.enum and value not in param.enum:
            raise ToolValidationError(
                f"{where} must be one of {', '.join(param.enum)} (got '{value}')"
            )
        return value

    if param.type == "boolean":
        if not isinstance(value, bool):
            raise ToolValidationError(f"{where} must be a boolean, got {type(value).__name__}")
        return value

    if param.type == "number":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ToolValidationError(f"{where} must be a number, got {type(value).__name__}")
        return value

    if param.type == "array":
        if not isinstance(value, (list, tuple)):
            raise ToolValidationError(f"{where} must be an array, got {type(value).__name__}")
        if not all(isinstance(item, str) for item in value):
            raise ToolValidationError(f"{where} must contain only strings")
        return list(value)

    raise ToolValidationError(f"{where} has unsupported type '{param.type}'")


def validate_arguments(tool: ToolDef, arguments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Check an argument bag against a tool's parameters.

    Returns a new dict holding only declared parameters, normalized. Optional
    parameters passed as ``None`` are kept as ``None`` so builders can tell an
    explicit clear from an absent field.
    """
    arguments = arguments or {}
    validated: Dict[str, Any] = {}

    for param in tool.params:
        if param.name not in arguments:
            if param.required:
                raise ToolValidationError(f"{tool.name}: missing required parameter '{param.name}'")
            continue

        value = arguments[param.name]
        if value is None:
            if param.required:
                raise ToolValidationError(f"{tool.name}: parameter '{param.name}' must not be null")
            validated[param.name] = None
            continue

        validated[param.name] = _check_value(tool, param, value)

    return validated
