from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

JSON_TYPES = {"string", "number", "integer", "boolean", "array", "object"}


@dataclass(frozen=True)
class ToolParam:
    """One declared parameter of a tool."""

    type: str
    description: str = ""
    required: bool = False
    items: Optional[str] = None  # element type when type == "array"

    def __post_init__(self) -> None:
        if self.type not in JSON_TYPES:
            raise ValueError(f"Unsupported parameter type: {self.type}")
        if self.items is not None and self.items not in JSON_TYPES:
            raise ValueError(f"Unsupported array item type: {self.items}")


@dataclass(frozen=True)
class ToolDescriptor:
    """Name, description and parameter schema of a tool, as shown to the model."""

    name: str
    description: str
    params: Mapping[str, ToolParam] = field(default_factory=dict)

    def json_schema(self) -> dict[str, Any]:
        properties: dict[str, Any] = {}
        for pname, p in self.params.items():
            prop: dict[str, Any] = {"type": p.type}
            if p.description:
                prop["description"] = p.description
            if p.type == "array" and p.items:
                prop["items"] = {"type": p.items}
            properties[pname] = prop
        return {
            "type": "object",
            "properties": properties,
            "required": [n for n, p in self.params.items() if p.required],
        }


@dataclass(frozen=True)
class ToolSpec:
    """A descriptor bound to the callable that executes it."""

    descriptor: ToolDescriptor
    fn: Callable[..., Any]  # keyword arguments in, plain data (dict/list/str) out

    @property
    def name(self) -> str:
        return self.descriptor.name


@dataclass(frozen=True)
class ToolCallRequest:
    """A single tool invocation requested by the model."""

    id: str
    name: str
    arguments: dict[str, Any]


@dataclass(frozen=True)
class ToolTrace:
    """Record of a tool execution for display in the UI."""

    round: int
    call_id: str
    tool_name: str
    arguments: dict[str, Any]
    result: str
    elapsed_ms: float


@dataclass
class ModelResponse:
    """Either final text or a batch of tool calls."""

    text: Optional[str] = None
    tool_calls: list[ToolCallRequest] = field(default_factory=list)

    @property
    def wants_tools(self) -> bool:
        return bool(self.tool_calls)
