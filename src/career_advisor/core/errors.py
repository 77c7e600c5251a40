from __future__ import annotations

from typing import Any, Optional


class AdvisorError(RuntimeError):
    pass


class TransportError(AdvisorError):
    """
    The model endpoint could not be reached or answered with something unusable.
    Fatal to the current advice request.
    """


class ToolError(AdvisorError):
    """Base for tool-level failures. These are returned to the model, never raised to callers."""

    status = "error"

    def __init__(self, tool_name: str, message: str) -> None:
        super().__init__(message)
        self.tool_name = tool_name
        self.message = message

    def to_payload(self) -> dict[str, Any]:
        return {"status": self.status, "tool": self.tool_name, "error": self.message}


class ToolNotFound(ToolError):
    status = "unknown_tool"

    def __init__(self, tool_name: str, available: Optional[list[str]] = None) -> None:
        super().__init__(tool_name, f"Unknown tool: {tool_name}")
        self.available = list(available or [])

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["available_tools"] = self.available
        return payload


class InvalidArguments(ToolError):
    status = "invalid_arguments"

    def __init__(self, tool_name: str, problems: list[str]) -> None:
        super().__init__(tool_name, "; ".join(problems))
        self.problems = list(problems)

    def to_payload(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "tool": self.tool_name,
            "errors": self.problems,
            "hint": "Fix the arguments and call the tool again.",
        }


class ToolExecutionFailure(ToolError):
    status = "error"
