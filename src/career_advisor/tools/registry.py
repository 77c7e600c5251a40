"""Registry of tools the model may call.

The registry owns argument validation and turns every tool-level problem
(unknown name, bad arguments, an exception inside the tool) into a JSON
payload. Those payloads go back to the model as ordinary tool results so it
can correct itself; nothing here is raised to the advice caller.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterable, Mapping

from career_advisor.core.errors import (
    InvalidArguments,
    ToolError,
    ToolExecutionFailure,
    ToolNotFound,
)
from career_advisor.tools.definitions import ToolDescriptor, ToolParam, ToolSpec

logger = logging.getLogger(__name__)


def _matches_type(value: Any, json_type: str) -> bool:
    # bool is an int subclass; keep it out of the numeric types
    if json_type == "string":
        return isinstance(value, str)
    if json_type == "integer":
        return isinstance(value, int) and not isinstance(value, bool)
    if json_type == "number":
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if json_type == "boolean":
        return isinstance(value, bool)
    if json_type == "array":
        return isinstance(value, list)
    if json_type == "object":
        return isinstance(value, dict)
    return False


def serialize_result(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False)


class ToolRegistry:
    """Fixed set of tools, built once per process."""

    def __init__(self, specs: Iterable[ToolSpec]) -> None:
        self._tools: dict[str, ToolSpec] = {}
        for spec in specs:
            if spec.name in self._tools:
                raise ValueError(f"Duplicate tool name: {spec.name}")
            self._tools[spec.name] = spec
            logger.debug("Registered tool: %s", spec.name)

    def names(self) -> list[str]:
        return list(self._tools)

    def list_schemas(self) -> list[ToolDescriptor]:
        return [spec.descriptor for spec in self._tools.values()]

    def resolve(self, name: str) -> Callable[..., Any]:
        spec = self._tools.get(name)
        if spec is None:
            raise ToolNotFound(name, available=self.names())
        return spec.fn

    def validate(self, name: str, arguments: Any) -> dict[str, Any]:
        """Check arguments against the declared schema; raise InvalidArguments listing every problem."""
        spec = self._tools.get(name)
        if spec is None:
            raise ToolNotFound(name, available=self.names())

        if not isinstance(arguments, Mapping):
            raise InvalidArguments(name, [f"arguments must be an object, got {type(arguments).__name__}"])

        params: Mapping[str, ToolParam] = spec.descriptor.params
        problems: list[str] = []

        for pname, p in params.items():
            if p.required and arguments.get(pname) is None:
                problems.append(f"missing required argument '{pname}'")

        for key, value in arguments.items():
            p = params.get(key)
            if p is None:
                problems.append(f"unexpected argument '{key}'")
                continue
            if value is None:
                continue
            if not _matches_type(value, p.type):
                problems.append(f"argument '{key}' must be of type {p.type}")
                continue
            if p.type == "array" and p.items:
                bad = [i for i, item in enumerate(value) if not _matches_type(item, p.items)]
                if bad:
                    problems.append(f"argument '{key}' items must be of type {p.items} (bad positions: {bad})")

        if problems:
            raise InvalidArguments(name, problems)

        # Optional arguments passed as null fall back to the tool's defaults.
        return {k: v for k, v in arguments.items() if v is not None}

    def invoke(self, name: str, arguments: Any) -> str:
        """Run a tool and return its serialized result. Never raises for tool-level failures."""
        try:
            fn = self.resolve(name)
            clean = self.validate(name, arguments)
        except ToolError as e:
            logger.info("Tool call rejected (%s): %s", e.status, e.message)
            return serialize_result(e.to_payload())

        try:
            return serialize_result(fn(**clean))
        except Exception as e:
            # Covers results json cannot encode as well as failures inside the tool.
            logger.warning("Tool %s failed: %s: %s", name, type(e).__name__, e)
            failure = ToolExecutionFailure(name, f"{type(e).__name__}: {e}")
            return serialize_result(failure.to_payload())
