from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from career_advisor.tools.definitions import ToolCallRequest


@dataclass(frozen=True)
class UserTurn:
    text: str


@dataclass(frozen=True)
class AssistantTurn:
    text: str


@dataclass(frozen=True)
class ToolRequestTurn:
    """Assistant turn asking for one or more tools to be run."""

    calls: tuple[ToolCallRequest, ...]
    text: Optional[str] = None


@dataclass(frozen=True)
class ToolResultTurn:
    call_id: str
    tool_name: str
    content: str


Turn = Union[UserTurn, AssistantTurn, ToolRequestTurn, ToolResultTurn]


@dataclass
class Conversation:
    """
    Append-only transcript of a single advice request.

    Every call in a ToolRequestTurn must be answered by exactly one
    ToolResultTurn before the conversation is sent to the model again.
    """

    turns: list[Turn] = field(default_factory=list)

    @classmethod
    def start(cls, prompt: str) -> "Conversation":
        return cls(turns=[UserTurn(prompt)])

    def add_assistant_text(self, text: str) -> None:
        self.turns.append(AssistantTurn(text))

    def add_tool_requests(
        self, calls: list[ToolCallRequest], text: Optional[str] = None
    ) -> None:
        if not calls:
            raise ValueError("A tool request turn needs at least one call.")
        if self.pending_call_ids():
            raise ValueError("Previous tool calls have not been answered yet.")
        ids = [c.id for c in calls]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate tool call ids in one request: {ids}")
        self.turns.append(ToolRequestTurn(calls=tuple(calls), text=text))

    def add_tool_result(self, call_id: str, tool_name: str, content: str) -> None:
        if call_id not in self.pending_call_ids():
            raise ValueError(f"No pending tool call with id {call_id!r}.")
        self.turns.append(ToolResultTurn(call_id=call_id, tool_name=tool_name, content=content))

    def pending_call_ids(self) -> list[str]:
        """Ids of the latest tool request that have no result yet, in request order."""
        for idx in range(len(self.turns) - 1, -1, -1):
            turn = self.turns[idx]
            if isinstance(turn, ToolRequestTurn):
                answered = {
                    t.call_id for t in self.turns[idx + 1:] if isinstance(t, ToolResultTurn)
                }
                return [c.id for c in turn.calls if c.id not in answered]
            if not isinstance(turn, ToolResultTurn):
                return []
        return []

    def __len__(self) -> int:
        return len(self.turns)
