from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

from career_advisor.tools.definitions import ModelResponse, ToolDescriptor

if TYPE_CHECKING:
    from career_advisor.context.records import ContextRecord
    from career_advisor.core.conversation import Conversation


class ModelClient(Protocol):
    """Hosted LLM that may answer with text or with tool invocations."""

    def send(
        self, conversation: "Conversation", tools: Sequence[ToolDescriptor]
    ) -> ModelResponse:
        """
        Send the whole conversation plus the available tool schemas.
        Raises TransportError on network or protocol failure.
        """
        ...


class ContextProvider(Protocol):
    """Source of career records used to ground the answer."""

    def search(self, query: str) -> list["ContextRecord"]:
        """
        Return matching records, best first. May be empty.
        """
        ...
