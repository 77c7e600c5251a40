from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from openai import OpenAI, OpenAIError

from career_advisor.core.conversation import (
    AssistantTurn,
    Conversation,
    ToolRequestTurn,
    ToolResultTurn,
    UserTurn,
)
from career_advisor.core.errors import TransportError
from career_advisor.core.interfaces import ModelClient
from career_advisor.tools.definitions import ModelResponse, ToolCallRequest, ToolDescriptor

logger = logging.getLogger(__name__)


class OpenAIProviderError(TransportError):
    pass


@dataclass(frozen=True)
class OpenAILLMConfig:
    api_key: str
    model: str = "gpt-4o-mini"
    temperature: float = 0.7
    max_tokens: int = 2000

    @staticmethod
    def from_env() -> "OpenAILLMConfig":
        api_key = os.getenv("OPENAI_API_KEY", "").strip()
        if not api_key:
            raise OpenAIProviderError("Missing OPENAI_API_KEY in environment.")

        model = os.getenv("OPENAI_MODEL", "gpt-4o-mini").strip()
        temperature = float(os.getenv("OPENAI_TEMPERATURE", "0.7"))
        return OpenAILLMConfig(api_key=api_key, model=model, temperature=temperature)


def to_openai_messages(conversation: Conversation) -> list[dict[str, Any]]:
    messages: list[dict[str, Any]] = []
    for turn in conversation.turns:
        if isinstance(turn, UserTurn):
            messages.append({"role": "user", "content": turn.text})
        elif isinstance(turn, AssistantTurn):
            messages.append({"role": "assistant", "content": turn.text})
        elif isinstance(turn, ToolRequestTurn):
            messages.append({
                "role": "assistant",
                "content": turn.text,
                "tool_calls": [
                    {
                        "id": c.id,
                        "type": "function",
                        "function": {"name": c.name, "arguments": json.dumps(c.arguments)},
                    }
                    for c in turn.calls
                ],
            })
        elif isinstance(turn, ToolResultTurn):
            messages.append({"role": "tool", "tool_call_id": turn.call_id, "content": turn.content})
    return messages


def to_openai_tools(tools: Sequence[ToolDescriptor]) -> list[dict[str, Any]]:
    return [
        {
            "type": "function",
            "function": {
                "name": t.name,
                "description": t.description,
                "parameters": t.json_schema(),
            },
        }
        for t in tools
    ]


class OpenAIModelClient(ModelClient):
    """
    OpenAI chat completions with function calling, implementing ModelClient.
    """

    def __init__(
        self, config: OpenAILLMConfig, timeout_s: float = 30.0, client: Optional[Any] = None
    ) -> None:
        self._cfg = config
        self._client = client or OpenAI(api_key=config.api_key, timeout=timeout_s)

    def send(self, conversation: Conversation, tools: Sequence[ToolDescriptor]) -> ModelResponse:
        kwargs: dict[str, Any] = {
            "model": self._cfg.model,
            "messages": to_openai_messages(conversation),
            "temperature": self._cfg.temperature,
            "max_tokens": self._cfg.max_tokens,
        }
        if tools:
            kwargs["tools"] = to_openai_tools(tools)

        try:
            resp = self._client.chat.completions.create(**kwargs)
        except OpenAIError as e:
            raise OpenAIProviderError(f"OpenAI request failed: {type(e).__name__}: {e}") from e

        if not getattr(resp, "choices", None):
            raise OpenAIProviderError("OpenAI returned no choices.")
        msg = resp.choices[0].message

        calls: list[ToolCallRequest] = []
        for tc in msg.tool_calls or []:
            try:
                arguments = json.loads(tc.function.arguments or "{}")
            except json.JSONDecodeError as e:
                raise OpenAIProviderError(
                    f"OpenAI returned malformed arguments for {tc.function.name}: {e}"
                ) from e
            calls.append(ToolCallRequest(id=tc.id, name=tc.function.name, arguments=arguments))

        text = (msg.content or "").strip() or None
        if not calls and not text:
            raise OpenAIProviderError("OpenAI returned empty response text.")

        logger.debug("OpenAI response: %d tool calls, %d chars", len(calls), len(text or ""))
        return ModelResponse(text=text, tool_calls=calls)
