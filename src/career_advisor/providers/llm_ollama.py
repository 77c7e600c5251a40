from __future__ import annotations

import json
import logging
import os
import uuid
from dataclasses import dataclass
from typing import Any, Sequence

import requests

from career_advisor.core.conversation import (
    AssistantTurn,
    Conversation,
    ToolRequestTurn,
    ToolResultTurn,
    UserTurn,
)
from career_advisor.core.errors import TransportError
from career_advisor.core.interfaces import ModelClient
from career_advisor.providers.llm_openai import to_openai_tools
from career_advisor.tools.definitions import ModelResponse, ToolCallRequest, ToolDescriptor

logger = logging.getLogger(__name__)


class OllamaProviderError(TransportError):
    pass


@dataclass(frozen=True)
class OllamaLLMConfig:
    base_url: str = "http://localhost:11434"
    model: str = "llama3.2:3b"

    @staticmethod
    def from_env() -> "OllamaLLMConfig":
        base_url = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434").strip()
        model = os.getenv("OLLAMA_MODEL", "llama3.2:3b").strip()
        return OllamaLLMConfig(base_url=base_url, model=model)


def to_ollama_messages(conversation: Conversation) -> list[dict[str, Any]]:
    # Ollama takes arguments as objects and matches tool results by name.
    messages: list[dict[str, Any]] = []
    for turn in conversation.turns:
        if isinstance(turn, UserTurn):
            messages.append({"role": "user", "content": turn.text})
        elif isinstance(turn, AssistantTurn):
            messages.append({"role": "assistant", "content": turn.text})
        elif isinstance(turn, ToolRequestTurn):
            messages.append({
                "role": "assistant",
                "content": turn.text or "",
                "tool_calls": [
                    {"function": {"name": c.name, "arguments": c.arguments}} for c in turn.calls
                ],
            })
        elif isinstance(turn, ToolResultTurn):
            messages.append({"role": "tool", "tool_name": turn.tool_name, "content": turn.content})
    return messages


def _parse_arguments(raw: Any, tool_name: str) -> dict[str, Any]:
    if raw is None:
        return {}
    if isinstance(raw, dict):
        return raw
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw or "{}")
        except json.JSONDecodeError as e:
            raise OllamaProviderError(f"Ollama returned malformed arguments for {tool_name}: {e}") from e
        if isinstance(parsed, dict):
            return parsed
    raise OllamaProviderError(f"Ollama returned malformed arguments for {tool_name}.")


class OllamaModelClient(ModelClient):
    """
    Ollama chat wrapper implementing ModelClient.
    Uses the /api/chat endpoint with tools.
    """

    def __init__(self, config: OllamaLLMConfig, timeout_s: float = 120.0) -> None:
        self._cfg = config
        self._timeout_s = timeout_s

    def send(self, conversation: Conversation, tools: Sequence[ToolDescriptor]) -> ModelResponse:
        url = f"{self._cfg.base_url.rstrip('/')}/api/chat"
        payload: dict[str, Any] = {
            "model": self._cfg.model,
            "messages": to_ollama_messages(conversation),
            "stream": False,
        }
        if tools:
            payload["tools"] = to_openai_tools(tools)

        try:
            resp = requests.post(url, json=payload, timeout=self._timeout_s)
        except requests.RequestException as e:
            raise OllamaProviderError(
                f"Failed to reach Ollama at {self._cfg.base_url}. Is `ollama serve` running? ({e})"
            ) from e

        if resp.status_code >= 400:
            raise OllamaProviderError(f"Ollama error {resp.status_code}: {resp.text[:500]}")

        try:
            data = resp.json()
        except ValueError as e:
            raise OllamaProviderError("Ollama returned a non-JSON response.") from e

        message = data.get("message") or {}
        calls: list[ToolCallRequest] = []
        for tc in message.get("tool_calls") or []:
            fn = tc.get("function") or {}
            name = fn.get("name")
            if not name:
                raise OllamaProviderError("Ollama returned a tool call without a name.")
            calls.append(
                ToolCallRequest(
                    id=tc.get("id") or f"call_{uuid.uuid4().hex[:12]}",
                    name=name,
                    arguments=_parse_arguments(fn.get("arguments"), name),
                )
            )

        text = (message.get("content") or "").strip() or None
        if not calls and not text:
            raise OllamaProviderError("Ollama returned empty response text.")

        logger.debug("Ollama response: %d tool calls, %d chars", len(calls), len(text or ""))
        return ModelResponse(text=text, tool_calls=calls)
