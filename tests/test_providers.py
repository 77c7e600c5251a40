import json
from types import SimpleNamespace

import pytest
import requests
from openai import OpenAIError

from career_advisor.core.conversation import Conversation
from career_advisor.core.errors import TransportError
from career_advisor.providers.llm_ollama import OllamaLLMConfig, OllamaModelClient, to_ollama_messages
from career_advisor.providers.llm_openai import (
    OpenAILLMConfig,
    OpenAIModelClient,
    OpenAIProviderError,
    to_openai_messages,
)
from career_advisor.tools import SKILL_GAP_TOOL_SPEC
from career_advisor.tools.definitions import ToolCallRequest


def _conversation():
    conv = Conversation.start("I know Python")
    conv.add_tool_requests(
        [ToolCallRequest(id="call_1", name="analyze_skill_gap", arguments={"current_skills": ["Python"], "target_skills": ["SQL"]})],
        text="Let me check.",
    )
    conv.add_tool_result("call_1", "analyze_skill_gap", '{"gap_count": 1}')
    return conv


class FakeCompletions:
    def __init__(self, message=None, error=None):
        self._message = message
        self._error = error
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        if self._error:
            raise self._error
        return SimpleNamespace(choices=[SimpleNamespace(message=self._message)])


def _openai(message=None, error=None):
    completions = FakeCompletions(message, error)
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return OpenAIModelClient(OpenAILLMConfig(api_key="sk-test"), client=client), completions


def test_openai_messages_shape():
    messages = to_openai_messages(_conversation())
    assert messages[0] == {"role": "user", "content": "I know Python"}
    assert messages[1]["tool_calls"][0]["function"] == {
        "name": "analyze_skill_gap",
        "arguments": json.dumps({"current_skills": ["Python"], "target_skills": ["SQL"]}),
    }
    assert messages[2] == {"role": "tool", "tool_call_id": "call_1", "content": '{"gap_count": 1}'}


def test_openai_text_response():
    client, completions = _openai(SimpleNamespace(content="  Become a data analyst first. ", tool_calls=None))
    response = client.send(Conversation.start("hi"), [SKILL_GAP_TOOL_SPEC.descriptor])

    assert response.text == "Become a data analyst first."
    assert not response.wants_tools
    assert completions.kwargs["tools"][0]["function"]["name"] == "analyze_skill_gap"
    assert completions.kwargs["model"] == "gpt-4o-mini"


def test_openai_tool_call_response():
    tool_call = SimpleNamespace(
        id="call_9",
        function=SimpleNamespace(name="analyze_skill_gap", arguments='{"current_skills": [], "target_skills": ["SQL"]}'),
    )
    client, _ = _openai(SimpleNamespace(content=None, tool_calls=[tool_call]))
    response = client.send(Conversation.start("hi"), [])

    assert response.tool_calls == [
        ToolCallRequest(id="call_9", name="analyze_skill_gap", arguments={"current_skills": [], "target_skills": ["SQL"]})
    ]
    assert response.text is None


def test_openai_omits_tools_when_none_given():
    client, completions = _openai(SimpleNamespace(content="ok", tool_calls=None))
    client.send(Conversation.start("hi"), [])
    assert "tools" not in completions.kwargs


def test_openai_sdk_error_becomes_transport_error():
    client, _ = _openai(error=OpenAIError("connection refused"))
    with pytest.raises(TransportError):
        client.send(Conversation.start("hi"), [])


def test_openai_malformed_arguments_is_transport_error():
    tool_call = SimpleNamespace(id="c", function=SimpleNamespace(name="analyze_skill_gap", arguments="{not json"))
    client, _ = _openai(SimpleNamespace(content=None, tool_calls=[tool_call]))
    with pytest.raises(OpenAIProviderError):
        client.send(Conversation.start("hi"), [])


def test_openai_empty_response_is_transport_error():
    client, _ = _openai(SimpleNamespace(content="   ", tool_calls=[]))
    with pytest.raises(TransportError):
        client.send(Conversation.start("hi"), [])


def test_openai_config_requires_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    with pytest.raises(OpenAIProviderError):
        OpenAILLMConfig.from_env()


class FakeResponse:
    def __init__(self, status_code, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


def test_ollama_messages_use_object_arguments():
    messages = to_ollama_messages(_conversation())
    assert messages[1]["tool_calls"][0]["function"]["arguments"] == {"current_skills": ["Python"], "target_skills": ["SQL"]}
    assert messages[2] == {"role": "tool", "tool_name": "analyze_skill_gap", "content": '{"gap_count": 1}'}


def test_ollama_tool_call_response(monkeypatch):
    seen = {}

    def fake_post(url, json=None, timeout=None):
        seen.update(url=url, payload=json, timeout=timeout)
        return FakeResponse(200, {
            "message": {
                "role": "assistant",
                "content": "",
                "tool_calls": [{"function": {"name": "analyze_skill_gap", "arguments": {"current_skills": ["Go"], "target_skills": ["SQL"]}}}],
            }
        })

    monkeypatch.setattr(requests, "post", fake_post)
    client = OllamaModelClient(OllamaLLMConfig(base_url="http://ollama:11434/", model="llama3.2:3b"))
    response = client.send(Conversation.start("hi"), [SKILL_GAP_TOOL_SPEC.descriptor])

    assert seen["url"] == "http://ollama:11434/api/chat"
    assert seen["payload"]["stream"] is False
    assert seen["payload"]["tools"][0]["function"]["name"] == "analyze_skill_gap"
    [call] = response.tool_calls
    assert call.name == "analyze_skill_gap"
    assert call.arguments == {"current_skills": ["Go"], "target_skills": ["SQL"]}
    assert call.id.startswith("call_")


def test_ollama_text_response(monkeypatch):
    monkeypatch.setattr(
        requests, "post",
        lambda url, json=None, timeout=None: FakeResponse(200, {"message": {"content": " Hello "}}),
    )
    response = OllamaModelClient(OllamaLLMConfig()).send(Conversation.start("hi"), [])
    assert response.text == "Hello"


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse(500, text="model not loaded"),
        FakeResponse(200, payload=None),
        FakeResponse(200, {"message": {"content": ""}}),
    ],
)
def test_ollama_bad_responses_are_transport_errors(monkeypatch, response):
    monkeypatch.setattr(requests, "post", lambda url, json=None, timeout=None: response)
    with pytest.raises(TransportError):
        OllamaModelClient(OllamaLLMConfig()).send(Conversation.start("hi"), [])


def test_ollama_unreachable_is_transport_error(monkeypatch):
    def boom(url, json=None, timeout=None):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(requests, "post", boom)
    with pytest.raises(TransportError):
        OllamaModelClient(OllamaLLMConfig()).send(Conversation.start("hi"), [])
