import pytest

from career_advisor.core.conversation import (
    Conversation,
    ToolRequestTurn,
    ToolResultTurn,
    UserTurn,
)
from career_advisor.tools.definitions import ToolCallRequest


def _call(call_id):
    return ToolCallRequest(id=call_id, name="analyze_skill_gap", arguments={})


def test_start_creates_single_user_turn():
    conv = Conversation.start("hello")
    assert conv.turns == [UserTurn("hello")]
    assert conv.pending_call_ids() == []


def test_pending_ids_follow_request_order():
    conv = Conversation.start("q")
    conv.add_tool_requests([_call("a"), _call("b")])
    assert conv.pending_call_ids() == ["a", "b"]

    conv.add_tool_result("b", "analyze_skill_gap", "{}")
    assert conv.pending_call_ids() == ["a"]

    conv.add_tool_result("a", "analyze_skill_gap", "{}")
    assert conv.pending_call_ids() == []
    assert isinstance(conv.turns[1], ToolRequestTurn)
    assert [t.call_id for t in conv.turns[2:] if isinstance(t, ToolResultTurn)] == ["b", "a"]


def test_result_for_unknown_id_is_rejected():
    conv = Conversation.start("q")
    conv.add_tool_requests([_call("a")])
    with pytest.raises(ValueError):
        conv.add_tool_result("zzz", "analyze_skill_gap", "{}")


def test_result_cannot_be_added_twice():
    conv = Conversation.start("q")
    conv.add_tool_requests([_call("a")])
    conv.add_tool_result("a", "analyze_skill_gap", "{}")
    with pytest.raises(ValueError):
        conv.add_tool_result("a", "analyze_skill_gap", "{}")


def test_new_request_needs_previous_results():
    conv = Conversation.start("q")
    conv.add_tool_requests([_call("a")])
    with pytest.raises(ValueError):
        conv.add_tool_requests([_call("b")])


def test_empty_and_duplicate_requests_are_rejected():
    conv = Conversation.start("q")
    with pytest.raises(ValueError):
        conv.add_tool_requests([])
    with pytest.raises(ValueError):
        conv.add_tool_requests([_call("a"), _call("a")])
    assert len(conv) == 1
