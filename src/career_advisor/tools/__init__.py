from career_advisor.tools.definitions import (
    ModelResponse,
    ToolCallRequest,
    ToolDescriptor,
    ToolParam,
    ToolSpec,
    ToolTrace,
)
from career_advisor.tools.job_board import JOB_SEARCH_TOOL_SPEC
from career_advisor.tools.skill_gap import SKILL_GAP_TOOL_SPEC
from career_advisor.tools.timeline import TIMELINE_TOOL_SPEC
from career_advisor.tools.adzuna import AdzunaConfig, make_adzuna_tool
from career_advisor.tools.registry import ToolRegistry

__all__ = [
    "ModelResponse",
    "ToolCallRequest",
    "ToolDescriptor",
    "ToolParam",
    "ToolSpec",
    "ToolTrace",
    "ToolRegistry",
    "JOB_SEARCH_TOOL_SPEC",
    "SKILL_GAP_TOOL_SPEC",
    "TIMELINE_TOOL_SPEC",
    "AdzunaConfig",
    "make_adzuna_tool",
]
