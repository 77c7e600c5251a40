from __future__ import annotations

from typing import Optional

from career_advisor.context.store import CareerStore
from career_advisor.core.config import AdvisorConfig
from career_advisor.core.interfaces import ContextProvider, ModelClient
from career_advisor.orchestrators.advisor_agent import CareerAdvisor
from career_advisor.providers.llm_ollama import OllamaLLMConfig, OllamaModelClient
from career_advisor.providers.llm_openai import OpenAILLMConfig, OpenAIModelClient
from career_advisor.tools import (
    JOB_SEARCH_TOOL_SPEC,
    SKILL_GAP_TOOL_SPEC,
    TIMELINE_TOOL_SPEC,
    AdzunaConfig,
    ToolRegistry,
    make_adzuna_tool,
)


def get_model_client(name: str) -> ModelClient:
    key = (name or "").strip().lower()

    if key in {"openai", "gpt"}:
        cfg = OpenAILLMConfig.from_env()
        return OpenAIModelClient(cfg)

    if key in {"ollama"}:
        cfg = OllamaLLMConfig.from_env()
        return OllamaModelClient(cfg)

    raise ValueError(f"Unknown LLM provider: {name}")


def get_tool_registry(job_source: str = "mock") -> ToolRegistry:
    """Same analysis tools for every variant; only the job search backend changes."""
    key = (job_source or "").strip().lower()

    if key == "mock":
        job_tool = JOB_SEARCH_TOOL_SPEC
    elif key == "adzuna":
        job_tool = make_adzuna_tool(AdzunaConfig.from_env())
    else:
        raise ValueError(f"Unknown job source: {job_source}")

    return ToolRegistry([job_tool, SKILL_GAP_TOOL_SPEC, TIMELINE_TOOL_SPEC])


def get_context_provider(mode: str = "hybrid", careers_path: Optional[str] = None) -> Optional[ContextProvider]:
    key = (mode or "").strip().lower()
    if key == "none":
        return None
    if careers_path:
        return CareerStore.from_json(careers_path, mode=key)
    return CareerStore.default(mode=key)


def build_advisor(provider: str, config: Optional[AdvisorConfig] = None) -> CareerAdvisor:
    cfg = config or AdvisorConfig.from_env()
    return CareerAdvisor(
        model=get_model_client(provider),
        registry=get_tool_registry(cfg.job_source),
        context_provider=get_context_provider(cfg.context_mode, cfg.careers_path),
        config=cfg,
    )
