from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_MAX_ROUNDS = 10


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


@dataclass(frozen=True)
class AdvisorConfig:
    max_rounds: int = DEFAULT_MAX_ROUNDS
    tool_timeout_s: float = 15.0
    max_parallel_tools: int = 4
    job_source: str = "mock"  # mock | adzuna
    context_mode: str = "hybrid"  # hybrid | keyword | none
    careers_path: Optional[str] = None

    def __post_init__(self) -> None:
        if self.max_rounds < 1:
            raise ValueError("max_rounds must be at least 1.")
        if self.max_parallel_tools < 1:
            raise ValueError("max_parallel_tools must be at least 1.")
        if self.tool_timeout_s <= 0:
            raise ValueError("tool_timeout_s must be positive.")

    @staticmethod
    def from_env() -> "AdvisorConfig":
        return AdvisorConfig(
            max_rounds=_env_int("ADVISOR_MAX_ROUNDS", DEFAULT_MAX_ROUNDS),
            tool_timeout_s=_env_float("ADVISOR_TOOL_TIMEOUT_S", 15.0),
            max_parallel_tools=_env_int("ADVISOR_MAX_PARALLEL_TOOLS", 4),
            job_source=os.getenv("ADVISOR_JOB_SOURCE", "mock").strip().lower() or "mock",
            context_mode=os.getenv("ADVISOR_CONTEXT_MODE", "hybrid").strip().lower() or "hybrid",
            careers_path=os.getenv("CAREERS_PATH", "").strip() or None,
        )
