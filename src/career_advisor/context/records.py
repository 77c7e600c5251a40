from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class ContextRecord:
    """A career entry used to ground the model's answer."""

    title: str
    description: str = ""
    required_skills: tuple[str, ...] = ()
    timeline: str = ""
    salary_range: str = ""
    job_growth: str = ""
    common_transitions: tuple[str, ...] = field(default=(), compare=False)
    score: Optional[float] = field(default=None, compare=False)

    def with_score(self, score: float) -> "ContextRecord":
        return replace(self, score=score)

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "ContextRecord":
        """Build from a career document; accepts camelCase or snake_case keys."""

        def pick(*keys: str, default: Any = None) -> Any:
            for k in keys:
                if data.get(k) is not None:
                    return data[k]
            return default

        title = (pick("title", default="") or "").strip()
        if not title:
            raise ValueError("Career record is missing a title.")

        return ContextRecord(
            title=title,
            description=pick("description", default=""),
            required_skills=tuple(pick("requiredSkills", "required_skills", default=[])),
            timeline=pick("timeline", default=""),
            salary_range=pick("salaryRange", "salary_range", default=""),
            job_growth=pick("jobGrowth", "job_growth", default=""),
            common_transitions=tuple(pick("commonTransitions", "common_transitions", default=[])),
        )
