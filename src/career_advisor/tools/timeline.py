from __future__ import annotations

import math
from typing import Any

from career_advisor.tools.definitions import ToolDescriptor, ToolParam, ToolSpec

DEFAULT_SKILL_HOURS = 100
DEFAULT_HOURS_PER_WEEK = 10

# Rough self-study hours to job-ready level.
SKILL_HOURS: dict[str, int] = {
    "python": 100,
    "machine learning": 150,
    "deep learning": 200,
    "statistics": 80,
    "sql": 40,
    "tensorflow": 120,
    "pytorch": 120,
    "llms": 100,
    "transformers": 100,
    "system design": 150,
    "mlops": 100,
    "cloud": 80,
    "docker": 60,
    "kubernetes": 120,
    "data visualization": 60,
    "pandas": 80,
    "numpy": 80,
    "scikit-learn": 90,
    "spacy": 80,
    "flask": 60,
    "django": 100,
}


def feasibility_for(months: int) -> str:
    if months <= 3:
        return "Very Achievable"
    if months <= 6:
        return "Achievable"
    if months <= 12:
        return "Challenging but Doable"
    return "Long-term Commitment"


def estimate_learning_timeline(
    skills: list[str], hours_per_week: float = DEFAULT_HOURS_PER_WEEK
) -> dict[str, Any]:
    if hours_per_week <= 0:
        raise ValueError("hours_per_week must be positive")

    breakdown = []
    for skill in skills:
        hours = SKILL_HOURS.get(skill.strip().lower(), DEFAULT_SKILL_HOURS)
        breakdown.append({
            "skill": skill,
            "hours_needed": hours,
            "weeks_needed": math.ceil(hours / hours_per_week),
        })

    total_hours = sum(e["hours_needed"] for e in breakdown)
    total_weeks = math.ceil(total_hours / hours_per_week)
    months = math.ceil(total_weeks / 4)

    return {
        "hours_per_week": hours_per_week,
        "skills_breakdown": breakdown,
        "total_hours": total_hours,
        "total_weeks": total_weeks,
        "total_months": months,
        "realistic_timeline": feasibility_for(months),
    }


TIMELINE_TOOL_SPEC = ToolSpec(
    descriptor=ToolDescriptor(
        name="estimate_learning_timeline",
        description="Estimate a realistic timeline to learn a list of skills.",
        params={
            "skills": ToolParam(
                type="array", items="string", required=True,
                description="Skills that need to be learned",
            ),
            "hours_per_week": ToolParam(
                type="number",
                description=f"Hours per week available for study. Default: {DEFAULT_HOURS_PER_WEEK}",
            ),
        },
    ),
    fn=estimate_learning_timeline,
)
