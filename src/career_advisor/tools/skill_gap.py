from __future__ import annotations

from typing import Any

from career_advisor.tools.definitions import ToolDescriptor, ToolParam, ToolSpec


def _overlaps(a: str, b: str) -> bool:
    a, b = a.strip().lower(), b.strip().lower()
    if not a or not b:
        return False
    return a in b or b in a


def difficulty_for(gap_count: int) -> str:
    if gap_count <= 2:
        return "Easy - Transition"
    if gap_count <= 4:
        return "Moderate - Achievable"
    if gap_count <= 6:
        return "Challenging - Doable"
    return "Very Challenging - Long-term"


def analyze_skill_gap(current_skills: list[str], target_skills: list[str]) -> dict[str, Any]:
    """Compare current skills with a target role; matching is case-insensitive substring either way."""
    transferable = [s for s in current_skills if any(_overlaps(s, t) for t in target_skills)]
    gaps = [t for t in target_skills if not any(_overlaps(t, c) for c in current_skills)]

    return {
        "current_skills": list(current_skills),
        "target_skills": list(target_skills),
        "transferable_skills": transferable,
        "skill_gaps": gaps,
        "gap_count": len(gaps),
        "difficulty_level": difficulty_for(len(gaps)),
        "summary": (
            f"You have {len(transferable)} transferable skills "
            f"and need to learn {len(gaps)} new skills."
        ),
    }


SKILL_GAP_TOOL_SPEC = ToolSpec(
    descriptor=ToolDescriptor(
        name="analyze_skill_gap",
        description="Analyze the gap between your current skills and the skills a target role requires.",
        params={
            "current_skills": ToolParam(
                type="array", items="string", required=True,
                description="Skills the person already has",
            ),
            "target_skills": ToolParam(
                type="array", items="string", required=True,
                description="Skills required for the target role",
            ),
        },
    ),
    fn=analyze_skill_gap,
)
