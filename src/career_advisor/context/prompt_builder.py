from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from career_advisor.context.records import ContextRecord

INSTRUCTIONS = """Provide personalized career advice. Include:
1. Recommended roles
2. Required skills
3. Timeline
4. Next steps"""


@dataclass(frozen=True)
class PriorTurn:
    """An earlier question and answer, replayed for follow-up questions."""

    question: str
    answer: str


def _or_na(value: str) -> str:
    return value if value else "N/A"


def format_context(records: Sequence[ContextRecord]) -> str:
    lines = [
        "CAREER DATABASE CONTEXT:",
        f"({len(records)} matching entries)",
        "",
    ]
    for idx, r in enumerate(records, start=1):
        lines.append(f"[{idx}] {r.title}")
        lines.append(f"    Description: {_or_na(r.description)}")
        lines.append(f"    Required Skills: {_or_na(', '.join(r.required_skills))}")
        lines.append(f"    Learning Timeline: {_or_na(r.timeline)}")
        lines.append(f"    Salary Range: {_or_na(r.salary_range)}")
        lines.append(f"    Job Growth: {_or_na(r.job_growth)}")
        lines.append("")
    return "\n".join(lines).rstrip("\n")


def format_history(prior_turns: Sequence[PriorTurn]) -> str:
    lines = ["PREVIOUS CONVERSATION:"]
    for turn in prior_turns:
        lines.append(f"User: {turn.question}")
        lines.append(f"Advisor: {turn.answer}")
    return "\n".join(lines)


def build_prompt(
    question: str,
    records: Sequence[ContextRecord] = (),
    prior_turns: Sequence[PriorTurn] = (),
) -> str:
    """Assemble the first user turn. Empty context and history blocks are left out."""
    parts = ["You are a career advisor."]
    if prior_turns:
        parts.append(format_history(prior_turns))
    if records:
        parts.append("Use this career database information to answer:\n\n" + format_context(records))
    parts.append(f'User Question: "{question.strip()}"')
    parts.append(INSTRUCTIONS)
    return "\n\n".join(parts)
