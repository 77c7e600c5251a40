from career_advisor.context.records import ContextRecord
from career_advisor.context.store import CareerStore
from career_advisor.context.prompt_builder import PriorTurn, build_prompt

__all__ = ["ContextRecord", "CareerStore", "PriorTurn", "build_prompt"]
