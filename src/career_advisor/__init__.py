"""Tool-augmented career advice agent."""

from career_advisor.orchestrators.advisor_agent import AdviceResult, AdviceStatus, CareerAdvisor

__all__ = ["AdviceResult", "AdviceStatus", "CareerAdvisor"]
