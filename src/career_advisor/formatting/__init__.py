from career_advisor.formatting.response_formatter import FormattedLine, LineKind, format_answer

__all__ = ["FormattedLine", "LineKind", "format_answer"]
