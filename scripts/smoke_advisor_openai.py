from __future__ import annotations

from dotenv import load_dotenv

from career_advisor.core.factory import build_advisor
from career_advisor.core.logging_utils import configure_logging
from career_advisor.formatting import format_answer


def main() -> None:
    load_dotenv()  # loads .env from repo root (current working dir)
    configure_logging()

    advisor = build_advisor("openai")
    result = advisor.get_advice(
        "I am a JavaScript/React developer with 4 years experience. I want to move into "
        "Data Science. How difficult is this transition? Can I do it in 8 months studying "
        "15 hours per week?"
    )

    print("Status:", result.status.value, f"after {result.rounds} round(s)")
    for trace in result.tool_traces:
        print(f"  tool: {trace.tool_name} {trace.arguments} ({trace.elapsed_ms:.0f} ms)")
    if result.answer_text:
        print()
        print(result.answer_text)
        print()
        print("Line kinds:", [line.kind.value for line in format_answer(result.answer_text)][:10])
    print("Metrics:", result.metrics)


if __name__ == "__main__":
    main()
