from __future__ import annotations

from dotenv import load_dotenv

from career_advisor.core.factory import build_advisor
from career_advisor.core.logging_utils import configure_logging


def main() -> None:
    load_dotenv()
    configure_logging(verbose=1)
    advisor = build_advisor("ollama")
    result = advisor.get_advice("I know Python and SQL. What do I need to become an ML Engineer?")
    print(result.status.value, result.rounds)
    print(result.answer_text or "(no final answer)")


if __name__ == "__main__":
    main()
