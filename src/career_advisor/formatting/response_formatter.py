from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

_HEADING = re.compile(r"^(#{1,3})\s+(.*)$")


class LineKind(str, Enum):
    HEADING = "heading"
    LIST_ITEM = "list_item"
    EMPHASIS = "emphasis"
    BLANK = "blank"
    PARAGRAPH = "paragraph"


@dataclass(frozen=True)
class FormattedLine:
    kind: LineKind
    text: str
    level: Optional[int] = None  # heading level 1-3


def classify_line(line: str) -> FormattedLine:
    if not line.strip():
        return FormattedLine(LineKind.BLANK, "")

    m = _HEADING.match(line)
    if m:
        return FormattedLine(LineKind.HEADING, m.group(2).strip(), level=len(m.group(1)))

    if line.startswith("- "):
        return FormattedLine(LineKind.LIST_ITEM, line[2:].strip())

    stripped = line.strip()
    if len(stripped) > 4 and stripped.startswith("**") and stripped.endswith("**"):
        return FormattedLine(LineKind.EMPHASIS, stripped[2:-2].strip())

    return FormattedLine(LineKind.PARAGRAPH, line.rstrip())


def format_answer(text: str) -> list[FormattedLine]:
    """One record per input line, in order. Nothing is dropped or merged."""
    if text is None:
        return []
    lines = text.split("\n")
    return [classify_line(line.rstrip("\r")) for line in lines]
