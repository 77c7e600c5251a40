from career_advisor.formatting import LineKind, format_answer


ANSWER = """# Career Plan
## Recommended Roles
### Option A
- Data Scientist
**Focus on statistics first**

Spend 10 hours a week on SQL.
#### Too deep
-not a list"""


def test_each_line_classified_in_order():
    lines = format_answer(ANSWER)
    assert [(l.kind, l.level) for l in lines] == [
        (LineKind.HEADING, 1),
        (LineKind.HEADING, 2),
        (LineKind.HEADING, 3),
        (LineKind.LIST_ITEM, None),
        (LineKind.EMPHASIS, None),
        (LineKind.BLANK, None),
        (LineKind.PARAGRAPH, None),
        (LineKind.PARAGRAPH, None),
        (LineKind.PARAGRAPH, None),
    ]
    assert lines[0].text == "Career Plan"
    assert lines[3].text == "Data Scientist"
    assert lines[4].text == "Focus on statistics first"
    assert lines[7].text == "#### Too deep"


def test_no_line_dropped_or_merged():
    text = "a\n\n\nb\r\n- c\n"
    lines = format_answer(text)
    assert len(lines) == len(text.split("\n"))
    assert lines[3].text == "b"


def test_formatting_is_pure():
    assert format_answer(ANSWER) == format_answer(ANSWER)


def test_empty_text_is_one_blank_line():
    assert [l.kind for l in format_answer("")] == [LineKind.BLANK]
