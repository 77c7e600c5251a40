from __future__ import annotations

import json

import streamlit as st

from career_advisor.formatting import FormattedLine, LineKind, format_answer
from career_advisor.tools.definitions import ToolTrace

_HEADING_TAGS = {1: "###", 2: "####", 3: "#####"}


def render_formatted_line(line: FormattedLine) -> None:
    if line.kind is LineKind.HEADING:
        st.markdown(f"{_HEADING_TAGS.get(line.level or 1, '#####')} {line.text}")
    elif line.kind is LineKind.LIST_ITEM:
        st.markdown(f"- {line.text}")
    elif line.kind is LineKind.EMPHASIS:
        st.markdown(f"**{line.text}**")
    elif line.kind is LineKind.BLANK:
        st.write("")
    else:
        st.markdown(line.text)


def render_answer(text: str) -> None:
    for line in format_answer(text):
        render_formatted_line(line)


def render_tool_traces(traces: list[ToolTrace]) -> None:
    if not traces:
        st.caption("The advisor answered without calling any tools.")
        return

    for trace in traces:
        title = f"Round {trace.round}: {trace.tool_name} ({trace.elapsed_ms:.0f} ms)"
        with st.expander(title):
            st.markdown("**Arguments**")
            st.code(json.dumps(trace.arguments, indent=2), language="json")
            st.markdown("**Result**")
            try:
                st.json(json.loads(trace.result))
            except ValueError:
                st.code(trace.result)
