from __future__ import annotations

import streamlit as st
from dotenv import load_dotenv

from career_advisor.context.prompt_builder import PriorTurn
from career_advisor.core.config import AdvisorConfig
from career_advisor.core.errors import TransportError
from career_advisor.core.factory import build_advisor
from career_advisor.core.logging_utils import configure_logging
from career_advisor.orchestrators.advisor_agent import AdviceStatus, CareerAdvisor
from ui.common import render_answer, render_tool_traces

# Load .env once per Streamlit server start
load_dotenv()
configure_logging()

st.set_page_config(page_title="Advisor | Career Advisor", page_icon="🧭", layout="wide")

st.title("🧭 Ask the Career Advisor")
st.caption("Describe your background and where you want to go. Follow-up questions keep the earlier answers in view.")

if "history" not in st.session_state:
    st.session_state["history"] = []  # list[dict], oldest first


@st.cache_resource
def get_advisor(provider: str, job_source: str, context_mode: str, max_rounds: int) -> CareerAdvisor:
    base = AdvisorConfig.from_env()
    cfg = AdvisorConfig(
        max_rounds=max_rounds,
        tool_timeout_s=base.tool_timeout_s,
        max_parallel_tools=base.max_parallel_tools,
        job_source=job_source,
        context_mode=context_mode,
        careers_path=base.careers_path,
    )
    return build_advisor(provider, cfg)


with st.sidebar:
    st.header("Settings")
    provider_label = st.selectbox("LLM Provider", ["OpenAI", "Ollama"], index=0)
    job_label = st.selectbox("Job search", ["Sample jobs", "Adzuna (live)"], index=0)
    context_label = st.selectbox("Career lookup", ["Hybrid", "Keyword", "Off"], index=0)
    max_rounds = st.slider("Max tool rounds", min_value=1, max_value=10, value=10)
    st.divider()
    if st.button("Clear conversation", use_container_width=True):
        st.session_state["history"] = []
        st.rerun()

provider = provider_label.lower()
job_source = "adzuna" if job_label.startswith("Adzuna") else "mock"
context_mode = {"Hybrid": "hybrid", "Keyword": "keyword", "Off": "none"}[context_label]

for item in st.session_state["history"]:
    with st.chat_message("user"):
        st.write(item["question"])
    with st.chat_message("assistant"):
        render_answer(item["answer"])

question = st.chat_input("e.g. I know Python and want to become a Data Scientist")

if question:
    with st.chat_message("user"):
        st.write(question)

    prior = [PriorTurn(question=h["question"], answer=h["answer"]) for h in st.session_state["history"]]

    with st.chat_message("assistant"):
        try:
            advisor = get_advisor(provider, job_source, context_mode, max_rounds)
            with st.spinner("Analyzing career opportunities..."):
                result = advisor.get_advice(question, prior_turns=prior)
        except TransportError as e:
            st.error(f"Could not reach the language model: {e}")
            st.stop()
        except Exception as e:
            st.error(f"Setup error: {type(e).__name__}: {e}")
            st.stop()

        if result.status is AdviceStatus.EXHAUSTED:
            st.warning(
                f"The advisor could not finish within {result.rounds} rounds. "
                "Try a more specific question."
            )
        else:
            render_answer(result.answer_text or "")
            st.session_state["history"].append(
                {"question": question, "answer": result.answer_text or ""}
            )

        if result.context_titles:
            st.caption("Matched careers: " + ", ".join(result.context_titles))

        with st.expander(f"Tool calls ({len(result.tool_traces)})"):
            render_tool_traces(result.tool_traces)

        cols = st.columns(4)
        cols[0].metric("Rounds", result.rounds)
        cols[1].metric("LLM (ms)", f"{result.metrics.get('llm_ms', 0.0):.0f}")
        cols[2].metric("Tools (ms)", f"{result.metrics.get('tools_ms', 0.0):.0f}")
        cols[3].metric("Total (ms)", f"{result.metrics.get('total_ms', 0.0):.0f}")
