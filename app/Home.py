import streamlit as st

st.set_page_config(page_title="Career Advisor", page_icon="🧭", layout="wide")

st.title("🧭 Career Advisor")
st.subheader("A Streamlit App")
st.write(
    """
Ask a career question in plain language. The advisor looks up similar careers,
lets the model call job search, skill gap and timeline tools, and returns a
structured plan: recommended roles, required skills, timeline and next steps.
"""
)

st.info("Go to **Advisor** in the left sidebar to ask a question.")
