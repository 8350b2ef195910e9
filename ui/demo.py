import sys
from pathlib import Path

import streamlit as st

# Ensure project root is on sys.path so `src` package imports work when run via streamlit
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from schemas.query import Profile
from schemas.schedule import ScheduleRequest
from src.bridge.email_relay import EmailRelay
from src.config.settings import get_settings
from src.inference.client import ClientState, InferenceClient


st.set_page_config(page_title="The Demo", page_icon="🗳️", layout="centered")
st.title("The Demo")
st.caption("Ask a question and pick the segment the model should answer as.")

settings = get_settings()

if "client" not in st.session_state:
    st.session_state.client = InferenceClient.from_settings(settings)
client: InferenceClient = st.session_state.client


with st.form("ask_form"):
    question = st.text_area("Question", placeholder="¿Qué opina de ...?")
    profile = st.selectbox(
        "Profile",
        options=list(Profile),
        index=None,
        format_func=lambda p: p.label,
        placeholder="Select a profile",
    )
    submitted = st.form_submit_button("Ask")

# submit blocks this run, so the spinner is the pending state
if submitted:
    with st.spinner("Waiting for the model..."):
        client.submit(question, profile)

snap = client.snapshot()
if snap.state is ClientState.HAS_RESULT and snap.result:
    st.subheader("Answer")
    st.markdown(snap.result.extracted_answer)
    with st.expander("Full transcript"):
        st.text(snap.result.raw_text)
elif snap.state is ClientState.HAS_ERROR and snap.error:
    st.error(snap.error.message)

if snap.state is not ClientState.IDLE:
    if st.button("Reset"):
        client.reset()
        st.rerun()


st.divider()
st.subheader("Schedule a conversation")
if not settings.email_relay_configured:
    st.info("Scheduling is not available right now.")
else:
    with st.form("schedule_form", clear_on_submit=True):
        name = st.text_input("Name")
        email = st.text_input("Email")
        preferred_date = st.text_input("Preferred date (optional)")
        message = st.text_area("Message")
        sent = st.form_submit_button("Send")

    if sent:
        if not (name.strip() and email.strip() and message.strip()):
            st.warning("Name, email and message are required.")
        else:
            relay = EmailRelay.from_settings(settings)
            res = relay.send(
                ScheduleRequest(
                    name=name.strip(),
                    email=email.strip(),
                    message=message.strip(),
                    preferred_date=preferred_date.strip() or None,
                )
            )
            if res.ok:
                st.success(res.message)
            else:
                st.error(res.message)
