"""Coach training page UI - plan training sessions."""

import datetime

import streamlit as st

from hoopcamp.database.records import TrainingSession
from hoopcamp.streamlit_app.logic import games_logic, training_logic
from hoopcamp.streamlit_app.utils import format_date, open_page, require_profile

FORM_KEYS = {
    "session_camp": None,
    "session_date": None,
    "session_topic": "",
    "session_notes": "",
}


def _reset_form():
    for key, default in FORM_KEYS.items():
        st.session_state[key] = default
    st.session_state["editing_session"] = None
    st.session_state["show_session_form"] = False


def _start_edit(session: TrainingSession):
    st.session_state["session_camp"] = session.camp_id
    st.session_state["session_date"] = datetime.date.fromisoformat(session.session_date[:10])
    st.session_state["session_topic"] = session.drill_topic
    st.session_state["session_notes"] = session.notes or ""
    st.session_state["editing_session"] = session.id
    st.session_state["show_session_form"] = True


def _submit():
    state = st.session_state
    if not state["session_camp"] or not state["session_date"] or not state["session_topic"]:
        state["session_error"] = "Camp, date and drill topic are required."
        return
    payload = training_logic.build_session_payload(
        camp_id=state["session_camp"],
        session_date=state["session_date"].isoformat(),
        drill_topic=state["session_topic"],
        notes=state["session_notes"],
    )
    if training_logic.save_session(payload, state.get("editing_session")):
        _reset_form()
        state["session_error"] = None
    else:
        state["session_error"] = "Could not save the training session."


def main():
    require_profile("coach")
    for key, default in FORM_KEYS.items():
        st.session_state.setdefault(key, default)
    st.session_state.setdefault("editing_session", None)
    st.session_state.setdefault("show_session_form", False)

    camps = games_logic.load_camp_options()
    camp_names = {camp.id: camp.name for camp in camps}

    title_col, button_col = st.columns([4, 1])
    with title_col:
        st.title("Training")
        st.caption("Plan sessions and evaluate players")
    with button_col:
        if not st.session_state["show_session_form"]:
            if st.button("+ New Session", disabled=not camps):
                st.session_state["show_session_form"] = True
                st.rerun()

    if st.session_state.get("session_error"):
        st.error(st.session_state["session_error"])

    if st.session_state["show_session_form"]:
        editing = st.session_state["editing_session"] is not None
        with st.form("session_form"):
            st.subheader("Edit Session" if editing else "New Training Session")
            st.selectbox(
                "Camp",
                options=list(camp_names),
                format_func=lambda camp_id: camp_names.get(camp_id, "Select a camp"),
                index=None,
                placeholder="Select a camp",
                key="session_camp",
            )
            st.date_input("Session Date", key="session_date")
            st.text_input("Drill Topic", key="session_topic")
            st.text_area("Notes", key="session_notes")
            submit_col, cancel_col = st.columns(2)
            submit_col.form_submit_button(
                "Update Session" if editing else "Create Session", on_click=_submit
            )
            cancel_col.form_submit_button("Cancel", on_click=_reset_form)

    sessions = training_logic.load_sessions()
    if not sessions:
        st.info("No training sessions yet.")
        return

    for item in sessions:
        session, camp = item.session, item.camp
        with st.container(border=True):
            info_col, actions_col = st.columns([4, 1])
            with info_col:
                st.markdown(f"### {session.drill_topic}")
                st.write(f"🏕️ {camp.name if camp else 'Unknown camp'} • 📅 {format_date(session.session_date)}")
                if session.notes:
                    st.caption(session.notes)
                if st.button("Evaluate Players →", key=f"evaluate_{session.id}", type="tertiary"):
                    open_page("/coach/training/evaluations", session=session.id)
            with actions_col:
                st.button("Edit", key=f"edit_{session.id}", on_click=_start_edit, args=(session,))
                if st.session_state.get("confirm_delete_session") == session.id:
                    st.warning("Delete this session and its evaluations?")
                    if st.button("Confirm", key=f"confirm_{session.id}", type="primary"):
                        st.session_state["confirm_delete_session"] = None
                        if training_logic.delete_session(session.id):
                            st.rerun()
                        st.error("Could not delete the session.")
                elif st.button("Delete", key=f"delete_{session.id}"):
                    st.session_state["confirm_delete_session"] = session.id
                    st.rerun()


if __name__ == "__main__":
    main()
