"""Evaluations page UI - rate each player after a training session."""

import streamlit as st

from hoopcamp.streamlit_app.logic import evaluations_logic
from hoopcamp.streamlit_app.logic.enrollments_logic import load_enrolled_students
from hoopcamp.streamlit_app.utils import (
    back_button,
    cache_key,
    format_date,
    go,
    require_profile,
    route_param,
)


def main():
    require_profile("coach")

    session_id = route_param("session")
    if not session_id:
        st.error("No training session specified in URL.")
        return

    item = evaluations_logic.load_session(session_id)
    if item is None:
        go("/coach/training")
    session, camp = item.session, item.camp

    key = cache_key("evaluations", session_id)
    if key not in st.session_state:
        st.session_state[key] = evaluations_logic.load_evaluations_map(session_id)
    students = load_enrolled_students(session.camp_id)

    back_button("/coach/training", "Back to Training")
    st.title("Player Evaluations")
    st.subheader(session.drill_topic)
    st.caption(f"{camp.name if camp else 'Unknown camp'} • {format_date(session.session_date)}")

    if not students:
        st.info("No students are enrolled in this camp yet.")
        return

    for student in students:
        evaluation = st.session_state[key].get(student.id)
        with st.form(f"evaluation_{student.id}"):
            title_col, status_col = st.columns([4, 1])
            title_col.markdown(f"### {student.name}")
            if evaluation:
                status_col.success(f"{evaluation.rating}/10")
            rating = st.slider(
                "Rating",
                min_value=evaluations_logic.MIN_RATING,
                max_value=evaluations_logic.MAX_RATING,
                value=evaluation.rating if evaluation else 5,
            )
            col1, col2 = st.columns(2)
            strengths = col1.text_area("Strengths", value=evaluation.strengths or "" if evaluation else "")
            weaknesses = col2.text_area("Weaknesses", value=evaluation.weaknesses or "" if evaluation else "")
            coach_notes = st.text_area("Coach Notes", value=evaluation.coach_notes or "" if evaluation else "")
            submitted = st.form_submit_button("Update Evaluation" if evaluation else "Save Evaluation")

        if submitted:
            payload = evaluations_logic.build_evaluation_payload(rating, strengths, weaknesses, coach_notes)
            updated = evaluations_logic.save_evaluation(st.session_state[key], session_id, student.id, payload)
            if updated is st.session_state[key]:
                st.session_state[key] = evaluations_logic.load_evaluations_map(session_id)
                st.error(f"Could not save the evaluation for {student.name}. Evaluations have been reloaded.")
            else:
                st.session_state[key] = updated
                st.rerun()


if __name__ == "__main__":
    main()
