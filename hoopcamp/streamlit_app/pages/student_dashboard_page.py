"""Student dashboard page - own averages, attendance, camps and feedback."""

import streamlit as st

from hoopcamp.streamlit_app.logic import dashboard_logic
from hoopcamp.streamlit_app.utils import format_date, go, metric_row, require_profile


def main():
    profile = require_profile("student")

    st.title("My Dashboard")
    st.write(f"Welcome back, {profile.name}!")

    overview = dashboard_logic.load_student_overview(profile.id)
    averages, attendance = overview.averages, overview.attendance

    st.markdown("### 📊 Season Averages")
    metric_row([
        ("PTS", averages.points),
        ("REB", averages.rebounds),
        ("AST", averages.assists),
        ("STL", averages.steals),
        ("BLK", averages.blocks),
    ])
    st.caption(f"{averages.games_played} games played")

    st.markdown("### ✅ Attendance")
    metric_row([
        ("Games", f"{attendance.games_attended}/{attendance.total_games}"),
        ("Training", f"{attendance.training_attended}/{attendance.total_training}"),
    ])

    col1, col2 = st.columns(2)

    with col1:
        st.markdown("### 🏕️ My Camps")
        if not overview.enrollments:
            st.info("You are not enrolled in any camp yet.")
            if st.button("Browse Camps"):
                go("/student/camps")
        for item in overview.enrollments:
            if item.camp is None:
                continue
            with st.container(border=True):
                st.markdown(f"**{item.camp.name}**")
                st.caption(
                    f"{item.camp.location} • "
                    f"{format_date(item.camp.start_date)} - {format_date(item.camp.end_date)}"
                )

    with col2:
        st.markdown("### 📝 Coach Feedback")
        if not overview.evaluations:
            st.info("No evaluations yet.")
        for item in overview.evaluations:
            evaluation, session = item.evaluation, item.session
            with st.container(border=True):
                topic = session.drill_topic if session else "Training Session"
                st.markdown(f"**{topic}** · {evaluation.rating}/10")
                if session:
                    st.caption(format_date(session.session_date))
                if evaluation.strengths:
                    st.write(f"💪 {evaluation.strengths}")
                if evaluation.weaknesses:
                    st.write(f"🎯 {evaluation.weaknesses}")
                if evaluation.coach_notes:
                    st.write(f"📝 {evaluation.coach_notes}")


if __name__ == "__main__":
    main()
