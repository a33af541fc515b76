"""Player page UI - one student's averages, game log and evaluations."""

import streamlit as st

from hoopcamp.reports.pdf_report import generate_player_report_pdf, report_filename
from hoopcamp.streamlit_app.logic import players_logic
from hoopcamp.streamlit_app.utils import (
    back_button,
    format_date,
    go,
    metric_row,
    require_profile,
    route_param,
)


def main():
    """Player detail page for coaches."""
    require_profile("coach")

    student_id = route_param("id")
    if not student_id:
        st.error("No player specified in URL.")
        return

    detail = players_logic.load_player_detail(student_id)
    if detail is None:
        go("/coach/players")

    student, averages = detail.student, detail.averages

    back_button("/coach/players", "Back to Players")
    title_col, export_col = st.columns([4, 1])
    with title_col:
        st.title(student.name)
        st.caption(student.email or "")
    with export_col:
        st.download_button(
            "Export PDF",
            data=generate_player_report_pdf(
                student, averages, detail.game_stats, detail.evaluations
            ),
            file_name=report_filename(student.name),
            mime="application/pdf",
        )

    metric_row([
        ("Avg Points", averages.points),
        ("Avg Rebounds", averages.rebounds),
        ("Avg Assists", averages.assists),
        ("Avg Steals", averages.steals),
        ("Avg Blocks", averages.blocks),
    ])
    st.caption(f"{averages.games_played} games played")

    camps_col, evals_col = st.columns(2)

    with camps_col:
        st.subheader("Enrolled Camps")
        if not detail.enrollments:
            st.info("No camps enrolled.")
        for item in detail.enrollments:
            if item.camp is None:
                continue
            with st.container(border=True):
                st.markdown(f"**{item.camp.name}**")
                st.caption(
                    f"{item.camp.location} • "
                    f"{format_date(item.camp.start_date)} - {format_date(item.camp.end_date)}"
                )

    with evals_col:
        st.subheader("Evaluations")
        if not detail.evaluations:
            st.info("No evaluations found.")
        for item in detail.evaluations:
            evaluation, session = item.evaluation, item.session
            with st.container(border=True):
                topic = session.drill_topic if session else "Training Session"
                date = format_date(session.session_date) if session else "Date N/A"
                st.markdown(f"**{topic}** · {evaluation.rating}/10")
                st.caption(date)
                if evaluation.strengths:
                    st.write(f"💪 {evaluation.strengths}")
                if evaluation.weaknesses:
                    st.write(f"🎯 {evaluation.weaknesses}")
                if evaluation.coach_notes:
                    st.write(f"📝 {evaluation.coach_notes}")

    if detail.game_stats:
        st.subheader("Game Log")
        st.dataframe(players_logic.game_log_frame(detail.game_stats), hide_index=True)


if __name__ == "__main__":
    main()
