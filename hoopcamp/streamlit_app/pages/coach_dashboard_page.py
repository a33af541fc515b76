"""Coach dashboard page of the Streamlit application."""

import streamlit as st

from hoopcamp.streamlit_app.logic import dashboard_logic
from hoopcamp.streamlit_app.utils import format_date, go, metric_row, require_profile


def main():
    """Coach dashboard with counts and the most recent camps."""
    profile = require_profile("coach")

    st.title("Coach Dashboard")
    st.write(f"Welcome back, {profile.name}!")

    overview = dashboard_logic.load_coach_overview()
    metric_row([
        ("Total Camps", overview.camps_count),
        ("Total Players", overview.players_count),
        ("Games", overview.games_count),
        ("Training Sessions", overview.sessions_count),
    ])

    col1, col2 = st.columns([2, 1])

    # Left column: recent camps
    with col1:
        st.markdown("### 🏕️ Recent Camps")
        if not overview.recent_camps:
            st.info("No camps created yet.")
        for camp in overview.recent_camps:
            with st.container(border=True):
                st.markdown(f"**{camp.name}**")
                st.caption(
                    f"{camp.location} • {format_date(camp.start_date)} - {format_date(camp.end_date)}"
                )

    # Right column: shortcuts
    with col2:
        st.markdown("### ⚡ Quick Actions")
        if st.button("Manage Camps", use_container_width=True):
            go("/coach/camps")
        if st.button("Record Game Stats", use_container_width=True):
            go("/coach/games")
        if st.button("Take Attendance", use_container_width=True):
            go("/coach/attendance")


if __name__ == "__main__":
    main()
