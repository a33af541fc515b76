"""Main entry point for the Streamlit application."""

import streamlit as st

from hoopcamp.auth.guard import RedirectTo, guard_request
from hoopcamp.auth.session import get_current_profile
from hoopcamp.errors import ConfigurationError
from hoopcamp.streamlit_app.navigation import ROUTES, route_for_url_path
from hoopcamp.streamlit_app.pages import (
    attendance_page,
    auth_page,
    camps_page,
    coach_dashboard_page,
    evaluations_page,
    game_stats_page,
    games_page,
    landing_page,
    player_page,
    players_page,
    student_camps_page,
    student_dashboard_page,
    student_profile_page,
    training_page,
)
from hoopcamp.streamlit_app.utils import PAGES_KEY, enter_page, render_navbar

PAGE_MAINS = {
    "/": landing_page.main,
    "/auth": auth_page.main,
    "/coach/dashboard": coach_dashboard_page.main,
    "/coach/camps": camps_page.main,
    "/coach/players": players_page.main,
    "/coach/players/detail": player_page.main,
    "/coach/games": games_page.main,
    "/coach/games/stats": game_stats_page.main,
    "/coach/training": training_page.main,
    "/coach/training/evaluations": evaluations_page.main,
    "/coach/attendance": attendance_page.main,
    "/student/dashboard": student_dashboard_page.main,
    "/student/camps": student_camps_page.main,
    "/student/profile": student_profile_page.main,
}


# Configure the page
st.set_page_config(
    page_title="Hoopcamp",
    layout="wide",
    page_icon="🏀",
    initial_sidebar_state="auto",
)

# Build one page object per route
pages = {
    route.path: st.Page(
        PAGE_MAINS[route.path],
        title=route.title,
        icon=route.icon,
        url_path=route.url_path or None,
        default=route.path == "/",
    )
    for route in ROUTES
}
st.session_state[PAGES_KEY] = pages

pg = st.navigation(list(pages.values()), position="hidden")

# Session guard: a missing configuration stops every request
route = route_for_url_path(pg.url_path)
try:
    decision = guard_request(route.path)
except ConfigurationError as e:
    st.error(f"Server misconfigured: {e}")
    st.stop()

if isinstance(decision, RedirectTo):
    st.switch_page(pages[decision.path])

# Sidebar
render_navbar(get_current_profile())

# Per-visit page data is reloaded on every page change
enter_page(pg.url_path)

# Run the selected page
pg.run()
