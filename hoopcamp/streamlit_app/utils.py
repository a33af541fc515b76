"""Utility functions for Streamlit pages."""

import datetime

import streamlit as st

from hoopcamp.auth.session import get_current_user, load_profile, sign_out
from hoopcamp.database.records import Profile, Role
from hoopcamp.streamlit_app.navigation import menu_entries

PAGES_KEY = "pages"
PARAMS_KEY = "route_params"
CURRENT_PAGE_KEY = "current_page"
CACHE_PREFIX = "cache_"


def go(path: str) -> None:
    """Switch to the page registered for ``path`` (stops the current run)."""
    pages = st.session_state.get(PAGES_KEY, {})
    st.switch_page(pages[path])


def require_profile(role: Role | None = None) -> Profile:
    """Return the signed-in user's profile or redirect to the auth page.

    Users whose role does not match ``role`` are sent to the auth page too,
    without a message.
    """
    user = get_current_user()
    if user is None:
        go("/auth")
    profile = load_profile(user.id)
    if profile is None or (role is not None and profile.role != role):
        go("/auth")
    return profile


def render_navbar(profile: Profile | None) -> None:
    """Sidebar navigation for the signed-in user's role."""
    entries = menu_entries(profile)
    if not entries:
        return

    pages = st.session_state.get(PAGES_KEY, {})
    for route in entries:
        st.sidebar.page_link(pages[route.path], label=route.menu_label)

    st.sidebar.markdown("---")
    st.sidebar.markdown(f"**{profile.name}**  \n{profile.role.upper()}")
    if st.sidebar.button("Logout", key="logout"):
        sign_out()
        clear_page_cache()
        go("/")


def format_date(value: str | None) -> str:
    """Render an ISO date (or timestamp) as e.g. 'Jun 03, 2025'."""
    if not value:
        return "N/A"
    try:
        return datetime.date.fromisoformat(value[:10]).strftime("%b %d, %Y")
    except ValueError:
        return value


def open_page(path: str, **params: str) -> None:
    """Switch to a detail page, handing it ``params`` through session state.

    Plain links would start a new browser session and drop the sign-in.
    """
    st.session_state[PARAMS_KEY] = {"path": path, **params}
    go(path)


def route_param(name: str) -> str | None:
    """Read a page parameter from the URL, or from the last ``open_page`` call."""
    value = st.query_params.get(name)
    if value:
        return value
    params = st.session_state.get(PARAMS_KEY, {})
    value = params.get(name)
    if value:
        # Keep the page bookmarkable
        st.query_params[name] = value
    return value


def back_button(path: str, label: str) -> None:
    if st.button(f"← {label}", type="tertiary"):
        go(path)


def metric_row(metrics: list[tuple[str, object]]) -> None:
    """Show a row of st.metric cards side by side."""
    # Prevent metrics from stacking on mobile
    st.markdown("""
        <style>
        [data-testid="stHorizontalBlock"]:has([data-testid="stMetric"]) .stColumn {
            min-width: 0 !important;
        }
        </style>
    """, unsafe_allow_html=True)
    for col, (label, value) in zip(st.columns(len(metrics)), metrics):
        col.metric(label, value)


def cache_key(*parts: str) -> str:
    """Session-state key for data a page loads once per visit."""
    return CACHE_PREFIX + "_".join(parts)


def clear_page_cache() -> None:
    for key in [k for k in st.session_state if str(k).startswith(CACHE_PREFIX)]:
        del st.session_state[key]


def enter_page(url_path: str) -> None:
    """Drop per-visit page data whenever the user lands on a different page."""
    if st.session_state.get(CURRENT_PAGE_KEY) != url_path:
        clear_page_cache()
        st.session_state[CURRENT_PAGE_KEY] = url_path
