"""Auth page UI - sign in and sign up."""

import streamlit as st

from hoopcamp.auth.session import ROLES, get_current_profile, sign_in, sign_up
from hoopcamp.errors import AuthenticationError
from hoopcamp.streamlit_app.navigation import dashboard_path
from hoopcamp.streamlit_app.utils import go

MIN_PASSWORD_LENGTH = 6


def _toggle_mode():
    st.session_state["auth_sign_up"] = not st.session_state.get("auth_sign_up", False)
    st.session_state.pop("auth_message", None)


def _render_sign_in():
    with st.form("sign_in_form"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign In", type="primary", use_container_width=True)

    if not submitted:
        return
    try:
        profile = sign_in(email.strip(), password)
    except AuthenticationError as e:
        st.error(str(e))
        return
    path = dashboard_path(profile.role) if profile else None
    if path is None:
        st.error("This account has no player or coach profile.")
        return
    go(path)


def _render_sign_up():
    with st.form("sign_up_form"):
        name = st.text_input("Full Name")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        role = st.radio(
            "I am a",
            options=ROLES,
            format_func=str.capitalize,
            horizontal=True,
        )
        submitted = st.form_submit_button("Sign Up", type="primary", use_container_width=True)

    if not submitted:
        return
    if not name.strip() or not email.strip():
        st.error("Name and email are required.")
        return
    if len(password) < MIN_PASSWORD_LENGTH:
        st.error(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
        return
    try:
        result = sign_up(email.strip(), password, name.strip(), role)
    except AuthenticationError as e:
        st.error(str(e))
        return
    if result.needs_confirmation:
        st.session_state["auth_sign_up"] = False
        st.session_state["auth_message"] = "Check your email to confirm your account, then sign in."
        st.rerun()
    go(dashboard_path(result.role))


def main():
    """Sign in / sign up page."""
    profile = get_current_profile()
    # Only users with a known role are forwarded; anyone else sees the form
    if profile is not None and (path := dashboard_path(profile.role)):
        go(path)

    signing_up = st.session_state.get("auth_sign_up", False)
    st.title("Create an account" if signing_up else "Welcome back")

    if message := st.session_state.get("auth_message"):
        st.success(message)

    if signing_up:
        _render_sign_up()
    else:
        _render_sign_in()

    st.button(
        "Already have an account? Sign in" if signing_up else "Don't have an account? Sign up",
        type="tertiary",
        on_click=_toggle_mode,
    )


if __name__ == "__main__":
    main()
