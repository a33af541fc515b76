"""Browse Camps page - the camp catalog with self-enrollment."""

import streamlit as st

from hoopcamp.streamlit_app.logic import enrollments_logic
from hoopcamp.streamlit_app.utils import cache_key, format_date, require_profile

ENROLLED_KEY = cache_key("enrolled_camp_ids")


def _enroll(student_id: str, camp_id: str, camp_name: str):
    before = st.session_state[ENROLLED_KEY]
    after = enrollments_logic.enroll(student_id, camp_id, before)
    if camp_id not in after:
        st.session_state["enroll_error"] = f"Could not enroll in {camp_name}. Please try again."
    st.session_state[ENROLLED_KEY] = after


def main():
    profile = require_profile("student")

    st.title("Browse Camps")
    st.caption("Find a camp and sign up")

    if ENROLLED_KEY not in st.session_state:
        st.session_state[ENROLLED_KEY] = enrollments_logic.load_enrolled_camp_ids(profile.id)
    if error := st.session_state.pop("enroll_error", None):
        st.error(error)

    camps = enrollments_logic.load_camp_catalog()
    if not camps:
        st.info("No camps available right now.")
        return

    enrolled = st.session_state[ENROLLED_KEY]
    for camp in camps:
        with st.container(border=True):
            info_col, action_col = st.columns([4, 1])
            with info_col:
                st.markdown(f"### {camp.name}")
                st.caption(
                    f"📍 {camp.location} • "
                    f"{format_date(camp.start_date)} - {format_date(camp.end_date)} • "
                    f"₱{camp.price:,.2f}"
                )
                if camp.description:
                    st.write(camp.description)
            with action_col:
                if camp.id in enrolled:
                    st.success("Enrolled")
                else:
                    st.button(
                        "Enroll",
                        key=f"enroll_{camp.id}",
                        type="primary",
                        on_click=_enroll,
                        args=(profile.id, camp.id, camp.name),
                    )


if __name__ == "__main__":
    main()
