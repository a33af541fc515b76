"""Players page UI - all students with their camps."""

import streamlit as st

from hoopcamp.streamlit_app.logic import players_logic
from hoopcamp.streamlit_app.utils import open_page, require_profile


def main():
    """Player list for coaches."""
    require_profile("coach")

    st.title("Players")
    st.caption("View and manage enrolled students")

    students = players_logic.load_students()
    camp_names = players_logic.camps_by_student(players_logic.load_all_enrollments())

    player_search = st.text_input("Search players:", value="", placeholder="Name or email")
    filtered = players_logic.filter_students(students, player_search)

    if not students:
        st.info("No students have signed up yet.")
        return
    if not filtered:
        st.error("No players match your search.")
        return

    st.caption(f"{len(filtered)} of {len(students)} students")
    for student in filtered:
        with st.container(border=True):
            info_col, action_col = st.columns([4, 1])
            with info_col:
                st.markdown(f"**{student.name}**")
                st.caption(student.email or "")
                camps = camp_names.get(student.id, [])
                st.write(", ".join(camps) if camps else "Not enrolled in any camp")
            with action_col:
                if st.button("View", key=f"view_{student.id}"):
                    open_page("/coach/players/detail", id=student.id)


if __name__ == "__main__":
    main()
