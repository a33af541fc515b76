"""Coach camps page UI - create, edit and delete camps."""

import datetime

import streamlit as st

from hoopcamp.database.records import Camp
from hoopcamp.streamlit_app.logic import camps_logic
from hoopcamp.streamlit_app.utils import format_date, require_profile

FORM_KEYS = {
    "camp_name": "",
    "camp_start": None,
    "camp_end": None,
    "camp_price": 0.0,
    "camp_location": "",
    "camp_description": "",
}


def _reset_form():
    for key, default in FORM_KEYS.items():
        st.session_state[key] = default
    st.session_state["editing_camp"] = None
    st.session_state["show_camp_form"] = False


def _start_edit(camp: Camp):
    st.session_state["camp_name"] = camp.name
    st.session_state["camp_start"] = datetime.date.fromisoformat(camp.start_date)
    st.session_state["camp_end"] = datetime.date.fromisoformat(camp.end_date)
    st.session_state["camp_price"] = float(camp.price)
    st.session_state["camp_location"] = camp.location
    st.session_state["camp_description"] = camp.description or ""
    st.session_state["editing_camp"] = camp.id
    st.session_state["show_camp_form"] = True


def _submit():
    state = st.session_state
    if not state["camp_name"] or not state["camp_start"] or not state["camp_end"]:
        state["camp_error"] = "Name, start date and end date are required."
        return
    payload = camps_logic.build_camp_payload(
        name=state["camp_name"],
        start_date=state["camp_start"].isoformat(),
        end_date=state["camp_end"].isoformat(),
        price=state["camp_price"],
        location=state["camp_location"],
        description=state["camp_description"],
    )
    if camps_logic.save_camp(payload, state.get("editing_camp")):
        _reset_form()
        state["camp_error"] = None
    else:
        state["camp_error"] = "Could not save the camp."


def main():
    """Camps management page for coaches."""
    require_profile("coach")
    for key, default in FORM_KEYS.items():
        st.session_state.setdefault(key, default)
    st.session_state.setdefault("editing_camp", None)
    st.session_state.setdefault("show_camp_form", False)

    title_col, button_col = st.columns([4, 1])
    with title_col:
        st.title("Camps")
        st.caption("Create and manage basketball camps")
    with button_col:
        if not st.session_state["show_camp_form"]:
            if st.button("+ New Camp"):
                st.session_state["show_camp_form"] = True
                st.rerun()

    if st.session_state.get("camp_error"):
        st.error(st.session_state["camp_error"])

    # Create / edit form
    if st.session_state["show_camp_form"]:
        editing = st.session_state["editing_camp"] is not None
        with st.form("camp_form"):
            st.subheader("Edit Camp" if editing else "Create New Camp")
            st.text_input("Camp Name", key="camp_name")
            col1, col2 = st.columns(2)
            col1.date_input("Start Date", key="camp_start")
            col2.date_input("End Date", key="camp_end")
            col1.number_input("Price (₱)", min_value=0.0, step=100.0, key="camp_price")
            col2.text_input("Location", key="camp_location")
            st.text_area("Description", key="camp_description")
            submit_col, cancel_col = st.columns(2)
            submit_col.form_submit_button(
                "Update Camp" if editing else "Create Camp", on_click=_submit
            )
            cancel_col.form_submit_button("Cancel", on_click=_reset_form)

    # Camp list
    camps = camps_logic.load_camps()
    if not camps:
        st.info("No camps yet. Create your first camp to get started.")
        return

    for camp in camps:
        with st.container(border=True):
            info_col, actions_col = st.columns([4, 1])
            with info_col:
                st.markdown(f"### {camp.name}")
                st.write(f"📍 {camp.location}")
                st.write(f"📅 {format_date(camp.start_date)} - {format_date(camp.end_date)}")
                st.write(f"**₱{camp.price:,.2f}**")
                if camp.description:
                    st.caption(camp.description)
            with actions_col:
                st.button("Edit", key=f"edit_{camp.id}", on_click=_start_edit, args=(camp,))
                if st.session_state.get("confirm_delete_camp") == camp.id:
                    st.warning("Delete this camp?")
                    if st.button("Confirm", key=f"confirm_{camp.id}", type="primary"):
                        st.session_state["confirm_delete_camp"] = None
                        if camps_logic.delete_camp(camp.id):
                            st.rerun()
                        st.error("Could not delete the camp.")
                elif st.button("Delete", key=f"delete_{camp.id}"):
                    st.session_state["confirm_delete_camp"] = camp.id
                    st.rerun()


if __name__ == "__main__":
    main()
