"""Attendance page UI - mark students present or absent for a game or training session."""

import streamlit as st

from hoopcamp.streamlit_app.logic import attendance_logic
from hoopcamp.streamlit_app.logic.attendance_logic import EventRef, ScanOutcome, TransitionState
from hoopcamp.streamlit_app.logic.games_logic import load_games
from hoopcamp.streamlit_app.logic.training_logic import load_sessions
from hoopcamp.streamlit_app.utils import cache_key, format_date, require_profile


def _event_options() -> dict[EventRef, str]:
    """Every game and training session, labelled for the selectbox."""
    options = {}
    for item in load_games():
        camp_name = item.camp.name if item.camp else "Unknown camp"
        options[EventRef("game", item.game.id)] = (
            f"🏀 {item.game.title} · {camp_name} · {format_date(item.game.game_date)}"
        )
    for item in load_sessions():
        camp_name = item.camp.name if item.camp else "Unknown camp"
        options[EventRef("training", item.session.id)] = (
            f"🏋️ {item.session.drill_topic} · {camp_name} · {format_date(item.session.session_date)}"
        )
    return options


def _statuses_key(event: EventRef) -> str:
    return cache_key("attendance", event.kind, event.id)


def _toggle(event: EventRef, student_id: str, student_name: str):
    statuses = st.session_state[_statuses_key(event)]
    transition = attendance_logic.toggle_attendance(statuses, student_id, event)
    if transition.state is TransitionState.ROLLED_BACK:
        st.session_state[_statuses_key(event)] = attendance_logic.load_status_map(event)
        st.toast(f"Could not update attendance for {student_name}", icon="⚠️")


def _scan(event: EventRef, roster):
    payload = st.session_state.get("scan_payload")
    st.session_state["scan_payload"] = ""
    result = attendance_logic.record_scan(
        payload, roster, st.session_state[_statuses_key(event)], event
    )
    if result.outcome is ScanOutcome.WRITE_FAILED:
        st.session_state[_statuses_key(event)] = attendance_logic.load_status_map(event)
    st.session_state["last_scan"] = result


def _render_scan_result():
    result = st.session_state.pop("last_scan", None)
    if result is None:
        return
    if result.outcome is ScanOutcome.MARKED_PRESENT:
        st.success(f"✓ {result.student.name} checked in")
    elif result.outcome is ScanOutcome.ALREADY_PRESENT:
        st.info(f"{result.student.name} is already marked present")
    elif result.outcome is ScanOutcome.UNKNOWN_STUDENT:
        st.warning("Scanned code does not match a student enrolled in this camp.")
    else:
        st.error(f"Could not record attendance for {result.student.name}.")


def main():
    """Attendance taking for coaches."""
    require_profile("coach")

    st.title("Attendance")
    st.caption("Mark students present by hand or by scanning their QR code")

    options = _event_options()
    if not options:
        st.info("Create a game or training session first.")
        return

    event = st.selectbox(
        "Event",
        options=list(options),
        format_func=options.get,
        key="attendance_event",
    )

    key = _statuses_key(event)
    if key not in st.session_state:
        st.session_state[key] = attendance_logic.load_status_map(event)
    roster = attendance_logic.load_event_roster(event)

    if not roster:
        st.info("No students are enrolled in this camp yet.")
        return

    # QR check-in
    st.markdown("### Scan Check-In")
    st.text_input(
        "Scanned code",
        key="scan_payload",
        placeholder="Scan a student QR code",
        on_change=_scan,
        args=(event, roster),
    )
    _render_scan_result()

    # Manual roster
    statuses = st.session_state[key]
    present = sum(1 for student in roster if statuses.get(student.id) == "present")
    st.markdown(f"### Roster ({present}/{len(roster)} present)")
    for student in roster:
        status = statuses.get(student.id)
        name_col, status_col, action_col = st.columns([3, 1, 1])
        name_col.write(student.name)
        status_col.write({"present": "✅ Present", "absent": "❌ Absent", "excused": "🟡 Excused"}.get(status, "—"))
        action_col.button(
            "Mark Absent" if status == "present" else "Mark Present",
            key=f"toggle_{event.kind}_{event.id}_{student.id}",
            on_click=_toggle,
            args=(event, student.id, student.name),
        )


if __name__ == "__main__":
    main()
