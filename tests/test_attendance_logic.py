"""Tests for attendance toggles and QR check-in."""

import gc
import threading

import pytest

from hoopcamp.streamlit_app.logic import attendance_logic
from hoopcamp.streamlit_app.logic.attendance_logic import (
    EventRef,
    ScanOutcome,
    TransitionState,
)


@pytest.fixture
def session_event(training_session) -> EventRef:
    return EventRef("training", training_session["id"])


@pytest.fixture
def game_event(game) -> EventRef:
    return EventRef("game", game["id"])


class TestNextStatus:

    @pytest.mark.parametrize("current, expected", [
        (None, "present"),
        ("absent", "present"),
        ("present", "absent"),
    ])
    def test_next_status(self, current, expected):
        assert attendance_logic.next_status(current) == expected


class TestEventRef:

    def test_columns(self):
        assert EventRef("game", "g").column == "game_id"
        assert EventRef("training", "t").column == "training_session_id"
        assert EventRef("game", "g").table_name == "games"
        assert EventRef("training", "t").table_name == "training_sessions"

    def test_roster_from_event_camp(self, fake_db, students, session_event):
        roster = attendance_logic.load_event_roster(session_event)

        assert [p.id for p in roster] == [s["id"] for s in students]

    def test_roster_of_unknown_event(self, fake_db):
        assert attendance_logic.load_event_roster(EventRef("game", "missing")) == []


class TestToggleAttendance:
    """Optimistic present/absent toggles."""

    def test_first_toggle_marks_present(self, fake_db, students, session_event):
        statuses = {}
        student_id = students[0]["id"]

        transition = attendance_logic.toggle_attendance(statuses, student_id, session_event)

        assert transition.state is TransitionState.COMMITTED
        assert transition.previous is None
        assert transition.target == "present"
        assert statuses == {student_id: "present"}
        rows = fake_db.rows("attendance")
        assert len(rows) == 1
        assert rows[0]["training_session_id"] == session_event.id
        assert rows[0].get("game_id") is None

    def test_second_toggle_updates_same_row(self, fake_db, students, session_event):
        statuses = {}
        student_id = students[0]["id"]
        attendance_logic.toggle_attendance(statuses, student_id, session_event)

        transition = attendance_logic.toggle_attendance(statuses, student_id, session_event)

        assert transition.target == "absent"
        assert statuses[student_id] == "absent"
        rows = fake_db.rows("attendance")
        assert len(rows) == 1
        assert rows[0]["status"] == "absent"

    def test_failed_first_write_rolls_back(self, fake_db, students, session_event):
        fake_db.failing_tables.add("attendance")
        statuses = {}

        transition = attendance_logic.toggle_attendance(statuses, students[0]["id"], session_event)

        assert transition.state is TransitionState.ROLLED_BACK
        assert statuses == {}

    def test_failed_write_restores_previous(self, fake_db, students, session_event):
        student_id = students[0]["id"]
        statuses = {}
        attendance_logic.toggle_attendance(statuses, student_id, session_event)
        fake_db.failing_tables.add("attendance")

        transition = attendance_logic.toggle_attendance(statuses, student_id, session_event)

        assert transition.state is TransitionState.ROLLED_BACK
        assert statuses[student_id] == "present"
        assert fake_db.rows("attendance")[0]["status"] == "present"

    def test_load_status_map(self, fake_db, students, session_event, game_event):
        attendance_logic.toggle_attendance({}, students[0]["id"], session_event)
        attendance_logic.toggle_attendance({}, students[1]["id"], game_event)

        assert attendance_logic.load_status_map(session_event) == {students[0]["id"]: "present"}
        assert attendance_logic.load_status_map(game_event) == {students[1]["id"]: "present"}

    def test_concurrent_toggles_write_one_row(self, fake_db, students, session_event):
        """Two near-simultaneous writes for one pair never insert twice."""
        fake_db.select_delay = 0.05
        student_id = students[0]["id"]
        barrier = threading.Barrier(2)

        def write():
            barrier.wait()
            attendance_logic.set_attendance_status(student_id, session_event, "present")

        threads = [threading.Thread(target=write) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        rows = [row for row in fake_db.rows("attendance") if row["student_id"] == student_id]
        assert len(rows) == 1

    def test_pair_lock_shared_while_held(self, students, session_event):
        lock = attendance_logic._lock_for(students[0]["id"], session_event)

        assert attendance_logic._lock_for(students[0]["id"], session_event) is lock
        assert attendance_logic._lock_for(students[1]["id"], session_event) is not lock

    def test_pair_locks_released_after_write(self, fake_db, students, session_event):
        """Finished writes leave no lock behind."""
        for student in students:
            attendance_logic.set_attendance_status(student["id"], session_event, "present")
        gc.collect()

        keys = {(student["id"], session_event.kind, session_event.id) for student in students}
        assert keys.isdisjoint(attendance_logic._locks.keys())


class TestRecordScan:
    """QR check-in."""

    def test_scan_marks_present(self, fake_db, students, game_event):
        roster = attendance_logic.load_event_roster(game_event)
        statuses = {}

        result = attendance_logic.record_scan(f"  {students[1]['id']}\n", roster, statuses, game_event)

        assert result.outcome is ScanOutcome.MARKED_PRESENT
        assert result.student.id == students[1]["id"]
        assert statuses == {students[1]["id"]: "present"}
        assert fake_db.rows("attendance")[0]["game_id"] == game_event.id

    def test_scan_already_present_does_not_write(self, fake_db, students, game_event):
        roster = attendance_logic.load_event_roster(game_event)
        statuses = {}
        attendance_logic.record_scan(students[0]["id"], roster, statuses, game_event)

        result = attendance_logic.record_scan(students[0]["id"], roster, statuses, game_event)

        assert result.outcome is ScanOutcome.ALREADY_PRESENT
        assert len(fake_db.rows("attendance")) == 1

    def test_scan_after_manual_absent_marks_present(self, fake_db, students, game_event):
        roster = attendance_logic.load_event_roster(game_event)
        student_id = students[0]["id"]
        statuses = {}
        attendance_logic.set_attendance_status(student_id, game_event, "absent")
        statuses[student_id] = "absent"

        result = attendance_logic.record_scan(student_id, roster, statuses, game_event)

        assert result.outcome is ScanOutcome.MARKED_PRESENT
        rows = fake_db.rows("attendance")
        assert len(rows) == 1
        assert rows[0]["status"] == "present"

    @pytest.mark.parametrize("payload", ["", "   ", None, "not-a-student"])
    def test_unknown_payload_ignored(self, fake_db, students, game_event, payload):
        roster = attendance_logic.load_event_roster(game_event)
        statuses = {}

        result = attendance_logic.record_scan(payload, roster, statuses, game_event)

        assert result.outcome is ScanOutcome.UNKNOWN_STUDENT
        assert statuses == {}
        assert fake_db.rows("attendance") == []

    def test_write_failure_reported(self, fake_db, students, game_event):
        roster = attendance_logic.load_event_roster(game_event)
        statuses = {}
        fake_db.failing_tables.add("attendance")

        result = attendance_logic.record_scan(students[0]["id"], roster, statuses, game_event)

        assert result.outcome is ScanOutcome.WRITE_FAILED
        assert statuses == {}
