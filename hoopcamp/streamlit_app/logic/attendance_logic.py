"""Business logic for attendance - manual toggles and QR check-in.

Attendance for a (student, event) pair is written with a read-then-write
(look up the existing row, then update or insert it). Every write for one
pair goes through a lock owned by that pair, so two near-simultaneous
toggles cannot both find "no row" and insert twice.
"""

import threading
import weakref
from dataclasses import dataclass, replace
from enum import Enum
from typing import Literal

from hoopcamp.database.records import Attendance, AttendanceStatus, Profile
from hoopcamp.database.tables import TABLE_ATTENDANCE, TABLE_GAMES, TABLE_TRAINING_SESSIONS
from hoopcamp.database.utils import insert_row, load_rows, update_row
from hoopcamp.reports.qr_codes import parse_scan_payload
from hoopcamp.streamlit_app.logic.enrollments_logic import load_enrolled_students

EventKind = Literal["game", "training"]
StatusMap = dict[str, AttendanceStatus | None]


@dataclass(frozen=True)
class EventRef:
    """A game or a training session that attendance is taken for."""

    kind: EventKind
    id: str

    @property
    def column(self) -> str:
        return "game_id" if self.kind == "game" else "training_session_id"

    @property
    def table_name(self) -> str:
        return TABLE_GAMES.name if self.kind == "game" else TABLE_TRAINING_SESSIONS.name


class TransitionState(Enum):
    PENDING = "pending"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


@dataclass(frozen=True)
class AttendanceTransition:
    student_id: str
    event: EventRef
    previous: AttendanceStatus | None
    target: AttendanceStatus
    state: TransitionState = TransitionState.PENDING


class ScanOutcome(Enum):
    MARKED_PRESENT = "marked_present"
    ALREADY_PRESENT = "already_present"
    UNKNOWN_STUDENT = "unknown_student"
    WRITE_FAILED = "write_failed"


@dataclass(frozen=True)
class ScanResult:
    outcome: ScanOutcome
    payload: str | None
    student: Profile | None = None


# ============================================================================
# PER-PAIR WRITE LOCKS
# ============================================================================

class _PairLock:
    """Lock for one (student, event) pair, dropped once no writer holds it."""

    def __init__(self):
        self._lock = threading.Lock()

    def __enter__(self):
        self._lock.acquire()
        return self

    def __exit__(self, *exc_info):
        self._lock.release()


_locks: "weakref.WeakValueDictionary[tuple[str, str, str], _PairLock]" = weakref.WeakValueDictionary()
_locks_guard = threading.Lock()


def _lock_for(student_id: str, event: EventRef) -> _PairLock:
    key = (student_id, event.kind, event.id)
    with _locks_guard:
        lock = _locks.get(key)
        if lock is None:
            lock = _PairLock()
            _locks[key] = lock
        return lock


# ============================================================================
# LOADING
# ============================================================================


def load_event_camp_id(event: EventRef) -> str | None:
    rows = load_rows(event.table_name, select="camp_id", filters={"id": event.id}, limit=1)
    return rows[0]["camp_id"] if rows else None


def load_event_roster(event: EventRef) -> list[Profile]:
    """Students enrolled in the camp the event belongs to."""
    camp_id = load_event_camp_id(event)
    if camp_id is None:
        return []
    return load_enrolled_students(camp_id)


def load_status_map(event: EventRef) -> StatusMap:
    rows = load_rows(TABLE_ATTENDANCE.name, filters={event.column: event.id})
    return {row["student_id"]: row["status"] for row in rows}


# ============================================================================
# WRITES
# ============================================================================


def next_status(current: AttendanceStatus | None) -> AttendanceStatus:
    """Toggle flips present <-> absent; anything not present becomes present."""
    return "absent" if current == "present" else "present"


def set_attendance_status(
    student_id: str,
    event: EventRef,
    status: AttendanceStatus,
) -> Attendance | None:
    """Write the status for one (student, event) pair. Returns None on failure."""
    with _lock_for(student_id, event):
        rows = load_rows(
            TABLE_ATTENDANCE.name,
            filters={"student_id": student_id, event.column: event.id},
            limit=1,
        )
        if rows:
            existing = Attendance.from_row(rows[0])
            if not update_row(TABLE_ATTENDANCE.name, existing.id, {"status": status}):
                return None
            return replace(existing, status=status)

        row = insert_row(TABLE_ATTENDANCE.name, {
            "student_id": student_id,
            event.column: event.id,
            "status": status,
        })
        return Attendance.from_row(row) if row else None


def toggle_attendance(statuses: StatusMap, student_id: str, event: EventRef) -> AttendanceTransition:
    """Flip a student's status optimistically.

    ``statuses`` is updated in place before the write is attempted; when the
    write fails the previous value is put back.
    """
    previous = statuses.get(student_id)
    transition = AttendanceTransition(student_id, event, previous, next_status(previous))
    statuses[student_id] = transition.target

    if set_attendance_status(student_id, event, transition.target) is None:
        if previous is None:
            statuses.pop(student_id, None)
        else:
            statuses[student_id] = previous
        return replace(transition, state=TransitionState.ROLLED_BACK)
    return replace(transition, state=TransitionState.COMMITTED)


def record_scan(
    payload: str | None,
    roster: list[Profile],
    statuses: StatusMap,
    event: EventRef,
) -> ScanResult:
    """Check a student in from a scanned QR payload (the bare student id)."""
    student_id = parse_scan_payload(payload)
    student = next((s for s in roster if s.id == student_id), None)
    if student is None:
        print(f"✗ Ignored scan '{payload}': not an enrolled student")
        return ScanResult(ScanOutcome.UNKNOWN_STUDENT, payload)

    if statuses.get(student.id) == "present":
        return ScanResult(ScanOutcome.ALREADY_PRESENT, payload, student)

    if set_attendance_status(student.id, event, "present") is None:
        return ScanResult(ScanOutcome.WRITE_FAILED, payload, student)
    statuses[student.id] = "present"
    return ScanResult(ScanOutcome.MARKED_PRESENT, payload, student)
