"""Business logic for the coach training page."""

from hoopcamp.database.records import SessionWithCamp
from hoopcamp.database.tables import TABLE_TRAINING_SESSIONS
from hoopcamp.database.utils import delete_row, load_records, save_row


def load_sessions() -> list[SessionWithCamp]:
    """Training sessions with their camp, latest first."""
    return load_records(
        SessionWithCamp,
        TABLE_TRAINING_SESSIONS.name,
        select="*, camps(*)",
        order_by="session_date",
        ascending=False,
    )


def build_session_payload(camp_id: str, session_date: str, drill_topic: str, notes: str) -> dict:
    return {
        "camp_id": camp_id,
        "session_date": session_date,
        "drill_topic": drill_topic.strip(),
        "notes": notes.strip() or None,
    }


def save_session(payload: dict, editing_id: str | None = None) -> bool:
    return save_row(TABLE_TRAINING_SESSIONS.name, payload, editing_id)


def delete_session(session_id: str) -> bool:
    return delete_row(TABLE_TRAINING_SESSIONS.name, session_id)
