"""Business logic for the training evaluations page."""

from dataclasses import replace

from hoopcamp.database.records import Evaluation, SessionWithCamp
from hoopcamp.database.tables import TABLE_EVALUATIONS, TABLE_TRAINING_SESSIONS
from hoopcamp.database.utils import insert_row, load_record, load_records, update_row

MIN_RATING = 1
MAX_RATING = 10

EvaluationsMap = dict[str, Evaluation]


def load_session(session_id: str) -> SessionWithCamp | None:
    return load_record(SessionWithCamp, TABLE_TRAINING_SESSIONS.name, session_id, select="*, camps(*)")


def load_evaluations_map(session_id: str) -> EvaluationsMap:
    evaluations = load_records(
        Evaluation,
        TABLE_EVALUATIONS.name,
        filters={"training_session_id": session_id},
    )
    return {evaluation.student_id: evaluation for evaluation in evaluations}


def build_evaluation_payload(
    rating: int,
    strengths: str = "",
    weaknesses: str = "",
    coach_notes: str = "",
) -> dict:
    """Validate form values; blank text fields are stored as null."""
    rating = int(rating)
    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}")
    return {
        "rating": rating,
        "strengths": strengths.strip() or None,
        "weaknesses": weaknesses.strip() or None,
        "coach_notes": coach_notes.strip() or None,
    }


def save_evaluation(
    evaluations: EvaluationsMap,
    session_id: str,
    student_id: str,
    payload: dict,
) -> EvaluationsMap:
    """Update the student's evaluation for the session, or create it.

    If the insert fails because another coach already evaluated the student,
    the map is reloaded and that evaluation is updated instead.
    """
    existing = evaluations.get(student_id)
    if existing is not None:
        if not update_row(TABLE_EVALUATIONS.name, existing.id, payload):
            return evaluations
        return {**evaluations, student_id: replace(existing, **payload)}

    row = insert_row(TABLE_EVALUATIONS.name, {
        "training_session_id": session_id,
        "student_id": student_id,
        **payload,
    })
    if row is None:
        # Another session may have evaluated the student since the map was loaded
        current = load_evaluations_map(session_id)
        if student_id in current:
            return save_evaluation(current, session_id, student_id, payload)
        return evaluations
    return {**evaluations, student_id: Evaluation.from_row(row)}
