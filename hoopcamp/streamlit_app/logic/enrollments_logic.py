"""Business logic for enrollments - linking students to camps."""

from hoopcamp.database.records import Camp, EnrollmentWithCamp, Profile
from hoopcamp.database.tables import TABLE_CAMPS, TABLE_ENROLLMENTS
from hoopcamp.database.utils import insert_row, load_records, load_rows


def load_enrolled_students(camp_id: str) -> list[Profile]:
    """Students enrolled in a camp, in enrollment order."""
    rows = load_rows(
        TABLE_ENROLLMENTS.name,
        select="profiles(*)",
        filters={"camp_id": camp_id},
    )
    return [Profile.from_row(row["profiles"]) for row in rows if row.get("profiles")]


def load_student_enrollments(student_id: str) -> list[EnrollmentWithCamp]:
    return load_records(
        EnrollmentWithCamp,
        TABLE_ENROLLMENTS.name,
        select="*, camps(*)",
        filters={"student_id": student_id},
    )


def load_enrolled_camp_ids(student_id: str) -> set[str]:
    rows = load_rows(TABLE_ENROLLMENTS.name, select="camp_id", filters={"student_id": student_id})
    return {row["camp_id"] for row in rows}


def load_camp_catalog() -> list[Camp]:
    """All camps, soonest first, as shown to students."""
    return load_records(Camp, TABLE_CAMPS.name, order_by="start_date", ascending=True)


def enroll(student_id: str, camp_id: str, enrolled_camp_ids: set[str]) -> set[str]:
    """Enroll a student and return the updated set of enrolled camp ids.

    Enrolling twice in the same camp is a no-op. On a failed write the set
    is reloaded from the database.
    """
    if camp_id in enrolled_camp_ids:
        return enrolled_camp_ids
    row = insert_row(TABLE_ENROLLMENTS.name, {"student_id": student_id, "camp_id": camp_id})
    if row is None:
        # The enrollment may already exist from another session
        return load_enrolled_camp_ids(student_id)
    return enrolled_camp_ids | {camp_id}
