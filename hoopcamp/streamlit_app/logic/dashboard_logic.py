"""Business logic for the coach and student dashboards."""

from dataclasses import dataclass

from hoopcamp.database.records import Camp, EnrollmentWithCamp, EvaluationWithSession, GameStat
from hoopcamp.database.tables import (
    TABLE_ATTENDANCE,
    TABLE_CAMPS,
    TABLE_GAME_STATS,
    TABLE_GAMES,
    TABLE_PROFILES,
    TABLE_TRAINING_SESSIONS,
)
from hoopcamp.database.utils import count_rows, load_records, load_rows
from hoopcamp.stats.averages import AverageStats, calculate_average_stats
from hoopcamp.streamlit_app.logic.enrollments_logic import load_student_enrollments
from hoopcamp.streamlit_app.logic.players_logic import load_evaluation_history

RECENT_CAMPS_LIMIT = 5


@dataclass(frozen=True)
class CoachOverview:
    camps_count: int
    players_count: int
    games_count: int
    sessions_count: int
    recent_camps: list[Camp]


@dataclass(frozen=True)
class AttendanceSummary:
    games_attended: int
    total_games: int
    training_attended: int
    total_training: int


@dataclass(frozen=True)
class StudentOverview:
    averages: AverageStats
    enrollments: list[EnrollmentWithCamp]
    evaluations: list[EvaluationWithSession]
    attendance: AttendanceSummary


def load_coach_overview() -> CoachOverview:
    return CoachOverview(
        camps_count=count_rows(TABLE_CAMPS.name),
        players_count=count_rows(TABLE_PROFILES.name, filters={"role": "student"}),
        games_count=count_rows(TABLE_GAMES.name),
        sessions_count=count_rows(TABLE_TRAINING_SESSIONS.name),
        recent_camps=load_records(
            Camp,
            TABLE_CAMPS.name,
            order_by="created_at",
            ascending=False,
            limit=RECENT_CAMPS_LIMIT,
        ),
    )


def summarize_attendance(
    attendance_rows: list[dict],
    total_games: int,
    total_training: int,
) -> AttendanceSummary:
    """Count the games and training sessions a student was present at."""
    present = [row for row in attendance_rows if row.get("status") == "present"]
    return AttendanceSummary(
        games_attended=sum(1 for row in present if row.get("game_id")),
        total_games=total_games,
        training_attended=sum(1 for row in present if row.get("training_session_id")),
        total_training=total_training,
    )


def load_student_overview(student_id: str) -> StudentOverview:
    enrollments = load_student_enrollments(student_id)
    game_stats = load_records(GameStat, TABLE_GAME_STATS.name, filters={"student_id": student_id})
    attendance_rows = load_rows(TABLE_ATTENDANCE.name, filters={"student_id": student_id})

    # Totals only count events in camps the student is enrolled in
    camp_ids = [item.enrollment.camp_id for item in enrollments]
    total_games = count_rows(TABLE_GAMES.name, in_filters={"camp_id": camp_ids})
    total_training = count_rows(TABLE_TRAINING_SESSIONS.name, in_filters={"camp_id": camp_ids})

    return StudentOverview(
        averages=calculate_average_stats(game_stats),
        enrollments=enrollments,
        evaluations=load_evaluation_history(student_id),
        attendance=summarize_attendance(attendance_rows, total_games, total_training),
    )
