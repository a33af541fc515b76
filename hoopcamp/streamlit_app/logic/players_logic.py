"""Business logic for the coach players pages."""

from dataclasses import dataclass

import pandas as pd

from hoopcamp.database.records import (
    EnrollmentWithCamp,
    EvaluationWithSession,
    GameStatWithGame,
    Profile,
)
from hoopcamp.database.tables import TABLE_ENROLLMENTS, TABLE_EVALUATIONS, TABLE_GAME_STATS, TABLE_PROFILES
from hoopcamp.database.utils import load_record, load_records
from hoopcamp.stats.averages import AverageStats, calculate_average_stats
from hoopcamp.streamlit_app.logic.enrollments_logic import load_student_enrollments


@dataclass(frozen=True)
class PlayerDetail:
    student: Profile
    enrollments: list[EnrollmentWithCamp]
    game_stats: list[GameStatWithGame]
    evaluations: list[EvaluationWithSession]
    averages: AverageStats


def load_students() -> list[Profile]:
    return load_records(Profile, TABLE_PROFILES.name, filters={"role": "student"}, order_by="name")


def load_all_enrollments() -> list[EnrollmentWithCamp]:
    return load_records(
        EnrollmentWithCamp,
        TABLE_ENROLLMENTS.name,
        select="*, camps(*)",
        order_by="enrolled_at",
        ascending=False,
    )


def camps_by_student(enrollments: list[EnrollmentWithCamp]) -> dict[str, list[str]]:
    """Map each student id to the names of the camps they are enrolled in."""
    names: dict[str, list[str]] = {}
    for item in enrollments:
        if item.camp is not None:
            names.setdefault(item.enrollment.student_id, []).append(item.camp.name)
    return names


def filter_students(students: list[Profile], query: str) -> list[Profile]:
    """Case-insensitive match on name or email."""
    query = query.strip().lower()
    if not query:
        return students
    return [
        s for s in students
        if query in s.name.lower() or (s.email and query in s.email.lower())
    ]


def load_game_log(student_id: str) -> list[GameStatWithGame]:
    return load_records(
        GameStatWithGame,
        TABLE_GAME_STATS.name,
        select="*, games(*)",
        filters={"student_id": student_id},
        order_by="created_at",
        ascending=False,
    )


def load_evaluation_history(student_id: str) -> list[EvaluationWithSession]:
    return load_records(
        EvaluationWithSession,
        TABLE_EVALUATIONS.name,
        select="*, training_sessions(*)",
        filters={"student_id": student_id},
        order_by="created_at",
        ascending=False,
    )


def load_player_detail(student_id: str) -> PlayerDetail | None:
    student = load_record(Profile, TABLE_PROFILES.name, student_id)
    if student is None:
        return None
    game_stats = load_game_log(student_id)
    return PlayerDetail(
        student=student,
        enrollments=load_student_enrollments(student_id),
        game_stats=game_stats,
        evaluations=load_evaluation_history(student_id),
        averages=calculate_average_stats(item.stat for item in game_stats),
    )


def game_log_frame(game_stats: list[GameStatWithGame]) -> pd.DataFrame:
    """Game log as a display table."""
    columns = ["Date", "Game", "PTS", "REB", "AST", "STL", "BLK"]
    records = [
        {
            "Date": item.game.game_date if item.game else None,
            "Game": item.game.title if item.game else None,
            "PTS": item.stat.points,
            "REB": item.stat.rebounds,
            "AST": item.stat.assists,
            "STL": item.stat.steals,
            "BLK": item.stat.blocks,
        }
        for item in game_stats
    ]
    return pd.DataFrame(records, columns=columns)
