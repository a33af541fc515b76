"""Typed row records for every query shape used by the app.

Supabase returns plain dictionaries, with joined tables nested under the
joined table's name (e.g. ``{"camp_id": ..., "camps": {...}}``). Each record
below is built from such a row with ``from_row``, so pages and logic never
handle raw nested dictionaries.
"""

from dataclasses import dataclass, fields
from typing import Any, Literal

Role = Literal["student", "coach"]
TeamChoice = Literal["team_1", "team_2"]
AttendanceStatus = Literal["present", "absent", "excused"]

STAT_FIELDS = ("points", "rebounds", "assists", "steals", "blocks")


def _pick(cls, row: dict[str, Any]) -> dict[str, Any]:
    """Keep only the keys of ``row`` that are fields of ``cls``."""
    names = {f.name for f in fields(cls)}
    return {key: value for key, value in row.items() if key in names}


@dataclass(frozen=True)
class Profile:
    id: str
    name: str
    role: Role
    email: str | None = None
    address: str | None = None
    mobile_no: str | None = None
    emergency_contact_no: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Profile":
        return cls(**_pick(cls, row))

    @property
    def is_coach(self) -> bool:
        return self.role == "coach"


@dataclass(frozen=True)
class Camp:
    id: str
    name: str
    start_date: str
    end_date: str
    price: float
    location: str
    description: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Camp":
        return cls(**_pick(cls, row))


@dataclass(frozen=True)
class Enrollment:
    id: str
    student_id: str
    camp_id: str
    enrolled_at: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Enrollment":
        return cls(**_pick(cls, row))


@dataclass(frozen=True)
class Game:
    id: str
    camp_id: str
    game_date: str
    opponent_name: str | None = None
    team_1_name: str = "Team 1"
    team_2_name: str = "Team 2"
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Game":
        values = _pick(cls, row)
        # Older rows only carry an opponent name
        values["team_1_name"] = values.get("team_1_name") or "Team 1"
        values["team_2_name"] = values.get("team_2_name") or values.get("opponent_name") or "Team 2"
        return cls(**values)

    @property
    def title(self) -> str:
        return f"{self.team_1_name} vs {self.team_2_name}"


@dataclass(frozen=True)
class GameStat:
    id: str
    game_id: str
    student_id: str
    points: int = 0
    rebounds: int = 0
    assists: int = 0
    steals: int = 0
    blocks: int = 0
    team_choice: TeamChoice | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "GameStat":
        return cls(**_pick(cls, row))


@dataclass(frozen=True)
class TrainingSession:
    id: str
    camp_id: str
    session_date: str
    drill_topic: str
    notes: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "TrainingSession":
        return cls(**_pick(cls, row))


@dataclass(frozen=True)
class Evaluation:
    id: str
    training_session_id: str
    student_id: str
    rating: int
    strengths: str | None = None
    weaknesses: str | None = None
    coach_notes: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Evaluation":
        return cls(**_pick(cls, row))


@dataclass(frozen=True)
class Attendance:
    id: str
    student_id: str
    status: AttendanceStatus
    game_id: str | None = None
    training_session_id: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Attendance":
        return cls(**_pick(cls, row))


# ============================================================================
# JOINED SHAPES
# ============================================================================


@dataclass(frozen=True)
class EnrollmentWithCamp:
    enrollment: Enrollment
    camp: Camp | None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "EnrollmentWithCamp":
        camp = row.get("camps")
        return cls(Enrollment.from_row(row), Camp.from_row(camp) if camp else None)


@dataclass(frozen=True)
class GameWithCamp:
    game: Game
    camp: Camp | None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "GameWithCamp":
        camp = row.get("camps")
        return cls(Game.from_row(row), Camp.from_row(camp) if camp else None)


@dataclass(frozen=True)
class SessionWithCamp:
    session: TrainingSession
    camp: Camp | None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "SessionWithCamp":
        camp = row.get("camps")
        return cls(TrainingSession.from_row(row), Camp.from_row(camp) if camp else None)


@dataclass(frozen=True)
class GameStatWithGame:
    stat: GameStat
    game: Game | None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "GameStatWithGame":
        game = row.get("games")
        return cls(GameStat.from_row(row), Game.from_row(game) if game else None)


@dataclass(frozen=True)
class EvaluationWithSession:
    evaluation: Evaluation
    session: TrainingSession | None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "EvaluationWithSession":
        session = row.get("training_sessions")
        return cls(
            Evaluation.from_row(row),
            TrainingSession.from_row(session) if session else None,
        )
