"""Supabase table schema definitions."""

from dataclasses import dataclass


@dataclass
class Column:
    """Represents a database column with its properties."""

    name: str
    type: str
    is_primary: bool = False
    is_nullable: bool = False
    is_unique: bool = False


@dataclass
class Table:
    """Represents a database table with its columns."""

    name: str
    columns: list[Column]
    unique_together: tuple[str, ...] = ()

    def get_column(self, name: str) -> Column | None:
        """Get a column by name."""
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def get_primary_keys(self) -> list[str]:
        """Get list of primary key column names."""
        return [col.name for col in self.columns if col.is_primary]

    def get_column_names(self) -> list[str]:
        """Get list of all column names."""
        return [col.name for col in self.columns]


def _timestamps() -> list[Column]:
    return [
        Column("created_at", "timestamptz"),
        Column("updated_at", "timestamptz"),
    ]


# ============================================================================
# TABLE DEFINITIONS
# ============================================================================

TABLE_PROFILES = Table(
    name="profiles",
    columns=[
        Column("id", "uuid", is_primary=True, is_unique=True),
        Column("name", "text"),
        Column("role", "text"),
        Column("email", "text", is_nullable=True),
        Column("address", "text", is_nullable=True),
        Column("mobile_no", "text", is_nullable=True),
        Column("emergency_contact_no", "text", is_nullable=True),
        *_timestamps(),
    ],
)

TABLE_CAMPS = Table(
    name="camps",
    columns=[
        Column("id", "uuid", is_primary=True, is_unique=True),
        Column("name", "text"),
        Column("start_date", "date"),
        Column("end_date", "date"),
        Column("price", "numeric"),
        Column("location", "text"),
        Column("description", "text", is_nullable=True),
        *_timestamps(),
    ],
)

TABLE_ENROLLMENTS = Table(
    name="enrollments",
    columns=[
        Column("id", "uuid", is_primary=True, is_unique=True),
        Column("student_id", "uuid"),
        Column("camp_id", "uuid"),
        Column("enrolled_at", "timestamptz"),
    ],
    unique_together=("student_id", "camp_id"),
)

TABLE_GAMES = Table(
    name="games",
    columns=[
        Column("id", "uuid", is_primary=True, is_unique=True),
        Column("camp_id", "uuid"),
        Column("game_date", "date"),
        Column("opponent_name", "text", is_nullable=True),
        Column("team_1_name", "text"),
        Column("team_2_name", "text"),
        *_timestamps(),
    ],
)

TABLE_GAME_STATS = Table(
    name="game_stats",
    columns=[
        Column("id", "uuid", is_primary=True, is_unique=True),
        Column("game_id", "uuid"),
        Column("student_id", "uuid"),
        Column("points", "integer"),
        Column("rebounds", "integer"),
        Column("assists", "integer"),
        Column("steals", "integer"),
        Column("blocks", "integer"),
        Column("team_choice", "text", is_nullable=True),
        *_timestamps(),
    ],
    unique_together=("game_id", "student_id"),
)

TABLE_TRAINING_SESSIONS = Table(
    name="training_sessions",
    columns=[
        Column("id", "uuid", is_primary=True, is_unique=True),
        Column("camp_id", "uuid"),
        Column("session_date", "date"),
        Column("drill_topic", "text"),
        Column("notes", "text", is_nullable=True),
        *_timestamps(),
    ],
)

TABLE_EVALUATIONS = Table(
    name="evaluations",
    columns=[
        Column("id", "uuid", is_primary=True, is_unique=True),
        Column("training_session_id", "uuid"),
        Column("student_id", "uuid"),
        Column("rating", "integer"),
        Column("strengths", "text", is_nullable=True),
        Column("weaknesses", "text", is_nullable=True),
        Column("coach_notes", "text", is_nullable=True),
        *_timestamps(),
    ],
    unique_together=("training_session_id", "student_id"),
)

TABLE_ATTENDANCE = Table(
    name="attendance",
    columns=[
        Column("id", "uuid", is_primary=True, is_unique=True),
        Column("student_id", "uuid"),
        Column("game_id", "uuid", is_nullable=True),
        Column("training_session_id", "uuid", is_nullable=True),
        Column("status", "text"),
        *_timestamps(),
    ],
)


# ============================================================================
# TABLE REGISTRY
# ============================================================================

ALL_TABLES = [
    TABLE_PROFILES,
    TABLE_CAMPS,
    TABLE_ENROLLMENTS,
    TABLE_GAMES,
    TABLE_GAME_STATS,
    TABLE_TRAINING_SESSIONS,
    TABLE_EVALUATIONS,
    TABLE_ATTENDANCE,
]

TABLES_BY_NAME = {table.name: table for table in ALL_TABLES}
