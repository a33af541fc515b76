"""Business logic for the game roster & stats page.

The page keeps a map of ``student_id -> GameStat`` for one game. Every
function below takes the current map and returns the map to use next:
on a failed write the map comes back unchanged.
"""

from dataclasses import replace

from hoopcamp.database.records import STAT_FIELDS, GameStat, GameWithCamp, Profile, TeamChoice
from hoopcamp.database.tables import TABLE_GAME_STATS, TABLE_GAMES
from hoopcamp.database.utils import delete_row, insert_row, load_record, load_records, update_row

StatsMap = dict[str, GameStat]


def load_game(game_id: str) -> GameWithCamp | None:
    return load_record(GameWithCamp, TABLE_GAMES.name, game_id, select="*, camps(*)")


def load_stats_map(game_id: str) -> StatsMap:
    stats = load_records(GameStat, TABLE_GAME_STATS.name, filters={"game_id": game_id})
    return {stat.student_id: stat for stat in stats}


def assign_team(
    stats: StatsMap,
    game_id: str,
    student_id: str,
    team: TeamChoice | None,
) -> StatsMap:
    """Put a student on a team (or take them off with ``team=None``).

    A student without a stats row gets one with zeroed counters. Removing
    a student who has no row does nothing. If the insert fails because the
    row already exists, the map is reloaded and the row is updated instead.
    """
    existing = stats.get(student_id)
    if existing is not None:
        if not update_row(TABLE_GAME_STATS.name, existing.id, {"team_choice": team}):
            return stats
        return {**stats, student_id: replace(existing, team_choice=team)}

    if team is None:
        return stats

    row = insert_row(TABLE_GAME_STATS.name, {
        "game_id": game_id,
        "student_id": student_id,
        "team_choice": team,
        **{field: 0 for field in STAT_FIELDS},
    })
    if row is None:
        # Another session may have created the row since ``stats`` was loaded
        current = load_stats_map(game_id)
        if student_id in current:
            return assign_team(current, game_id, student_id, team)
        return stats
    return {**stats, student_id: GameStat.from_row(row)}


def save_stat_line(stats: StatsMap, student_id: str, values: dict[str, int]) -> StatsMap:
    """Update the counters of an existing stats row.

    Only students already assigned to a team have a row to update.
    """
    existing = stats.get(student_id)
    if existing is None:
        return stats
    values = {field: int(values[field]) for field in STAT_FIELDS if field in values}
    if not update_row(TABLE_GAME_STATS.name, existing.id, values):
        return stats
    return {**stats, student_id: replace(existing, **values)}


def delete_stat_line(stats: StatsMap, student_id: str) -> StatsMap:
    existing = stats.get(student_id)
    if existing is None:
        return stats
    if not delete_row(TABLE_GAME_STATS.name, existing.id):
        return stats
    return {key: stat for key, stat in stats.items() if key != student_id}


def split_roster(
    students: list[Profile],
    stats: StatsMap,
) -> tuple[list[Profile], list[Profile], list[Profile]]:
    """Split students into (unassigned, team 1, team 2)."""
    unassigned, team_1, team_2 = [], [], []
    for student in students:
        stat = stats.get(student.id)
        choice = stat.team_choice if stat else None
        if choice == "team_1":
            team_1.append(student)
        elif choice == "team_2":
            team_2.append(student)
        else:
            unassigned.append(student)
    return unassigned, team_1, team_2
