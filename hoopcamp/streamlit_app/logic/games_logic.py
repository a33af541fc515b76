"""Business logic for the coach games page."""

from hoopcamp.database.records import Camp, GameWithCamp
from hoopcamp.database.tables import TABLE_CAMPS, TABLE_GAMES
from hoopcamp.database.utils import delete_row, load_records, save_row


def load_camp_options() -> list[Camp]:
    return load_records(Camp, TABLE_CAMPS.name, order_by="name")


def load_games() -> list[GameWithCamp]:
    """Games with their camp, latest first."""
    return load_records(
        GameWithCamp,
        TABLE_GAMES.name,
        select="*, camps(*)",
        order_by="game_date",
        ascending=False,
    )


def build_game_payload(
    camp_id: str,
    game_date: str,
    opponent_name: str,
    team_1_name: str = "",
    team_2_name: str = "",
) -> dict:
    opponent_name = opponent_name.strip()
    return {
        "camp_id": camp_id,
        "game_date": game_date,
        "opponent_name": opponent_name or None,
        "team_1_name": team_1_name.strip() or "Team 1",
        "team_2_name": team_2_name.strip() or opponent_name or "Team 2",
    }


def save_game(payload: dict, editing_id: str | None = None) -> bool:
    return save_row(TABLE_GAMES.name, payload, editing_id)


def delete_game(game_id: str) -> bool:
    """Delete a game; its stats rows go with it (cascade in the database)."""
    return delete_row(TABLE_GAMES.name, game_id)
