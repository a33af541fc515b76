"""Average box-score statistics over a player's games."""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from hoopcamp.database.records import STAT_FIELDS, GameStat


@dataclass(frozen=True)
class AverageStats:
    points: float = 0
    rebounds: float = 0
    assists: float = 0
    steals: float = 0
    blocks: float = 0
    games_played: int = 0


def _round_one_decimal(value: float) -> float:
    """Round half up to one decimal place (2.25 -> 2.3, -0.25 -> -0.2)."""
    return math.floor(value * 10 + 0.5) / 10


def _stat_value(stat: Mapping | GameStat, field: str) -> int:
    if isinstance(stat, Mapping):
        return stat[field]
    return getattr(stat, field)


def calculate_average_stats(stats: Iterable[Mapping | GameStat] | None) -> AverageStats:
    """Compute per-game averages of points, rebounds, assists, steals and blocks.

    Accepts raw rows or GameStat records. An empty (or missing) list yields
    all-zero averages with ``games_played == 0``.
    """
    stats = list(stats or [])
    if not stats:
        return AverageStats()

    totals = {field: 0 for field in STAT_FIELDS}
    for stat in stats:
        for field in STAT_FIELDS:
            totals[field] += _stat_value(stat, field)

    games_played = len(stats)
    averages = {
        field: _round_one_decimal(total / games_played)
        for field, total in totals.items()
    }
    return AverageStats(**averages, games_played=games_played)
