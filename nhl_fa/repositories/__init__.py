"""Read-only repositories over the projection and stats store."""

from .base import BaseRepository, FallbackPolicy
from .players import PlayerRepository, build_player_query
from .stats import StatsRepository

__all__ = [
    "BaseRepository",
    "FallbackPolicy",
    "PlayerRepository",
    "StatsRepository",
    "build_player_query",
]
