"""NHL free agent contract projections and player stats."""

from .models import FetchResult, GarData, Player, PlayerStat
from .repositories import FallbackPolicy, PlayerRepository, StatsRepository
from .storage import Database

__version__ = "0.1.0"

__all__ = [
    "Database",
    "FallbackPolicy",
    "FetchResult",
    "GarData",
    "Player",
    "PlayerRepository",
    "PlayerStat",
    "StatsRepository",
]
