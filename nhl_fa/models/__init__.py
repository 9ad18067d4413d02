"""Pydantic data models for free agent projections."""

from .player import Player, assess_value
from .stats import GarData, PlayerStat, SEASON_SUFFIXES, SEASONS, season_label, sort_newest_first
from .result import FetchError, FetchResult

__all__ = [
    # Player
    "Player",
    "assess_value",
    # Stats
    "PlayerStat",
    "GarData",
    "SEASON_SUFFIXES",
    "SEASONS",
    "season_label",
    "sort_newest_first",
    # Results
    "FetchResult",
    "FetchError",
]
