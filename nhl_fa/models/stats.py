"""Per-season performance models."""

from collections.abc import Iterable
from typing import TypeVar

from pydantic import AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Seasons held in the wide stats row, oldest to newest
SEASON_SUFFIXES: tuple[str, ...] = ("22_23", "23_24", "24_25")

DEFAULT_GAMES_PLAYED = 82


def season_label(suffix: str) -> str:
    """Convert a column suffix to a season label ('22_23' -> '2022-23')."""
    start, end = suffix.split("_")
    return f"20{start}-{end}"


SEASONS: tuple[str, ...] = tuple(season_label(s) for s in SEASON_SUFFIXES)


def season_start_year(season: str) -> int:
    """Leading year of a 'YYYY-YY' season label."""
    return int(season.split("-")[0])


class PlayerStat(BaseModel):
    """One season of performance for a player."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    player_id: int
    season: str  # e.g., "2023-24"
    team: str
    position: str
    games_played: int = DEFAULT_GAMES_PLAYED

    # Skater
    goals: int | None = None
    assists: int | None = None
    points: int | None = None
    time_on_ice: float | None = None
    giveaways: int | None = None
    takeaways: int | None = None
    individual_corsi_for: int | None = None
    individual_expected_goals: float | None = None
    goals_above_replacement: float | None = None
    wins_above_replacement: float | None = None
    corsi_for_percentage: float | None = None
    expected_goals: float | None = None
    expected_goals_differential: float | None = None

    # Goalie
    wins: int | None = None
    losses: int | None = None
    ot_losses: int | None = None
    save_percentage: float | None = None
    goals_against_average: float | None = None
    shutouts: int | None = None
    goals_saved_above_average: float | None = None
    high_danger_save_percentage: float | None = None
    medium_danger_save_percentage: float | None = None
    low_danger_save_percentage: float | None = None
    quality_start_percentage: float | None = None

    @property
    def season_start_year(self) -> int:
        return season_start_year(self.season)

    @property
    def points_per_game(self) -> float | None:
        if self.points is None or not self.games_played:
            return None
        return self.points / self.games_played

    def to_api(self) -> dict:
        return self.model_dump(by_alias=True)


class GarData(BaseModel):
    """Goals above replacement for one player-season (trend chart point)."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    player_id: int
    season: str
    gar: float

    def to_api(self) -> dict:
        return self.model_dump(by_alias=True)


SeasonRecord = TypeVar("SeasonRecord", PlayerStat, GarData)


def sort_newest_first(records: Iterable[SeasonRecord]) -> list[SeasonRecord]:
    """Order season records newest season first."""
    return sorted(records, key=lambda r: season_start_year(r.season), reverse=True)
