"""Per-season stats reads from the wide ``stats`` table."""

from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError
from sqlalchemy import func, literal_column, select

from ..mock import mock_gar_data
from ..models import FetchResult, GarData, PlayerStat
from ..models.stats import DEFAULT_GAMES_PLAYED, SEASON_SUFFIXES, season_label
from ..storage.schema import season_column, stats
from ..utils import safe_float, safe_int
from .base import BaseRepository, FallbackPolicy

# PlayerStat field -> stats column prefix
STAT_COLUMNS: dict[str, str] = {
    "games_played": "gp",
    "goals": "goals",
    "assists": "a1",
    "points": "points",
    "time_on_ice": "toi",
    "giveaways": "giveaways",
    "takeaways": "takeaways",
    "individual_corsi_for": "icf",
    "individual_expected_goals": "ixg",
    "goals_above_replacement": "gar",
    "wins_above_replacement": "war",
    "corsi_for_percentage": "cf_pct",
    "expected_goals": "xg",
    "expected_goals_differential": "xgd",
    "wins": "wins",
    "losses": "losses",
    "ot_losses": "otl",
    "save_percentage": "sv_pct",
    "goals_against_average": "gaa",
    "shutouts": "so",
    "goals_saved_above_average": "gsaa",
    "high_danger_save_percentage": "hdsv_pct",
    "medium_danger_save_percentage": "mdsv_pct",
    "low_danger_save_percentage": "ldsv_pct",
    "quality_start_percentage": "qs_pct",
}

INT_FIELDS = {
    "games_played",
    "goals",
    "assists",
    "points",
    "giveaways",
    "takeaways",
    "individual_corsi_for",
    "wins",
    "losses",
    "ot_losses",
    "shutouts",
}

# A season is only emitted when one of these is recorded
HAS_DATA_COLUMNS = ("goals", "a1", "toi", "gar")


def has_season_data(row: dict[str, Any], suffix: str) -> bool:
    return any(row.get(season_column(prefix, suffix)) is not None for prefix in HAS_DATA_COLUMNS)


def expand_stats_row(player_id: int, row: dict[str, Any]) -> list[PlayerStat]:
    """Split one wide stats row into a PlayerStat per season with data, oldest first."""
    team = row.get("prev_team") or "Unknown"
    position = row.get("position") or "Unknown"

    records = []
    for suffix in SEASON_SUFFIXES:
        if not has_season_data(row, suffix):
            continue

        values: dict[str, Any] = {}
        for field, prefix in STAT_COLUMNS.items():
            raw = row.get(season_column(prefix, suffix))
            values[field] = safe_int(raw) if field in INT_FIELDS else safe_float(raw)

        if values["games_played"] is None:
            values["games_played"] = DEFAULT_GAMES_PLAYED
        if values["points"] is None and values["goals"] is not None and values["assists"] is not None:
            values["points"] = values["goals"] + values["assists"]

        records.append(
            PlayerStat(
                player_id=player_id,
                season=season_label(suffix),
                team=team,
                position=position,
                **values,
            )
        )
    return records


class StatsRepository(BaseRepository):
    """Reads season stats and GAR trends.

    Season stats never fall back to sample data: no stats means no stats.
    GAR trend points do, so charts always have something to draw.
    """

    COMPONENT = "stats_repository"

    def get_player_stats(self, player_id: int) -> FetchResult[list[PlayerStat]]:
        """Season-by-season stats for a player, oldest season first."""

        def load() -> list[PlayerStat]:
            count_query = (
                select(func.count().label("row_count"))
                .select_from(stats)
                .where(stats.c.player_id == player_id)
            )
            rows = self._query(count_query)
            if not rows or not rows[0]["row_count"]:
                self.logger.info("no_stats_for_player", player_id=player_id)
                return []

            row_query = select(literal_column("*")).select_from(stats).where(stats.c.player_id == player_id)
            rows = self._query(row_query)
            if not rows:
                return []

            try:
                records = expand_stats_row(player_id, rows[0])
            except ValidationError as e:
                self.logger.warning("parse_stats_failed", player_id=player_id, error=str(e))
                return []

            self.logger.debug("loaded_player_stats", player_id=player_id, seasons=len(records))
            return records

        return self._fetch("get_player_stats", load, FallbackPolicy.EMPTY, list)

    def get_player_gar_data(self, player_id: int) -> FetchResult[list[GarData]]:
        """GAR per season for one player, oldest season first."""
        return self.get_players_gar_data([player_id])

    def get_players_gar_data(self, player_ids: Iterable[int]) -> FetchResult[list[GarData]]:
        """GAR per season for several players, grouped by player in request order."""
        ids = list(dict.fromkeys(player_ids))
        if not ids:
            return FetchResult(data=[])

        def load() -> list[GarData]:
            gar_columns = [stats.c[season_column("gar", suffix)] for suffix in SEASON_SUFFIXES]
            query = select(stats.c.player_id, *gar_columns).where(stats.c.player_id.in_(ids))
            by_player = {safe_int(row["player_id"]): row for row in self._query(query)}

            points = []
            for player_id in ids:
                row = by_player.get(player_id)
                if row is None:
                    continue
                for suffix in SEASON_SUFFIXES:
                    gar = safe_float(row.get(season_column("gar", suffix)))
                    if gar is not None:
                        points.append(GarData(player_id=player_id, season=season_label(suffix), gar=gar))
            return points

        return self._fetch("get_players_gar_data", load, FallbackPolicy.MOCK, lambda: mock_gar_data(ids))
