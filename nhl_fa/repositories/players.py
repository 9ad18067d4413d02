"""Player projection reads.

Joins ``projected_contracts`` with the most recent season of ``stats`` and
shapes each row into a Player. Falls back to the sample dataset whenever the
store cannot be read.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import ValidationError
from sqlalchemy import Float, Select, case, cast, func, literal, select

from ..mock import MOCK_PLAYERS, mock_player, mock_players_by_ids
from ..models import FetchResult, Player, assess_value
from ..models.player import GOALIE_FIELDS
from ..models.stats import DEFAULT_GAMES_PLAYED, SEASON_SUFFIXES
from ..storage.schema import projected_contracts, season_column, stats
from ..utils import safe_float, safe_int
from .base import BaseRepository, FallbackPolicy

RECENT_SEASON = SEASON_SUFFIXES[-1]

# No per-goalie source for these yet; rows carrying them list the fields
# in Player.estimated_metrics.
GOALIE_SAVE_PCT_PLACEHOLDER = 0.915
GOALIE_GAA_PLACEHOLDER = 2.50

POSITION_ALIASES = {"L": "LW", "R": "RW", "LD": "D", "RD": "D"}
VALUE_TIER_ALIASES = {
    "bargain": "Bargain",
    "fair": "Fair Deal",
    "fair deal": "Fair Deal",
    "overpay": "Overpay",
}


def build_player_query(player_ids: Sequence[int] | None = None) -> Select:
    """Projection + recent performance query, optionally restricted to ids."""
    pc, s = projected_contracts, stats
    is_goalie = s.c.position == "G"

    production = s.c[season_column("goals", RECENT_SEASON)] + s.c[season_column("a1", RECENT_SEASON)]
    games = func.coalesce(func.nullif(s.c[season_column("gp", RECENT_SEASON)], 0), DEFAULT_GAMES_PLAYED)

    query = (
        select(
            pc.c.player_id.label("id"),
            func.coalesce(pc.c.player_name, s.c.player_name).label("name"),
            pc.c.age,
            s.c.position,
            s.c.prev_team.label("team"),
            s.c.contract_type,
            pc.c.aav.label("projected_aav"),
            pc.c.contract_term.label("projected_term"),
            pc.c.value_category.label("value_tier"),
            pc.c.value_score.label("contract_value_score"),
            pc.c.value_per_gar,
            pc.c.projected_gar_25_26.label("projected_gar_2526"),
            s.c[season_column("gar", RECENT_SEASON)].label("recent_gar"),
            case((is_goalie, None), else_=production).label("recent_production"),
            case((is_goalie, None), else_=cast(production, Float) / games).label("points_per_game"),
            case((is_goalie, literal(GOALIE_SAVE_PCT_PLACEHOLDER)), else_=None).label("save_percentage"),
            case((is_goalie, literal(GOALIE_GAA_PLACEHOLDER)), else_=None).label("goals_against_average"),
        )
        .select_from(pc.outerjoin(s, s.c.player_id == pc.c.player_id))
        .order_by(pc.c.aav.desc(), pc.c.player_id)
    )
    if player_ids is not None:
        query = query.where(pc.c.player_id.in_(list(player_ids)))
    return query


def normalize_player_row(row: dict[str, Any]) -> dict[str, Any]:
    """Coerce a joined row into Player fields.

    Numerics arrive as Decimal or str depending on the driver. Missing
    optional numerics stay None rather than becoming zero.
    """
    position = (row.get("position") or "").strip().upper()
    position = POSITION_ALIASES.get(position, position)

    contract_type = (row.get("contract_type") or "").strip().upper()
    if contract_type not in ("UFA", "RFA"):
        contract_type = "UFA"

    raw_tier = (row.get("value_tier") or "").strip().lower()
    value_tier = VALUE_TIER_ALIASES.get(raw_tier)
    value_per_gar = safe_float(row.get("value_per_gar"))

    save_percentage = safe_float(row.get("save_percentage"))
    goals_against_average = safe_float(row.get("goals_against_average"))
    # The query emits fixed placeholders for every goalie
    estimated = GOALIE_FIELDS if position == "G" else ()

    ppg = safe_float(row.get("points_per_game"))

    return {
        "id": safe_int(row.get("id")),
        "name": row.get("name"),
        "age": safe_int(row.get("age")),
        "position": position,
        "team": row.get("team") or "Unknown",
        "contract_type": contract_type,
        "projected_aav": safe_float(row.get("projected_aav"), 0.0),
        "projected_term": safe_int(row.get("projected_term"), 0),
        "value_tier": value_tier,
        "contract_value_score": safe_int(row.get("contract_value_score")),
        "value_per_gar": value_per_gar,
        "value_assessment": assess_value(value_tier, value_per_gar),
        "recent_production": safe_float(row.get("recent_production")),
        "recent_gar": safe_float(row.get("recent_gar")),
        "points_per_game": round(ppg, 2) if ppg is not None else None,
        "save_percentage": save_percentage,
        "goals_against_average": goals_against_average,
        "projected_gar_2526": safe_float(row.get("projected_gar_2526")),
        "estimated_metrics": estimated,
    }


class PlayerRepository(BaseRepository):
    """Reads free agent projections. Every read resolves to real or sample data."""

    COMPONENT = "player_repository"

    def _load(self, query: Select) -> list[Player]:
        players = []
        for row in self._query(query):
            try:
                players.append(Player(**normalize_player_row(row)))
            except ValidationError as e:
                self.logger.warning(
                    "parse_player_failed",
                    player_id=row.get("id"),
                    player=row.get("name"),
                    error=str(e),
                )
        self.logger.debug("loaded_players", count=len(players))
        return players

    def get_players(self) -> FetchResult[list[Player]]:
        """All projected free agents, highest projected AAV first."""
        return self._fetch(
            "get_players",
            lambda: self._load(build_player_query()),
            FallbackPolicy.MOCK,
            lambda: list(MOCK_PLAYERS),
        )

    def get_player_by_id(self, player_id: int) -> FetchResult[Player | None]:
        """
        One player, or None when neither the store nor the sample data has it.

        A player missing from the projections (e.g. present in stats but not
        yet migrated) is served from the sample data when available.
        """

        def load() -> Player | None:
            players = self._load(build_player_query([player_id]))
            return players[0] if players else None

        result = self._fetch(
            "get_player_by_id",
            load,
            FallbackPolicy.MOCK,
            lambda: mock_player(player_id),
        )

        if result.ok and result.data is None:
            fallback = mock_player(player_id)
            if fallback is not None:
                self.logger.info("player_not_in_projections", player_id=player_id)
                return FetchResult(data=fallback, source="mock")
        return result

    def get_players_by_ids(self, player_ids: Iterable[int]) -> FetchResult[list[Player]]:
        """
        Players matching the given ids, for side-by-side comparison.

        Only matched ids are returned and order is not preserved; use
        filters.order_by_ids to restore the requested order.
        """
        ids = list(dict.fromkeys(player_ids))
        if not ids:
            return FetchResult(data=[])

        return self._fetch(
            "get_players_by_ids",
            lambda: self._load(build_player_query(ids)),
            FallbackPolicy.MOCK,
            lambda: mock_players_by_ids(ids),
        )
