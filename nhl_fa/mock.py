"""Static sample data served when the store cannot be read.

Fixed at import time. Nothing here is ever populated from real data.
"""

from collections.abc import Iterable

from .models import GarData, Player, PlayerStat

MOCK_PLAYERS: tuple[Player, ...] = (
    Player(
        id=1,
        name="Connor McDavid",
        age=28,
        position="C",
        team="Edmonton",
        contract_type="UFA",
        projected_aav=15.5,
        projected_term=8,
        value_tier="Fair Deal",
        contract_value_score=60,
        value_per_gar=0.62,
        value_assessment=(
            "Elite center who drives play and produces at historic levels. "
            "Worth every penny of a max contract."
        ),
        recent_production=152,
        recent_gar=24.5,
        points_per_game=1.85,
        projected_gar_2526=25.2,
    ),
    Player(
        id=2,
        name="Auston Matthews",
        age=28,
        position="C",
        team="Toronto",
        contract_type="UFA",
        projected_aav=14.2,
        projected_term=7,
        value_tier="Fair Deal",
        contract_value_score=58,
        value_per_gar=0.78,
        value_assessment=(
            "Premier goal scorer with two-way impact. Price reflects elite "
            "finishing, with some risk as he ages past 30."
        ),
        recent_production=78,
        recent_gar=17.8,
        points_per_game=1.16,
        projected_gar_2526=18.1,
    ),
)

MOCK_STATS: tuple[PlayerStat, ...] = (
    PlayerStat(player_id=1, season="2022-23", team="Edmonton", position="C", games_played=82,
               goals=64, assists=89, points=153, time_on_ice=22.2, goals_above_replacement=28.1,
               wins_above_replacement=5.0),
    PlayerStat(player_id=1, season="2023-24", team="Edmonton", position="C", games_played=76,
               goals=32, assists=100, points=132, time_on_ice=21.3, goals_above_replacement=26.4,
               wins_above_replacement=4.7),
    PlayerStat(player_id=1, season="2024-25", team="Edmonton", position="C", games_played=67,
               goals=26, assists=74, points=100, time_on_ice=21.6, goals_above_replacement=24.5,
               wins_above_replacement=4.3),
    PlayerStat(player_id=2, season="2022-23", team="Toronto", position="C", games_played=74,
               goals=40, assists=45, points=85, time_on_ice=20.9, goals_above_replacement=19.6,
               wins_above_replacement=3.5),
    PlayerStat(player_id=2, season="2023-24", team="Toronto", position="C", games_played=81,
               goals=69, assists=38, points=107, time_on_ice=20.8, goals_above_replacement=27.3,
               wins_above_replacement=4.9),
    PlayerStat(player_id=2, season="2024-25", team="Toronto", position="C", games_played=67,
               goals=33, assists=45, points=78, time_on_ice=20.3, goals_above_replacement=17.8,
               wins_above_replacement=3.2),
)

MOCK_GAR_DATA: tuple[GarData, ...] = tuple(
    GarData(player_id=s.player_id, season=s.season, gar=s.goals_above_replacement)
    for s in MOCK_STATS
    if s.goals_above_replacement is not None
)


def mock_player(player_id: int) -> Player | None:
    for player in MOCK_PLAYERS:
        if player.id == player_id:
            return player
    return None


def mock_players_by_ids(player_ids: Iterable[int]) -> list[Player]:
    wanted = set(player_ids)
    return [p for p in MOCK_PLAYERS if p.id in wanted]


def mock_stats(player_id: int) -> list[PlayerStat]:
    return [s for s in MOCK_STATS if s.player_id == player_id]


def mock_gar_data(player_ids: Iterable[int]) -> list[GarData]:
    """Mock GAR points for the given players, grouped in the order requested."""
    points = []
    for player_id in dict.fromkeys(player_ids):
        points.extend(g for g in MOCK_GAR_DATA if g.player_id == player_id)
    return points


def is_mock_dataset(players: list[Player]) -> bool:
    """Whether a player list is the full sample list."""
    return [p.id for p in players] == [p.id for p in MOCK_PLAYERS] and all(
        a.name == b.name for a, b in zip(players, MOCK_PLAYERS)
    )
