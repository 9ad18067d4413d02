"""Table definitions for the projection and stats store.

The ``stats`` table is wide: one row per player, with every metric repeated
once per season as ``<metric>_<season suffix>`` (e.g. ``goals_22_23``).
"""

from sqlalchemy import Column, Float, Integer, MetaData, String, Table

from ..models.stats import SEASON_SUFFIXES

metadata = MetaData()

# Metric column prefixes and their types
SEASON_METRICS: dict[str, type] = {
    "gp": Integer,
    "goals": Integer,
    "a1": Integer,  # Primary assists, used as the assist count
    "points": Integer,
    "toi": Float,
    "giveaways": Integer,
    "takeaways": Integer,
    "icf": Integer,
    "ixg": Float,
    "gar": Float,
    "war": Float,
    "cf_pct": Float,
    "xg": Float,
    "xgd": Float,
    # Goalies
    "wins": Integer,
    "losses": Integer,
    "otl": Integer,
    "sv_pct": Float,
    "gaa": Float,
    "so": Integer,
    "gsaa": Float,
    "hdsv_pct": Float,
    "mdsv_pct": Float,
    "ldsv_pct": Float,
    "qs_pct": Float,
}


def season_column(metric: str, suffix: str) -> str:
    """Column name for a metric in a given season, e.g. ``gar_24_25``."""
    return f"{metric}_{suffix}"


def _season_columns() -> list[Column]:
    return [
        Column(season_column(metric, suffix), col_type)
        for suffix in SEASON_SUFFIXES
        for metric, col_type in SEASON_METRICS.items()
    ]


projected_contracts = Table(
    "projected_contracts",
    metadata,
    Column("player_id", Integer, primary_key=True),
    Column("player_name", String(100)),
    Column("age", Integer),
    Column("aav", Float),  # Millions
    Column("contract_term", Integer),
    Column("value_category", String(20)),
    Column("projected_gar_25_26", Float),
    Column("value_score", Integer),
    Column("value_per_gar", Float),
)

stats = Table(
    "stats",
    metadata,
    Column("player_id", Integer, primary_key=True),
    Column("player_name", String(100)),
    Column("position", String(2)),
    Column("prev_team", String(50)),
    Column("contract_type", String(3)),
    *_season_columns(),
)
