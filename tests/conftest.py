"""Pytest fixtures: a scratch SQLite store shaped like the production tables."""

import pytest
import structlog
from sqlalchemy import insert

from nhl_fa.storage import Database, metadata, projected_contracts, stats


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop any logging config a CLI test installed against its captured streams."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def clean_env(monkeypatch):
    """No connection variables from the surrounding shell."""
    for var in (
        "DATABASE_URL",
        "DATABASE_HOST",
        "DATABASE_USER",
        "DATABASE_PASSWORD",
        "DATABASE_NAME",
        "DATABASE_PORT",
        "DATABASE_DRIVER",
    ):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def store_url(tmp_path):
    return f"sqlite:///{tmp_path / 'nhl.db'}"


@pytest.fixture
def empty_db(store_url):
    """A reachable store without any tables."""
    db = Database(store_url)
    yield db
    db.dispose()


@pytest.fixture
def db(empty_db):
    """A reachable store with empty projection and stats tables."""
    metadata.create_all(empty_db.get_engine())
    return empty_db


@pytest.fixture
def offline_db():
    """No store configured, as when rendering without server access."""
    return Database(None)


@pytest.fixture
def add_rows(db):
    """Insert rows into a table: add_rows(stats, {...}, {...})."""

    def _add(table, *rows):
        with db.get_engine().begin() as conn:
            for row in rows:
                conn.execute(insert(table).values(**row))

    return _add


@pytest.fixture
def seeded_db(db, add_rows):
    """Four projected free agents covering forwards, a defenseman and a goalie."""
    add_rows(
        projected_contracts,
        {"player_id": 101, "player_name": "Mitch Marner", "age": 28, "aav": 12.0,
         "contract_term": 7, "value_category": "Fair Deal", "projected_gar_25_26": 15.8,
         "value_score": 62, "value_per_gar": 0.76},
        {"player_id": 102, "player_name": "Brad Marchand", "age": 37, "aav": 5.5,
         "contract_term": 2, "value_category": "Overpay", "projected_gar_25_26": 6.1,
         "value_score": 30, "value_per_gar": 0.9},
        {"player_id": 103, "player_name": "Linus Ullmark", "age": 32, "aav": 6.0,
         "contract_term": 4, "value_category": "Bargain", "projected_gar_25_26": 14.0,
         "value_score": 85, "value_per_gar": 0.43},
        {"player_id": 104, "player_name": "Aaron Ekblad", "age": 29, "aav": 7.0,
         "contract_term": 5, "value_category": None, "projected_gar_25_26": None,
         "value_score": None, "value_per_gar": None},
    )
    add_rows(
        stats,
        {"player_id": 101, "player_name": "Mitch Marner", "position": "RW", "prev_team": "Toronto",
         "contract_type": "UFA",
         "goals_23_24": 26, "a1_23_24": 59, "points_23_24": 90, "gp_23_24": 69, "toi_23_24": 20.6,
         "gar_23_24": 14.2,
         "goals_24_25": 27, "a1_24_25": 75, "gp_24_25": 81, "toi_24_25": 21.1, "gar_24_25": 16.0,
         "war_24_25": 2.9},
        {"player_id": 102, "player_name": "Brad Marchand", "position": "L", "prev_team": "Florida",
         "contract_type": "ufa",
         "goals_22_23": 21, "a1_22_23": 46, "toi_22_23": 18.1, "gar_22_23": 9.5,
         "goals_23_24": 29, "a1_23_24": 38, "toi_23_24": 18.5, "gar_23_24": 11.0,
         "goals_24_25": 21, "a1_24_25": 26, "gp_24_25": 76, "toi_24_25": 17.9, "gar_24_25": 6.4},
        {"player_id": 103, "player_name": "Linus Ullmark", "position": "G", "prev_team": "Ottawa",
         "contract_type": "UFA",
         "gar_23_24": 12.3, "gar_24_25": 10.9, "gp_24_25": 44, "wins_24_25": 25, "losses_24_25": 14,
         "otl_24_25": 4, "sv_pct_24_25": 0.910, "gaa_24_25": 2.72},
        {"player_id": 104, "player_name": "Aaron Ekblad", "position": "D", "prev_team": "Florida",
         "contract_type": "RFA", "gar_24_25": 7.5},
    )
    return db
