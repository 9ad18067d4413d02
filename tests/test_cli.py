"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from nhl_fa.cli import main
from nhl_fa.config import get_settings


@pytest.fixture
def run():
    runner = CliRunner(env={"COLUMNS": "200"})

    def _run(db, *args):
        return runner.invoke(main, list(args), obj={"db": db})

    return _run


class TestPlayersCommand:
    def test_lists_store_players(self, run, seeded_db):
        result = run(seeded_db, "players")

        assert result.exit_code == 0, result.output
        assert "Marner" in result.output
        assert "Ullmark" in result.output
        assert "sample" not in result.output

    def test_filters(self, run, seeded_db):
        result = run(seeded_db, "players", "--position", "G")

        assert result.exit_code == 0, result.output
        assert "Ullmark" in result.output
        assert "Marner" not in result.output

    def test_offline_shows_sample_notice(self, run, offline_db):
        result = run(offline_db, "players")

        assert result.exit_code == 0, result.output
        assert "Showing sample players" in result.output
        assert "McDavid" in result.output

    def test_unparsable_database_url_shows_sample(self, clean_env):
        clean_env.setenv("DATABASE_URL", "not a database url")
        get_settings.cache_clear()
        try:
            result = CliRunner(env={"COLUMNS": "200"}).invoke(main, ["players"])
        finally:
            get_settings.cache_clear()

        assert result.exit_code == 0, result.output
        assert "Showing sample players" in result.output
        assert "McDavid" in result.output


class TestPlayerCommand:
    def test_player_detail(self, run, seeded_db):
        result = run(seeded_db, "player", "101")

        assert result.exit_code == 0, result.output
        assert "Mitch Marner" in result.output
        assert "Season Stats" in result.output
        assert "2023-24" in result.output
        assert "GAR trend" in result.output

    def test_goalie_estimates_marked(self, run, seeded_db):
        result = run(seeded_db, "player", "103")

        assert result.exit_code == 0, result.output
        assert "(est.)" in result.output

    def test_not_found(self, run, seeded_db):
        result = run(seeded_db, "player", "5555")

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_offline_player(self, run, offline_db):
        result = run(offline_db, "player", "1")

        assert result.exit_code == 0, result.output
        assert "Connor McDavid" in result.output
        assert "Season stats unavailable" in result.output


class TestCompareCommand:
    def test_compare(self, run, seeded_db):
        result = run(seeded_db, "compare", "102,101")

        assert result.exit_code == 0, result.output
        assert "Player Comparison" in result.output
        assert "GAR by Season" in result.output
        assert result.output.index("Marchand") < result.output.index("Marner")

    def test_bad_ids(self, run, seeded_db):
        result = run(seeded_db, "compare", "101,abc")
        assert result.exit_code == 2

    def test_nothing_found(self, run, seeded_db):
        result = run(seeded_db, "compare", "5555")
        assert result.exit_code == 1


class TestDatabaseCommands:
    def test_check_db_ok(self, run, db):
        result = run(db, "check-db")
        assert result.exit_code == 0
        assert "connection OK" in result.output

    def test_check_db_offline(self, run, offline_db):
        result = run(offline_db, "check-db")
        assert result.exit_code == 1
        assert "Not set" in result.output

    def test_table_info(self, run, db):
        result = run(db, "table-info")
        assert result.exit_code == 0, result.output
        assert "projected_contracts" in result.output

    def test_table_info_offline(self, run, offline_db):
        result = run(offline_db, "table-info")
        assert result.exit_code == 1
