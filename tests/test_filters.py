"""Tests for listing filters, comparison ordering and the sample dataset."""

import pytest

from nhl_fa.filters import filter_players, order_by_ids, parse_id_list, value_band
from nhl_fa.mock import (
    MOCK_GAR_DATA,
    MOCK_PLAYERS,
    MOCK_STATS,
    is_mock_dataset,
    mock_player,
    mock_stats,
)
from nhl_fa.models import Player


def make_player(player_id: int, name: str, position: str = "C", score: int | None = None) -> Player:
    return Player(
        id=player_id,
        name=name,
        position=position,
        team="Test",
        projected_aav=1.0,
        projected_term=1,
        contract_value_score=score,
    )


@pytest.fixture
def players():
    return [
        make_player(1, "Sam Reinhart", "C", 82),
        make_player(2, "Jake Guentzel", "LW", 66),
        make_player(3, "Cale Makar", "D", 50),
        make_player(4, "Igor Shesterkin", "G", 34),
        make_player(5, "Sam Bennett", "C", None),
    ]


class TestValueBand:
    """Tests for value_band."""

    @pytest.mark.parametrize(
        "score,band",
        [(100, "excellent"), (80, "excellent"), (79, "good"), (65, "good"), (64, "fair"),
         (50, "fair"), (49, "below-average"), (35, "below-average"), (34, "poor"), (0, "poor")],
    )
    def test_thresholds(self, score, band):
        assert value_band(score) == band

    def test_no_score(self):
        assert value_band(None) is None


class TestFilterPlayers:
    """Tests for filter_players."""

    def test_no_filters(self, players):
        assert filter_players(players) == players

    def test_search_is_case_insensitive(self, players):
        assert [p.id for p in filter_players(players, search="sam")] == [1, 5]

    def test_position(self, players):
        assert [p.id for p in filter_players(players, position="G")] == [4]
        assert len(filter_players(players, position="all")) == 5

    def test_band(self, players):
        assert [p.id for p in filter_players(players, band="good")] == [2]
        assert [p.id for p in filter_players(players, band="poor")] == [4]

    def test_combined(self, players):
        assert filter_players(players, search="sam", band="excellent") == [players[0]]


class TestComparisonHelpers:
    """Tests for id parsing and ordering."""

    def test_order_by_ids(self, players):
        shuffled = [players[2], players[0], players[1]]
        assert [p.id for p in order_by_ids(shuffled, [2, 9, 3, 1])] == [2, 3, 1]

    def test_parse_id_list(self):
        assert parse_id_list("12, 40,7,") == [12, 40, 7]
        assert parse_id_list("") == []

    def test_parse_id_list_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_id_list("12,abc")


class TestMockDataset:
    """Tests for the sample dataset."""

    def test_two_players(self):
        assert [p.name for p in MOCK_PLAYERS] == ["Connor McDavid", "Auston Matthews"]
        assert is_mock_dataset(list(MOCK_PLAYERS))

    def test_real_list_not_detected_as_mock(self, players):
        assert not is_mock_dataset(players)
        assert not is_mock_dataset(list(MOCK_PLAYERS[:1]))

    def test_fixture_values(self):
        mcdavid = mock_player(1)
        assert mcdavid.recent_production == 152
        assert mcdavid.points_per_game == 1.85
        assert mcdavid.contract_value_score == 60

    def test_lookup(self):
        assert mock_player(1).name == "Connor McDavid"
        assert mock_player(404) is None

    def test_stats_and_gar_cover_every_mock_player(self):
        for player in MOCK_PLAYERS:
            assert len(mock_stats(player.id)) == 3
        assert len(MOCK_GAR_DATA) == len(MOCK_STATS)

    def test_mock_points_add_up(self):
        for stat in MOCK_STATS:
            assert stat.points == stat.goals + stat.assists
