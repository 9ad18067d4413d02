"""Player list filtering and ordering for the listing and comparison views."""

from collections.abc import Iterable, Sequence
from typing import Literal

from .models import Player

ValueBand = Literal["excellent", "good", "fair", "below-average", "poor"]

VALUE_BANDS: tuple[str, ...] = ("excellent", "good", "fair", "below-average", "poor")


def value_band(score: int | None) -> ValueBand | None:
    """Bucket a 0-100 contract value score."""
    if score is None:
        return None
    if score >= 80:
        return "excellent"
    if score >= 65:
        return "good"
    if score >= 50:
        return "fair"
    if score >= 35:
        return "below-average"
    return "poor"


def filter_players(
    players: Iterable[Player],
    search: str = "",
    position: str | None = None,
    band: str | None = None,
) -> list[Player]:
    """Filter by name substring, position and value band. ``None``/"all" disables a filter."""
    needle = search.strip().lower()
    result = []
    for player in players:
        if needle and needle not in player.name.lower():
            continue
        if position and position != "all" and player.position != position:
            continue
        if band and band != "all" and value_band(player.contract_value_score) != band:
            continue
        result.append(player)
    return result


def order_by_ids(players: Iterable[Player], player_ids: Sequence[int]) -> list[Player]:
    """Re-sort players into the order of ``player_ids``, dropping unmatched ids."""
    by_id = {p.id: p for p in players}
    return [by_id[i] for i in dict.fromkeys(player_ids) if i in by_id]


def parse_id_list(raw: str) -> list[int]:
    """Parse a comma separated id list like "12,40,7".

    Raises ValueError on any non-integer entry.
    """
    ids = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        ids.append(int(part))
    return ids
