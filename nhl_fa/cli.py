"""Command-line interface for the free agent projections."""

import click
from rich.console import Console
from rich.table import Table

from .config import get_settings
from .exceptions import DataAccessError
from .filters import VALUE_BANDS, filter_players, order_by_ids, parse_id_list, value_band
from .models import FetchResult, Player, sort_newest_first
from .repositories import PlayerRepository, StatsRepository
from .storage import Database
from .utils import setup_logging

console = Console()


def _fmt(value: float | int | None, spec: str = "") -> str:
    if value is None:
        return "-"
    return format(value, spec)


def _notice(result: FetchResult, what: str) -> None:
    """Tell the user when a view is not backed by the store."""
    if result.source == "mock":
        reason = f": {result.error.message}" if result.error else ""
        console.print(f"[yellow]⚠ Showing sample {what}{reason}[/yellow]")
    elif result.source == "empty" and result.error:
        console.print(f"[yellow]⚠ {what.capitalize()} unavailable: {result.error.message}[/yellow]")


def _player_table(players: list[Player], title: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Pos", style="green")
    table.add_column("Team")
    table.add_column("Type")
    table.add_column("AAV ($M)", justify="right", style="bold")
    table.add_column("Term", justify="right")
    table.add_column("Tier")
    table.add_column("Score", justify="right")

    for p in players:
        table.add_row(
            str(p.id),
            p.name,
            p.position,
            p.team,
            p.contract_type,
            _fmt(p.projected_aav, ".2f"),
            str(p.projected_term),
            p.value_tier or "-",
            _fmt(p.contract_value_score),
        )
    return table


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Output logs as JSON")
@click.pass_context
def main(ctx: click.Context, verbose: bool, json_logs: bool) -> None:
    """NHL Free Agent Evaluation - projected contracts and player stats."""
    ctx.ensure_object(dict)
    settings = get_settings()
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        json_output=json_logs or settings.log_json,
    )
    if "db" not in ctx.obj:
        ctx.obj["db"] = Database.from_settings(settings)

    db: Database = ctx.obj["db"]
    ctx.obj["players"] = PlayerRepository(db)
    ctx.obj["stats"] = StatsRepository(db)


@main.command()
@click.option("--search", "-q", default="", help="Filter by name")
@click.option("--position", "-p", type=click.Choice(["C", "LW", "RW", "D", "G"]), help="Filter by position")
@click.option("--band", "-b", type=click.Choice(VALUE_BANDS), help="Filter by contract value band")
@click.pass_context
def players(ctx: click.Context, search: str, position: str | None, band: str | None) -> None:
    """List projected free agents by projected AAV."""
    repo: PlayerRepository = ctx.obj["players"]
    result = repo.get_players()
    _notice(result, "players")

    shown = filter_players(result.data, search=search, position=position, band=band)
    console.print(_player_table(shown, f"Free Agents ({len(shown)})"))


@main.command()
@click.argument("player_id", type=int)
@click.pass_context
def player(ctx: click.Context, player_id: int) -> None:
    """Show projection, season stats and GAR trend for a player."""
    players_repo: PlayerRepository = ctx.obj["players"]
    stats_repo: StatsRepository = ctx.obj["stats"]

    result = players_repo.get_player_by_id(player_id)
    p = result.data
    if p is None:
        console.print(f"[red]✗ Player {player_id} not found[/red]")
        ctx.exit(1)
    _notice(result, "player data")

    console.print(f"\n[bold]{p.name}[/bold]")
    console.print(f"[dim]{p.position} • {p.team} • {p.contract_type} • Age {_fmt(p.age)}[/dim]\n")

    info = Table(show_header=False, box=None)
    info.add_column("Field", style="cyan")
    info.add_column("Value")
    info.add_row("Projected AAV", f"${p.projected_aav:.2f}M")
    info.add_row("Projected Term", f"{p.projected_term} years")
    info.add_row("Value Tier", p.value_tier or "-")
    info.add_row("Value Score", f"{_fmt(p.contract_value_score)} ({value_band(p.contract_value_score) or '-'})")
    info.add_row("Projected GAR 25-26", _fmt(p.projected_gar_2526, ".1f"))
    if p.is_goalie:
        estimated = " (est.)" if p.estimated_metrics else ""
        info.add_row("Save %", _fmt(p.save_percentage, ".3f") + estimated)
        info.add_row("GAA", _fmt(p.goals_against_average, ".2f") + estimated)
    else:
        info.add_row("Recent Points", _fmt(p.recent_production, ".0f"))
        info.add_row("Points/Game", _fmt(p.points_per_game, ".2f"))
    console.print(info)
    console.print(f"\n{p.value_assessment}\n")

    stats_result = stats_repo.get_player_stats(player_id)
    _notice(stats_result, "season stats")
    if stats_result.data:
        table = Table(title="Season Stats")
        table.add_column("Season", style="cyan")
        table.add_column("GP", justify="right")
        table.add_column("G", justify="right")
        table.add_column("A", justify="right")
        table.add_column("P", justify="right", style="bold")
        table.add_column("TOI", justify="right")
        table.add_column("GAR", justify="right", style="green")
        table.add_column("WAR", justify="right")
        for s in sort_newest_first(stats_result.data):
            table.add_row(
                s.season,
                str(s.games_played),
                _fmt(s.goals),
                _fmt(s.assists),
                _fmt(s.points),
                _fmt(s.time_on_ice, ".1f"),
                _fmt(s.goals_above_replacement, ".1f"),
                _fmt(s.wins_above_replacement, ".1f"),
            )
        console.print(table)
    else:
        console.print("[dim]No season stats recorded[/dim]")

    gar_result = stats_repo.get_player_gar_data(player_id)
    _notice(gar_result, "GAR data")
    if gar_result.data:
        trend = "  →  ".join(f"{g.season}: {g.gar:.1f}" for g in gar_result.data)
        console.print(f"\n[bold]GAR trend[/bold]  {trend}")


@main.command()
@click.argument("ids")
@click.pass_context
def compare(ctx: click.Context, ids: str) -> None:
    """Compare players side by side (comma separated IDS)."""
    try:
        player_ids = parse_id_list(ids)
    except ValueError:
        raise click.BadParameter(f"expected comma separated integers, got {ids!r}", param_hint="IDS") from None
    if not player_ids:
        raise click.BadParameter("no player ids given", param_hint="IDS")

    players_repo: PlayerRepository = ctx.obj["players"]
    stats_repo: StatsRepository = ctx.obj["stats"]

    result = players_repo.get_players_by_ids(player_ids)
    _notice(result, "players")
    selected = order_by_ids(result.data, player_ids)
    if not selected:
        console.print("[red]✗ None of the requested players were found[/red]")
        ctx.exit(1)

    console.print(_player_table(selected, "Player Comparison"))

    gar_result = stats_repo.get_players_gar_data([p.id for p in selected])
    _notice(gar_result, "GAR data")

    table = Table(title="GAR by Season")
    table.add_column("Season", style="cyan")
    for p in selected:
        table.add_column(p.name, justify="right")

    seasons = sorted({g.season for g in gar_result.data})
    lookup = {(g.player_id, g.season): g.gar for g in gar_result.data}
    for season in seasons:
        table.add_row(season, *(_fmt(lookup.get((p.id, season)), ".1f") for p in selected))
    console.print(table)


@main.command("check-db")
@click.pass_context
def check_db(ctx: click.Context) -> None:
    """Test the database connection."""
    db: Database = ctx.obj["db"]
    console.print(f"[dim]Database: {db.redacted_url}[/dim]")

    if db.test_connection():
        console.print("[green]✓ Database connection OK[/green]")
        return

    console.print("[red]✗ Database connection failed[/red]")
    ctx.exit(1)


@main.command("table-info")
@click.pass_context
def table_info(ctx: click.Context) -> None:
    """Show which tables exist and their columns."""
    db: Database = ctx.obj["db"]
    try:
        info = db.table_info()
    except DataAccessError as e:
        console.print(f"[red]✗ {e}[/red]")
        ctx.exit(1)

    table = Table(title="Tables")
    table.add_column("Table", style="cyan")
    table.add_column("Exists")
    table.add_column("Columns", justify="right", style="green")
    for name, details in info.items():
        table.add_row(
            name,
            "[green]yes[/green]" if details["exists"] else "[red]no[/red]",
            str(len(details["columns"])),
        )
    console.print(table)


if __name__ == "__main__":
    main()
