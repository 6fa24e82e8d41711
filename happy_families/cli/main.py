"""Typer entry-point wiring for the Happy Families CLI."""

from __future__ import annotations

import logging
import random
from enum import Enum

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from .. import scoreboard
from ..engine import GameEngine
from ..log import setup_logging
from ..ports import InteractionPort
from ..state import DEFAULT_DEAL_TOTAL, MAX_PLAYERS, MIN_PLAYERS, GameConfig
from .console import ConsoleInteraction
from .render import render_legend, render_standings

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def _make_port(target: Console) -> InteractionPort:
    return ConsoleInteraction(target)


def _render_match_summary(history: scoreboard.MatchHistory, names: list[str]) -> Table:
    """Return the aggregated session summary table."""

    leaders = set(history.leaders())
    table = Table(title=f"Session Summary ({len(history.games)} games)", box=box.DOUBLE_EDGE)
    table.add_column("Player", justify="center")
    table.add_column("Wins", justify="right")
    table.add_column("Families", justify="right")
    table.add_column("Cards Left", justify="right")

    for total in history.totals():
        label = names[total.player_index]
        wins = str(total.wins)
        if total.player_index in leaders:
            label = f"[bold blue]{label}[/bold blue]"
            wins = f"[bold blue]{wins}[/bold blue]"
        table.add_row(label, wins, str(total.families_completed), str(total.cards_left))
    return table


@app.command()
def play(
    players: int | None = typer.Option(None, help="Number of players (2-4); prompted for when omitted."),
    deal_total: int = typer.Option(
        DEFAULT_DEAL_TOTAL, min=0, help="Cards dealt in total, split evenly between players."
    ),
    cards_per_player: int | None = typer.Option(
        None, min=0, help="Deal exactly this many cards to each player instead of splitting the total."
    ),
    games: int = typer.Option(1, min=1, help="Number of games to play in this session."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible shuffles (omit for randomness)."),
    log_level: LogLevel = typer.Option(LogLevel.WARNING, case_sensitive=False, help="Diagnostic logging level."),
) -> None:
    """Play Happy Families at a single terminal."""

    setup_logging(log_level.value)

    if players is None:
        players = typer.prompt(f"Enter the number of players ({MIN_PLAYERS}-{MAX_PLAYERS})", type=int)
    if players < MIN_PLAYERS or players > MAX_PLAYERS:
        console.print(
            f"[red]Invalid number of players. The game supports {MIN_PLAYERS}-{MAX_PLAYERS} players.[/red]"
        )
        raise typer.Exit(code=1)

    try:
        config = GameConfig(
            num_players=players,
            deal_total=deal_total,
            cards_per_player_override=cards_per_player,
        )
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    rng = random.Random(seed)
    port = _make_port(console)
    history = scoreboard.MatchHistory(num_players=players)
    names: list[str] = []

    for game_number in range(1, games + 1):
        if games > 1:
            console.rule(f"Game {game_number} of {games}")
        engine = GameEngine(config, port, rng=rng)
        names = [player.name for player in engine.players]
        winner = engine.play()
        history.record(scoreboard.summarize_game(engine, game_number))
        console.print(render_standings(engine.players, engine.winner_index))
        logger.info("Game %d won by %s", game_number, winner.name)

    if games > 1:
        console.print(_render_match_summary(history, names))


@app.command()
def families() -> None:
    """List the families and roles in the deck."""

    console.print(render_legend())


def main() -> None:
    """Entry-point for ``python -m happy_families.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
