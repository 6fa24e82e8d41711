"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Card, Family
from ..state import Player
from .views import FamilyLegendView, HandView, StandingsView

_FAMILY_COLOURS = {
    Family.BLOCK: "cyan",
    Family.BONES: "red",
    Family.BUN: "yellow",
    Family.BUNG: "green",
    Family.CHIP: "magenta",
    Family.DIP: "blue",
    Family.DOSE: "bright_cyan",
    Family.GRITS: "bright_red",
    Family.POTS: "bright_yellow",
    Family.SOOT: "bright_black",
    Family.TAPE: "bright_magenta",
}


def family_colour(family: Family) -> str:
    return _FAMILY_COLOURS.get(family, "white")


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    colour = family_colour(card.family)
    return f"[{colour}]{card.family.value}[/{colour}] [bold]{card.role.value}[/bold]"


def render_hand(player_name: str, cards: Sequence[Card]) -> RenderableType:
    """Return a Rich panel listing ``cards`` grouped by family."""

    view = HandView(cards=cards, card_formatter=format_card)
    return Panel(view.render(), title=f"{player_name}'s hand", padding=(0, 1), border_style="cyan")


def render_legend() -> RenderableType:
    view = FamilyLegendView(colour_for=family_colour)
    return Panel(view.render(), title="Families", padding=(0, 1), border_style="blue")


def render_standings(players: Sequence[Player], winner_index: int | None) -> RenderableType:
    view = StandingsView(players=players, winner_index=winner_index)
    return Panel(view.render(), title="Final Standings", padding=(0, 1), border_style="green")
