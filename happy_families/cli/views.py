"""Composable view primitives for the Happy Families CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from rich import box
from rich.console import RenderableType
from rich.table import Table
from rich.text import Text

from ..cards import Card, Family, Role
from ..state import Player


@dataclass(slots=True)
class HandView:
    """Renderable listing a hand, one family per row."""

    cards: Sequence[Card]
    card_formatter: Callable[[Card], str]

    def render(self) -> RenderableType:
        if not self.cards:
            return Text("No cards in hand", style="dim")

        table = Table(box=box.SIMPLE, expand=True)
        table.add_column("Family", justify="left", style="bold")
        table.add_column("Held", justify="right")
        table.add_column("Cards", justify="left")

        by_family: dict[Family, list[Card]] = {}
        for card in self.cards:
            by_family.setdefault(card.family, []).append(card)

        role_order = list(Role)
        for family in Family:
            held = by_family.get(family)
            if not held:
                continue
            held.sort(key=lambda card: role_order.index(card.role))
            cards_display = ", ".join(self.card_formatter(card) for card in held)
            table.add_row(family.value, f"{len(held)}/{len(role_order)}", cards_display)
        return table


@dataclass(slots=True)
class FamilyLegendView:
    """Numbered family list, so players can answer prompts by number."""

    colour_for: Callable[[Family], str]

    def render(self) -> RenderableType:
        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold")
        table.add_column(justify="left")
        for idx, family in enumerate(Family, start=1):
            colour = self.colour_for(family)
            table.add_row(str(idx), f"[{colour}]{family.value}[/{colour}]")
        roles = ", ".join(f"{idx}={role.value}" for idx, role in enumerate(Role, start=1))
        table.add_row("", f"[dim]Roles: {roles}[/dim]")
        return table


@dataclass(slots=True)
class StandingsView:
    """Renderable summarising every player at the end of a game."""

    players: Sequence[Player]
    winner_index: int | None

    def render(self) -> RenderableType:
        table = Table(box=box.ROUNDED, expand=True)
        table.add_column("Player", justify="left", style="bold")
        table.add_column("Hand", justify="right")
        table.add_column("Families", justify="left")
        table.add_column("Result", justify="left")

        for idx, player in enumerate(self.players):
            families = ", ".join(family.value for family in player.families) or "—"
            name = player.name
            result = ""
            if idx == self.winner_index:
                name = f"[bold green]{name}[/bold green]"
                result = "[bold green]Winner[/bold green]"
            table.add_row(name, str(player.hand_size), families, result)
        return table
