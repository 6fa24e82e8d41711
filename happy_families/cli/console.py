"""Console implementation of the engine's interaction port."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.prompt import Prompt

from ..cards import Card, Family, Role
from .render import render_hand, render_legend

__all__ = ["ConsoleInteraction", "resolve_family", "resolve_role"]


def resolve_family(text: str) -> str:
    """Expand prompt shorthand into a family name.

    Accepts a legend number, the full name in any case, or the leading
    surname ("bun"). Anything else is returned stripped but otherwise
    untouched, and simply will not match a card.
    """

    answer = text.strip()
    families = list(Family)
    if answer.isdigit():
        idx = int(answer) - 1
        if 0 <= idx < len(families):
            return families[idx].value
        return answer
    lowered = answer.lower()
    for family in families:
        if lowered in (family.value.lower(), family.name.lower()):
            return family.value
    return answer


def resolve_role(text: str) -> str:
    """Expand a role number or initial into its role name."""

    answer = text.strip()
    roles = list(Role)
    if answer.isdigit():
        idx = int(answer) - 1
        if 0 <= idx < len(roles):
            return roles[idx].value
        return answer
    lowered = answer.lower()
    for role in roles:
        if lowered in (role.value, role.value[0]):
            return role.value
    return answer


class ConsoleInteraction:
    """Rich-backed prompts and narration for a hot-seat game."""

    def __init__(self, console: Console | None = None, *, show_legend: bool = True) -> None:
        self.console = console or Console()
        self.show_legend = show_legend

    def prompt_family(self) -> str:
        answer = Prompt.ask("Enter the family name (or number)", console=self.console)
        return resolve_family(answer)

    def prompt_role(self) -> str:
        answer = Prompt.ask("Enter the role (father, mother, son, daughter)", console=self.console)
        return resolve_role(answer)

    def display_hand(self, player_name: str, cards: Sequence[Card]) -> None:
        self.console.print(render_hand(player_name, cards))
        if self.show_legend:
            self.console.print(render_legend())

    def display_message(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False)
