from __future__ import annotations

from typing import Iterable, Sequence

import pytest

from happy_families.cards import Card


class ScriptedPort:
    """Interaction port replaying a fixed list of (family, role) requests."""

    def __init__(self, requests: Iterable[tuple[str, str]] = ()) -> None:
        self.requests = list(requests)
        self.messages: list[str] = []
        self.hands: list[tuple[str, list[Card]]] = []

    def prompt_family(self) -> str:
        return self.requests[0][0]

    def prompt_role(self) -> str:
        return self.requests.pop(0)[1]

    def display_hand(self, player_name: str, cards: Sequence[Card]) -> None:
        self.hands.append((player_name, list(cards)))

    def display_message(self, text: str) -> None:
        self.messages.append(text)


class FirstCardPort(ScriptedPort):
    """Always asks for the first card of the hand shown last."""

    def prompt_family(self) -> str:
        _, cards = self.hands[-1]
        return cards[0].family.value if cards else ""

    def prompt_role(self) -> str:
        _, cards = self.hands[-1]
        return cards[0].role.value if cards else ""


@pytest.fixture
def scripted_port() -> type[ScriptedPort]:
    return ScriptedPort


@pytest.fixture
def first_card_port() -> type[FirstCardPort]:
    return FirstCardPort
