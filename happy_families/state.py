"""Core game state data structures for Happy Families."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List

from .cards import CARDS_PER_FAMILY, Card, Family

__all__ = [
    "MIN_PLAYERS",
    "MAX_PLAYERS",
    "DEFAULT_DEAL_TOTAL",
    "GamePhase",
    "GameConfig",
    "Hand",
    "Player",
]

MIN_PLAYERS = 2
MAX_PLAYERS = 4
DEFAULT_DEAL_TOTAL = 8


class GamePhase(str, Enum):
    """Phases the engine moves through over a single game."""

    DEALING = "dealing"
    TURN_LOOP = "turn_loop"
    GAME_OVER = "game_over"


@dataclass(slots=True)
class GameConfig:
    """Runtime configuration for a single game."""

    num_players: int
    deal_total: int = DEFAULT_DEAL_TOTAL
    cards_per_player_override: int | None = None

    def __post_init__(self) -> None:
        if not MIN_PLAYERS <= self.num_players <= MAX_PLAYERS:
            raise ValueError(
                f"num_players must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {self.num_players}"
            )
        if self.deal_total < 0:
            raise ValueError("deal_total must not be negative")
        if self.cards_per_player_override is not None and self.cards_per_player_override < 0:
            raise ValueError("cards_per_player_override must not be negative")

    @property
    def cards_per_player(self) -> int:
        """Return how many cards each player receives in the opening deal.

        Without an override the deal total is split evenly and the remainder
        is not dealt, so three players receive two cards each from a total of 8.
        """

        if self.cards_per_player_override is not None:
            return self.cards_per_player_override
        return self.deal_total // self.num_players


@dataclass(slots=True)
class Hand:
    """Unordered collection of the cards a single player holds."""

    cards: List[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        self.cards.append(card)

    def has_card(self, family: str, role: str) -> bool:
        return self.find_card(family, role) is not None

    def find_card(self, family: str, role: str) -> Card | None:
        """Return the held card matching ``family`` and ``role`` if any."""

        for card in self.cards:
            if card.matches(family, role):
                return card
        return None

    def remove_card(self, card: Card) -> bool:
        """Remove the card equal to ``card``; return whether one was held."""

        try:
            self.cards.remove(card)
        except ValueError:
            return False
        return True

    def count_family(self, family: str) -> int:
        return sum(1 for card in self.cards if card.family == family)

    def has_full_family(self, family: str) -> bool:
        return self.count_family(family) >= CARDS_PER_FAMILY

    def remove_family(self, family: str) -> list[Card]:
        """Remove every card of ``family`` and return them."""

        removed = [card for card in self.cards if card.family == family]
        self.cards = [card for card in self.cards if card.family != family]
        return removed

    def is_empty(self) -> bool:
        return not self.cards

    def __contains__(self, card: object) -> bool:
        return card in self.cards

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self.cards))

    def __len__(self) -> int:
        return len(self.cards)


@dataclass(slots=True)
class Player:
    """A seated player and the hand they own."""

    name: str
    hand: Hand = field(default_factory=Hand)
    families: List[Family] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        self.hand.add_card(card)

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    @property
    def collected_cards(self) -> int:
        """Number of cards removed from play through completed families."""

        return len(self.families) * CARDS_PER_FAMILY
