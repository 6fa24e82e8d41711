"""Rule helpers shared by the engine and the scoreboard."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .cards import Card
from .state import Player

__all__ = [
    "RequestOutcome",
    "TurnReport",
    "target_index_for",
    "determine_winner_index",
]


class RequestOutcome(str, Enum):
    """How a card request was resolved."""

    NOT_HELD = "not_held"
    TRANSFERRED = "transferred"
    LUCKY_DIP = "lucky_dip"
    DREW = "drew"
    NOTHING_DRAWN = "nothing_drawn"


@dataclass(frozen=True, slots=True)
class TurnReport:
    """Everything that happened during one turn."""

    turn_number: int
    player_index: int
    family: str
    role: str
    outcome: RequestOutcome
    target_index: int | None = None
    card: Card | None = None
    completed_family: bool = False
    won: bool = False


def target_index_for(player_index: int, num_players: int) -> int:
    """Return the index of the player asked for a card.

    The asker never chooses: the request always goes to the next seat.
    """

    return (player_index + 1) % num_players


def determine_winner_index(players: Sequence[Player], emptied_hand_index: int | None = None) -> int:
    """Return the index of the winning player.

    A player who emptied their hand by completing families wins outright.
    Otherwise the first player holding the strictly largest hand wins.
    """

    if not players:
        raise ValueError("cannot determine a winner without players")
    if emptied_hand_index is not None:
        return emptied_hand_index
    winner = 0
    for idx, player in enumerate(players):
        if player.hand_size > players[winner].hand_size:
            winner = idx
    return winner
