"""Helpers for tracking results across several games in one session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .engine import GameEngine

__all__ = ["GameSummary", "PlayerMatchTotal", "MatchHistory", "summarize_game"]


@dataclass(frozen=True, slots=True)
class GameSummary:
    """Summary captured after a single finished game."""

    game_number: int
    winner_index: int
    hand_sizes: Sequence[int]
    families_completed: Sequence[int]
    won_by_empty_hand: bool
    turns: int


@dataclass(frozen=True, slots=True)
class PlayerMatchTotal:
    """Aggregate totals for one seat across all recorded games."""

    player_index: int
    wins: int
    families_completed: int
    cards_left: int


def summarize_game(engine: GameEngine, game_number: int) -> GameSummary:
    """Build a ``GameSummary`` from a finished engine."""

    if engine.winner_index is None:
        raise ValueError("game has not finished yet")
    return GameSummary(
        game_number=game_number,
        winner_index=engine.winner_index,
        hand_sizes=tuple(player.hand_size for player in engine.players),
        families_completed=tuple(len(player.families) for player in engine.players),
        won_by_empty_hand=engine.emptied_hand_index is not None,
        turns=engine.turn_number,
    )


@dataclass(slots=True)
class MatchHistory:
    """Mutable tracker that accumulates game summaries for a session."""

    num_players: int
    games: list[GameSummary] = field(default_factory=list)
    _wins: list[int] = field(init=False, repr=False)
    _families: list[int] = field(init=False, repr=False)
    _cards_left: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.num_players <= 0:
            raise ValueError("num_players must be positive")
        self._wins = [0 for _ in range(self.num_players)]
        self._families = [0 for _ in range(self.num_players)]
        self._cards_left = [0 for _ in range(self.num_players)]

    def record(self, summary: GameSummary) -> None:
        """Record ``summary`` and update cumulative totals."""

        if len(summary.hand_sizes) != self.num_players or len(summary.families_completed) != self.num_players:
            raise ValueError("summary does not match number of players")
        if summary.winner_index < 0 or summary.winner_index >= self.num_players:
            raise ValueError("winner index out of range")
        self.games.append(summary)
        self._wins[summary.winner_index] += 1
        for idx in range(self.num_players):
            self._families[idx] += summary.families_completed[idx]
            self._cards_left[idx] += summary.hand_sizes[idx]

    def totals(self) -> list[PlayerMatchTotal]:
        """Return the cumulative totals for each player in seating order."""

        return [
            PlayerMatchTotal(
                player_index=idx,
                wins=self._wins[idx],
                families_completed=self._families[idx],
                cards_left=self._cards_left[idx],
            )
            for idx in range(self.num_players)
        ]

    def leaders(self) -> list[int]:
        """Return the seat indices sharing the most wins."""

        if not self.games:
            return []
        best = max(self._wins)
        return [idx for idx, wins in enumerate(self._wins) if wins == best]
