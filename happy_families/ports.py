"""Interaction port through which the engine talks to whoever is playing."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from .cards import Card

__all__ = ["InteractionPort"]


@runtime_checkable
class InteractionPort(Protocol):
    """Input and output collaborator supplied to the engine.

    Prompts are synchronous; the engine waits for the answer before
    resolving the turn. Answers are free-form text and are never validated
    by the engine.
    """

    def prompt_family(self) -> str:
        """Return the family the current player asks for."""
        ...

    def prompt_role(self) -> str:
        """Return the role the current player asks for."""
        ...

    def display_hand(self, player_name: str, cards: Sequence[Card]) -> None:
        """Show ``player_name``'s hand."""
        ...

    def display_message(self, text: str) -> None:
        """Show a line of game narration."""
        ...
