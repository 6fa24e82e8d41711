"""Card abstractions and the Happy Families deck."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Sequence

__all__ = [
    "Family",
    "Role",
    "Card",
    "Deck",
    "CARDS_PER_FAMILY",
    "DECK_SIZE",
    "iter_full_deck",
]


class Family(str, Enum):
    """Enumeration of the eleven families printed in a Happy Families deck."""

    BLOCK = "Block, the Barber"
    BONES = "Bones, the Butcher"
    BUN = "Bun, the Baker"
    BUNG = "Bung, the Brewer"
    CHIP = "Chip, the Carpenter"
    DIP = "Dip, the Dyer"
    DOSE = "Dose, the Doctor"
    GRITS = "Grits, the Grocer"
    POTS = "Pots, the Painter"
    SOOT = "Soot, the Sweep"
    TAPE = "Tape, the Tailor"


class Role(str, Enum):
    """The four members every family is made of."""

    FATHER = "father"
    MOTHER = "mother"
    SON = "son"
    DAUGHTER = "daughter"


CARDS_PER_FAMILY = len(Role)
DECK_SIZE = len(Family) * CARDS_PER_FAMILY


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a physical Happy Families card."""

    family: Family
    role: Role

    def matches(self, family: str, role: str) -> bool:
        """Return ``True`` when the card is the (``family``, ``role``) card.

        Both enums are ``str`` based, so raw request text compares equal to
        the member carrying the same value.
        """

        return self.family == family and self.role == role

    def label(self) -> str:
        """Create a display label suitable for CLI representations."""

        return f"{self.family.value} ({self.role.value})"

    def __str__(self) -> str:
        return self.label()


def iter_full_deck() -> Iterable[Card]:
    """Yield all physical cards in a fresh deck, family-major order."""

    for family in Family:
        for role in Role:
            yield Card(family=family, role=role)


class Deck:
    """Draw pile holding the cards not yet dealt or drawn.

    The top of the deck is the end of the underlying list.
    """

    def __init__(
        self,
        cards: Sequence[Card] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._cards: List[Card] = list(iter_full_deck()) if cards is None else list(cards)
        self._rng = rng if rng is not None else random.Random()

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place."""

        self._rng.shuffle(self._cards)

    def draw(self) -> Card | None:
        """Remove and return the top card, or ``None`` once the deck is empty."""

        if not self._cards:
            return None
        return self._cards.pop()

    def peek(self) -> Card | None:
        return self._cards[-1] if self._cards else None

    def is_empty(self) -> bool:
        return not self._cards

    def cards(self) -> list[Card]:
        """Return a copy of the remaining cards, bottom first."""

        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))
