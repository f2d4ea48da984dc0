"""Rank, card value table, and Deck - suits are not modeled."""

from collections.abc import Iterable
from enum import Enum
from random import Random
from types import MappingProxyType
from typing import Iterator, Mapping


class Rank(Enum):
    """Card ranks, valued by their face label."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    def __str__(self) -> str:
        return self.value

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self is Rank.ACE

    @classmethod
    def from_label(cls, label: str) -> "Rank":
        """Create a rank from a label like '7', '10', 'k' or 'A'."""
        text = label.strip().upper()
        for rank in cls:
            if rank.value == text:
                return rank
        raise ValueError(f"Invalid rank: {label!r}")


def _build_card_values() -> Mapping[Rank, int]:
    values: dict[Rank, int] = {}
    for rank in Rank:
        if rank in (Rank.JACK, Rank.QUEEN, Rank.KING):
            values[rank] = 10
        elif rank is Rank.ACE:
            values[rank] = 11  # Nominal; the scorer drops it to 1 when needed
        else:
            values[rank] = int(rank.value)
    return MappingProxyType(values)


CARD_VALUES: Mapping[Rank, int] = _build_card_values()


def value_of(rank: Rank | str) -> int:
    """
    Return the point value of a rank.

    Args:
        rank: A Rank member or its label

    Raises:
        ValueError: If the rank is not one of the 13 known ranks
    """
    if not isinstance(rank, Rank):
        rank = Rank.from_label(str(rank))
    return CARD_VALUES[rank]


class Deck:
    """
    A plain ordered stack of ranks.

    The top of the deck is the end of the list. An empty deck stays empty;
    replacing it is up to whoever owns it.
    """

    COPIES_PER_RANK = 4

    def __init__(self, ranks: Iterable[Rank] | None = None) -> None:
        self._cards: list[Rank] = list(ranks) if ranks is not None else []

    @classmethod
    def create(cls, rng: Random | None = None) -> "Deck":
        """Create a new shuffled 52-card deck (four of each rank)."""
        rng = rng or Random()
        cards = [rank for rank in Rank for _ in range(cls.COPIES_PER_RANK)]
        rng.shuffle(cards)
        return cls(cards)

    @classmethod
    def from_ranks(cls, ranks: Iterable[Rank | str]) -> "Deck":
        """Create an unshuffled deck; the last rank given is drawn first."""
        return cls(r if isinstance(r, Rank) else Rank.from_label(r) for r in ranks)

    def draw(self) -> Rank:
        """Draw a card from the top of the deck."""
        if not self._cards:
            raise IndexError("Cannot draw from empty deck")
        return self._cards.pop()

    @property
    def is_empty(self) -> bool:
        """Check if every card has been drawn."""
        return not self._cards

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Rank]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"
