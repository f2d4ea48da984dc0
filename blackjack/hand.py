"""Hand scoring and outcome evaluation for blackjack."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from blackjack.cards import Rank, value_of

BLACKJACK = 21
ACE_REDUCTION = 10  # An Ace dropping from 11 to 1


def score(ranks: Iterable[Rank]) -> int:
    """
    Calculate the best score for a set of ranks.

    Every Ace starts at 11 and is dropped to 1, one at a time, only while
    the total is over 21. The result may still be over 21 (a bust).
    """
    total = 0
    aces = 0

    for rank in ranks:
        total += value_of(rank)
        if rank.is_ace:
            aces += 1

    while total > BLACKJACK and aces > 0:
        total -= ACE_REDUCTION
        aces -= 1

    return total


@dataclass
class Hand:
    """The cards held by the player or the dealer."""

    cards: list[Rank] = field(default_factory=list)

    def add_card(self, rank: Rank) -> None:
        """Add a card to the hand."""
        self.cards.append(rank)

    @property
    def value(self) -> int:
        """Return the best score for the hand."""
        return score(self.cards)

    @property
    def is_soft(self) -> bool:
        """
        Check if the hand is soft (has an ace counted as 11).

        Informational only; the dealer rule does not look at it.
        """
        if not any(rank.is_ace for rank in self.cards):
            return False
        total_hard = sum(1 if rank.is_ace else value_of(rank) for rank in self.cards)
        return total_hard + ACE_REDUCTION <= BLACKJACK

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BLACKJACK

    @property
    def upcard(self) -> Rank | None:
        """Return the first card, the one a dealer shows."""
        return self.cards[0] if self.cards else None

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Rank]:
        return iter(self.cards)

    def __str__(self) -> str:
        return "[" + ", ".join(str(rank) for rank in self.cards) + "]"

    def __repr__(self) -> str:
        return f"Hand({self}, value={self.value})"


class Outcome(Enum):
    """How a game ended, with the line announced to the player."""

    PLAYER_BUST = "Player busts! Dealer wins."
    DEALER_BUST = "Dealer busts! Player wins."
    PLAYER_WINS = "Player wins!"
    DEALER_WINS = "Dealer wins!"
    TIE = "It's a tie!"

    def __str__(self) -> str:
        return self.value

    @property
    def player_won(self) -> bool:
        """Check if the outcome goes to the player."""
        return self in (Outcome.DEALER_BUST, Outcome.PLAYER_WINS)


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> Outcome:
    """
    Compare player and dealer hands.

    A busted player loses before the dealer's hand is considered.
    """
    if player_hand.is_busted:
        return Outcome.PLAYER_BUST

    if dealer_hand.is_busted:
        return Outcome.DEALER_BUST

    player_value = player_hand.value
    dealer_value = dealer_hand.value

    if player_value > dealer_value:
        return Outcome.PLAYER_WINS
    if player_value < dealer_value:
        return Outcome.DEALER_WINS
    return Outcome.TIE
