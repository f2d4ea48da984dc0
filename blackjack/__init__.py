"""Console blackjack against a dealer who stands on 17."""

from blackjack.cards import CARD_VALUES, Deck, Rank, value_of
from blackjack.hand import Hand, Outcome, evaluate_hands, score

__all__ = [
    "CARD_VALUES",
    "Deck",
    "Rank",
    "value_of",
    "Hand",
    "Outcome",
    "evaluate_hands",
    "score",
]
