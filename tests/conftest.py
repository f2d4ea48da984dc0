"""Pytest fixtures for blackjack tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from blackjack.cards import Deck, Rank
from blackjack.game import BlackjackGame
from blackjack.hand import Hand


def make_hand(*labels: str) -> Hand:
    """Build a hand from rank labels, e.g. make_hand("A", "K")."""
    return Hand([Rank.from_label(label) for label in labels])


def stacked_deck(*labels: str) -> Deck:
    """A deck that deals the given ranks in the order listed."""
    return Deck.from_ranks(reversed(labels))


def stacked_game(player: tuple[str, str], dealer: tuple[str, str], *rest: str) -> BlackjackGame:
    """
    A game whose deck deals the given hands, then the remaining ranks.

    Player cards are dealt before dealer cards. Once the stack runs out the
    game falls back to a seeded fresh deck.
    """
    deck = stacked_deck(*player, *dealer, *rest)
    return BlackjackGame(rng=Random(42), deck=deck)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck.create(rng)


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("A", "6")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10", "6")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10", "6", "K")


@pytest.fixture
def game(rng):
    """A new game instance."""
    return BlackjackGame(rng=rng)


# Hypothesis strategies for property-based testing
ranks = st.sampled_from(list(Rank))
non_ace_ranks = st.sampled_from([r for r in Rank if not r.is_ace])
