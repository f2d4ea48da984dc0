"""Blackjack game engine with state machine."""

import logging
from random import Random
from typing import Callable

from transitions import Machine

from blackjack.cards import Deck, Rank
from blackjack.config import GameConfig
from blackjack.hand import Hand, Outcome, evaluate_hands
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import GameState

logger = logging.getLogger(__name__)

_OUTCOME_EVENTS = {
    Outcome.DEALER_BUST: EventType.PLAYER_WINS,
    Outcome.PLAYER_WINS: EventType.PLAYER_WINS,
    Outcome.DEALER_WINS: EventType.DEALER_WINS,
    Outcome.TIE: EventType.TIE,
}


class BlackjackGame:
    """
    A single game of blackjack against a dealer that stands on 17.

    This is the core game logic, completely UI-agnostic.
    Communication happens through events and return values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "cards_dealt", "source": "dealing", "dest": "player_turn"},
        {"trigger": "player_action", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "player_busts", "source": "player_turn", "dest": "done"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "resolving"},
        {"trigger": "resolved", "source": "resolving", "dest": "done"},
    ]

    def __init__(
        self,
        rules: GameConfig | None = None,
        rng: Random | None = None,
        deck: Deck | None = None,
    ) -> None:
        """
        Initialize a new game, ready to deal.

        Args:
            rules: Table rules (uses defaults if not provided)
            rng: Random number generator for reproducible games
            deck: Deck to deal from instead of a freshly shuffled one
        """
        self.rules = rules or GameConfig()
        self._rng = rng or Random()
        self.deck = deck if deck is not None else Deck.create(self._rng)

        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self.outcome: Outcome | None = None
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="dealing",
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_log_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    @property
    def is_over(self) -> bool:
        """Check if the outcome has been decided."""
        return self.state == GameState.DONE

    @property
    def dealer_concealed(self) -> bool:
        """Check if the dealer's hole card is still face down."""
        return self.state in (GameState.DEALING, GameState.PLAYER_TURN)

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def _log_state(self) -> None:
        logger.debug(
            "state=%s player=%s (%d) dealer=%s (%d)",
            self.state.name,
            self.player_hand,
            self.player_hand.value,
            self.dealer_hand,
            self.dealer_hand.value,
        )

    def deal(self) -> bool:
        """
        Deal two cards to the player, then two to the dealer.

        Returns:
            True if the cards were dealt
        """
        if self.state != GameState.DEALING:
            self._reject("deal")
            return False

        self.events.emit_new(EventType.GAME_STARTED, cards_in_deck=len(self.deck))

        for _ in range(self.rules.initial_cards):
            self._deal_card_to_hand(self.player_hand)
        for i in range(self.rules.initial_cards):
            self._deal_card_to_hand(self.dealer_hand, face_up=i == 0)

        self.cards_dealt()
        return True

    def _draw(self) -> Rank:
        """Draw a card, replacing the deck with a fresh one once it runs out."""
        if self.deck.is_empty:
            self.deck = Deck.create(self._rng)
            logger.info("Deck exhausted; reshuffled a fresh deck of %d cards", len(self.deck))
            self.events.emit_new(EventType.DECK_RESHUFFLED, cards_in_deck=len(self.deck))
        return self.deck.draw()

    def _deal_card_to_hand(self, hand: Hand, face_up: bool = True) -> Rank:
        """Deal a card to a hand."""
        card = self._draw()
        hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "?",
            hand="dealer" if hand is self.dealer_hand else "player",
            hand_value=hand.value if face_up or hand is not self.dealer_hand else None,
        )
        return card

    def _reject(self, action: str) -> None:
        logger.warning("Ignoring %s during %s", action, self.state)
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=f"Cannot {action} in current state",
            state=self.state.name,
        )

    def hit(self) -> bool:
        """Player hits (takes another card). A bust ends the game at once."""
        if self.state != GameState.PLAYER_TURN:
            self._reject("hit")
            return False

        self._deal_card_to_hand(self.player_hand)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=self.player_hand.value)

        if self.player_hand.is_busted:
            self.outcome = Outcome.PLAYER_BUST
            self.player_busts()
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player_hand.value)
            self._finish()
            return True

        self.player_action()  # Stay in player turn
        return True

    def stand(self) -> bool:
        """Player stands; the dealer plays and the game is resolved."""
        if self.state != GameState.PLAYER_TURN:
            self._reject("stand")
            return False

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_hand.value)
        self.player_done()
        self._play_dealer()
        self._resolve()
        return True

    def _play_dealer(self) -> None:
        """Dealer reveals, then hits until reaching the stand threshold."""
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            card=str(self.dealer_hand.cards[-1]),
            hand_value=self.dealer_hand.value,
        )

        while self.dealer_should_hit():
            self._deal_card_to_hand(self.dealer_hand)
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer_hand.value)

        if self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer_hand.value)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_hand.value)

        self.dealer_done()

    def dealer_should_hit(self) -> bool:
        """Determine if dealer should hit. Soft totals get no special treatment."""
        return self.dealer_hand.value < self.rules.dealer_stands_on

    def _resolve(self) -> None:
        """Compare final scores."""
        self.outcome = evaluate_hands(self.player_hand, self.dealer_hand)
        self.events.emit_new(
            _OUTCOME_EVENTS[self.outcome],
            player_value=self.player_hand.value,
            dealer_value=self.dealer_hand.value,
        )
        self.resolved()
        self._finish()

    def _finish(self) -> None:
        logger.info(
            "Game over: %s (player %d, dealer %d)",
            self.outcome.name,
            self.player_hand.value,
            self.dealer_hand.value,
        )
        self.events.emit_new(EventType.GAME_ENDED, outcome=self.outcome)

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == GameState.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == GameState.PLAYER_TURN
