"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: DEALING → PLAYER_TURN → DEALER_TURN → RESOLVING → DONE
    """

    # Two cards each
    DEALING = auto()

    # Player hits or stands
    PLAYER_TURN = auto()

    # Dealer draws to the stand threshold
    DEALER_TURN = auto()

    # Comparing scores
    RESOLVING = auto()

    # Outcome known
    DONE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.DEALING: [GameState.PLAYER_TURN],
    GameState.PLAYER_TURN: [GameState.PLAYER_TURN, GameState.DEALER_TURN, GameState.DONE],  # DONE on bust
    GameState.DEALER_TURN: [GameState.RESOLVING],
    GameState.RESOLVING: [GameState.DONE],
    GameState.DONE: [],  # Terminal state
}


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
