"""Round state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Round state machine states.

    Flow: IDLE → DEALING → PLAYER_TURN → DEALER_TURN → RESOLVING → ROUND_COMPLETE → IDLE
    """

    # No round in progress
    IDLE = auto()

    # Shoe built and initial cards going out
    DEALING = auto()

    # Player hits or sticks
    PLAYER_TURN = auto()

    # Dealer draws to 17
    DEALER_TURN = auto()

    # Comparing final scores
    RESOLVING = auto()

    # Round finished, cards released
    ROUND_COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
