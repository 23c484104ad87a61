"""Blackjack round engine with state machine."""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Callable

from transitions import Machine

from termjack.cards import Deck
from termjack.dealing import deal
from termjack.errors import CardError
from termjack.game.events import EventEmitter, EventType, GameEvent
from termjack.game.state import GameState
from termjack.game.turns import DealerTurn, PlayerTurn, TurnStrategy
from termjack.hand import Hand
from termjack.scoring import DEALER_STANDS_ON, compare_scores, describe_score

logger = logging.getLogger(__name__)

INITIAL_DEAL = 2


class Outcome(Enum):
    """Result of a round from the player's side."""

    PLAYER_WINS = "player"
    DEALER_WINS = "dealer"
    DRAW = "draw"


@dataclass(frozen=True)
class RoundResult:
    """Final scores and outcome of one round."""

    outcome: Outcome
    player_score: int
    dealer_score: int
    message: str


def resolve_round(player_score: int, dealer_score: int) -> RoundResult:
    """
    Decide a round from the two final scores.

    The higher score wins. Equal scores are a draw, which includes both
    hands busting (0 against 0).
    """
    result = compare_scores(player_score, dealer_score)
    if result > 0:
        outcome = Outcome.PLAYER_WINS
        message = f"Player wins with {describe_score(player_score)}!"
    elif result < 0:
        outcome = Outcome.DEALER_WINS
        message = f"Dealer wins with {describe_score(dealer_score)}!"
    else:
        outcome = Outcome.DRAW
        message = "Draw!"
    return RoundResult(outcome, player_score, dealer_score, message)


class BlackjackGame:
    """
    One player against the dealer, a fresh shoe every round.

    The engine is UI-agnostic: everything a front end shows comes from the
    events it emits, and the player's decisions come from the read_action
    callable.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "start_round", "source": ["idle", "round_complete"], "dest": "dealing"},
        {"trigger": "begin_player_turn", "source": "dealing", "dest": "player_turn"},
        {"trigger": "begin_dealer_turn", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "resolve", "source": "dealer_turn", "dest": "resolving"},
        {"trigger": "complete", "source": "resolving", "dest": "round_complete"},
        {"trigger": "abort", "source": "*", "dest": "idle"},
    ]

    _OUTCOME_EVENTS = {
        Outcome.PLAYER_WINS: EventType.PLAYER_WINS,
        Outcome.DEALER_WINS: EventType.DEALER_WINS,
        Outcome.DRAW: EventType.DRAW,
    }

    def __init__(
        self,
        num_packs: int = 6,
        rng: Random | None = None,
        read_action: Callable[[str], str] = input,
        dealer_delay: float = 0.0,
        dealer_stands_on: int = DEALER_STANDS_ON,
        deck_factory: Callable[[], Deck] | None = None,
        shuffle: bool = True,
        player_turn: TurnStrategy | None = None,
        dealer_turn: TurnStrategy | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize a new blackjack game.

        Args:
            num_packs: Number of packs in each round's shoe
            rng: Random number generator for reproducible games
            read_action: Reads the player's hit/stick token given a prompt
            dealer_delay: Pause in seconds before each dealer action
            dealer_stands_on: Lowest total the dealer sticks on
            deck_factory: Builds the deck for a round (defaults to a new shoe)
            shuffle: Whether to shuffle the deck before dealing
            player_turn: Strategy for the player's turn
            dealer_turn: Strategy for the dealer's turn
            sleep: Function used for the dealer's pause
        """
        self.num_packs = num_packs
        self.rng = rng or Random()
        self.shuffle = shuffle
        self._deck_factory = deck_factory or self._new_shoe
        self.events = EventEmitter()

        self.player_turn = player_turn or PlayerTurn(read_action=read_action)
        self.dealer_turn = dealer_turn or DealerTurn(
            stands_on=dealer_stands_on,
            delay=dealer_delay,
            sleep=sleep,
        )
        self.player_turn.events = self.events
        self.dealer_turn.events = self.events

        self.rounds_played = 0

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="idle",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def _new_shoe(self) -> Deck:
        return Deck(packs=self.num_packs, rng=self.rng)

    def _deal_to(self, deck: Deck, hand: Hand, participant: str) -> None:
        card = deal(deck, hand)
        self.events.emit_new(EventType.CARD_DEALT, card=card, participant=participant)

    def _setup(self, player_hand: Hand, dealer_hand: Hand) -> Deck:
        """Build and shuffle the shoe, then deal dealer, player, dealer, player."""
        deck = self._deck_factory()
        try:
            if self.shuffle:
                deck.shuffle()
                self.events.emit_new(EventType.DECK_SHUFFLED, cards=len(deck))

            for _ in range(INITIAL_DEAL):
                self._deal_to(deck, dealer_hand, "dealer")
                self._deal_to(deck, player_hand, "player")
        except Exception:
            deck.release()
            raise
        return deck

    def play_round(self) -> RoundResult:
        """
        Play one complete round.

        The deck and both hands are released when the round ends, whether it
        finished or failed. Any error aborts the round back to idle and is
        re-raised.

        Returns:
            The round's scores and outcome
        """
        self.start_round()
        logger.info("Starting round %d", self.rounds_played + 1)

        player_hand = Hand()
        dealer_hand = Hand()
        deck: Deck | None = None
        try:
            try:
                deck = self._setup(player_hand, dealer_hand)
            except CardError:
                logger.exception("Could not set up round")
                raise
            self.events.emit_new(EventType.ROUND_STARTED, round=self.rounds_played + 1)

            self.begin_player_turn()
            player_score = self.player_turn.take_turn(deck, player_hand)

            self.begin_dealer_turn()
            dealer_score = self.dealer_turn.take_turn(deck, dealer_hand)

            self.resolve()
            result = resolve_round(player_score, dealer_score)
            self.events.emit_new(
                self._OUTCOME_EVENTS[result.outcome],
                message=result.message,
                player_score=player_score,
                dealer_score=dealer_score,
            )
        except Exception:
            self.abort()
            raise
        finally:
            if deck is not None:
                deck.release()
            player_hand.release()
            dealer_hand.release()

        self.rounds_played += 1
        self.complete()
        self.events.emit_new(EventType.ROUND_ENDED, outcome=result.outcome.value)
        logger.info(
            "Round %d finished: %s (player %d, dealer %d)",
            self.rounds_played,
            result.outcome.value,
            player_score,
            dealer_score,
        )
        return result
