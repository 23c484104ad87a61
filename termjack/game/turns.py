"""Turn strategies: how the dealer and the player decide to hit or stick."""

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable

from termjack.cards import Deck
from termjack.dealing import deal
from termjack.game.events import EventEmitter, EventType
from termjack.hand import Hand
from termjack.scoring import BUST, DEALER_STANDS_ON, score

logger = logging.getLogger(__name__)

HIT = "h"
STICK = "s"
PLAYER_PROMPT = "Hit or stick h/s? "


class TurnStrategy(ABC):
    """
    One participant's turn.

    A turn deals cards from the deck into the hand until the strategy stops,
    announcing what happens through the event emitter, and returns the final
    score of the hand.
    """

    def __init__(self, events: EventEmitter | None = None) -> None:
        self.events = events or EventEmitter()

    @property
    @abstractmethod
    def participant(self) -> str:
        """Return who is taking the turn ('player' or 'dealer')."""
        ...

    @abstractmethod
    def take_turn(self, deck: Deck, hand: Hand) -> int:
        """
        Play the turn out.

        Args:
            deck: Deck to deal hits from
            hand: Hand receiving the hits

        Returns:
            The final score (0 bust, 22 natural, otherwise the total)
        """
        ...

    def _show(self, hand: Hand, value: int) -> None:
        self.events.emit_new(
            EventType.HAND_SHOWN,
            participant=self.participant,
            cards=list(hand.cards),
            score=value,
        )


class DealerTurn(TurnStrategy):
    """Fixed dealer policy: hit below 17, stick on 17 or more."""

    def __init__(
        self,
        events: EventEmitter | None = None,
        stands_on: int = DEALER_STANDS_ON,
        delay: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Args:
            events: Emitter for the turn transcript
            stands_on: Lowest total the dealer sticks on
            delay: Pause in seconds before each dealer action
            sleep: Function used to pause
        """
        super().__init__(events)
        self.stands_on = stands_on
        self.delay = delay
        self._sleep = sleep

    @property
    def participant(self) -> str:
        return "dealer"

    def _pause(self) -> None:
        if self.delay > 0:
            self._sleep(self.delay)

    def should_hit(self, value: int) -> bool:
        """Check if the dealer takes another card on this score."""
        return BUST < value < self.stands_on

    def take_turn(self, deck: Deck, hand: Hand) -> int:
        value = score(hand)
        self._show(hand, value)

        while self.should_hit(value):
            self._pause()
            card = deal(deck, hand)
            value = score(hand)
            logger.debug("Dealer hits %s, score now %d", card, value)
            self.events.emit_new(
                EventType.DEALER_HITS,
                card=card,
                cards=list(hand.cards),
                score=value,
            )

        self._pause()
        if value == BUST:
            self.events.emit_new(EventType.DEALER_BUSTS)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, score=value)
        return value


class PlayerTurn(TurnStrategy):
    """Interactive player policy: hit or stick on each prompt until bust."""

    def __init__(
        self,
        events: EventEmitter | None = None,
        read_action: Callable[[str], str] = input,
    ) -> None:
        """
        Args:
            events: Emitter for the turn transcript
            read_action: Called with the prompt, returns the player's line
        """
        super().__init__(events)
        self._read_action = read_action

    @property
    def participant(self) -> str:
        return "player"

    def ask(self) -> str:
        """Read a hit or stick token, asking again until one is given."""
        while True:
            token = self._read_action(PLAYER_PROMPT).rstrip("\n")
            if token in (HIT, STICK):
                return token
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message=f"Please enter '{HIT}' to hit or '{STICK}' to stick.",
                token=token,
            )

    def take_turn(self, deck: Deck, hand: Hand) -> int:
        value = score(hand)
        self._show(hand, value)

        while value != BUST:
            if self.ask() == STICK:
                break
            card = deal(deck, hand)
            value = score(hand)
            logger.debug("Player hits %s, score now %d", card, value)
            self.events.emit_new(
                EventType.PLAYER_HIT,
                card=card,
                cards=list(hand.cards),
                score=value,
            )

        if value == BUST:
            self.events.emit_new(EventType.PLAYER_BUSTS)
        else:
            self.events.emit_new(EventType.PLAYER_STAND, score=value)
        return value
