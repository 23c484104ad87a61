"""Card and Deck classes - immutable cards dealt from a multi-pack shoe."""

import math
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterable, Iterator

from termjack.errors import InvalidArgumentError, NoDataError

STANDARD_DECK_SIZE = 52


class Suit(Enum):
    """Card suits, in new-deck order."""

    SPADES = 0
    DIAMONDS = 1
    CLUBS = 2
    HEARTS = 3

    def __str__(self) -> str:
        symbols = {
            Suit.SPADES: "♠",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.HEARTS: "♥",
        }
        return symbols[self]

    @property
    def letter(self) -> str:
        """Return the single-letter suit code used in card labels."""
        return self.name[0]


class Rank(Enum):
    """Card ranks, Ace low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self == Rank.ACE:
            return 11
        return min(self.value, 10)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return format_card(self)

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'AS', '10H', 'K♥'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise InvalidArgumentError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(rank): rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {suit.letter: suit for suit in Suit}
        suit_map.update({str(suit): suit for suit in Suit})

        if rank_str not in rank_map:
            raise InvalidArgumentError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise InvalidArgumentError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


def format_card(card: Card) -> str:
    """
    Return the short label for a card, e.g. 'AS' or '10H'.

    Raises:
        InvalidArgumentError: if the rank or suit is not a known member
    """
    if not isinstance(card.rank, Rank):
        raise InvalidArgumentError(f"Invalid rank: {card.rank!r}")
    if not isinstance(card.suit, Suit):
        raise InvalidArgumentError(f"Invalid suit: {card.suit!r}")
    return f"{card.rank}{card.suit.letter}"


def new_deck_order() -> list[Card]:
    """Return one 52-card pack in new-deck order (by suit, Ace to King)."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """
    A shoe of one or more standard packs.

    The cards live in a fixed buffer; ``head`` indexes the next card to deal
    and ``tail`` the last dealable card. The deck is empty once head passes
    tail. Dealt cards stay in the buffer and are never touched again by a
    normal shuffle.
    """

    def __init__(self, packs: int = 1, rng: Random | None = None) -> None:
        """
        Build a shoe in new-deck order.

        Args:
            packs: Number of 52-card packs in the shoe
            rng: Random number generator for shuffling
        """
        if isinstance(packs, bool) or not isinstance(packs, int) or packs < 1:
            raise InvalidArgumentError("Deck must have at least 1 pack")

        self._packs = packs
        self._rng = rng or Random()
        self._cards: list[Card] | None = new_deck_order() * packs
        self._head = 0
        self._tail = len(self._cards) - 1

    @classmethod
    def from_cards(cls, cards: Iterable[Card], rng: Random | None = None) -> "Deck":
        """Build a deck that deals the given cards in order."""
        cards = list(cards)
        deck = cls.__new__(cls)
        deck._packs = max(1, math.ceil(len(cards) / STANDARD_DECK_SIZE))
        deck._rng = rng or Random()
        deck._cards = cards
        deck._head = 0
        deck._tail = len(cards) - 1
        return deck

    def _buffer(self) -> list[Card]:
        if self._cards is None:
            raise InvalidArgumentError("Deck has been released")
        return self._cards

    def shuffle(self) -> None:
        """
        Fisher-Yates shuffle of the undealt range, in place.

        The swap index is drawn from [0, i] rather than [head, i]. On a fresh
        deck the two are identical; after dealing, the wider draw can pull
        already dealt cards back into play.
        """
        cards = self._buffer()
        for i in range(self._tail, self._head, -1):
            j = self._rng.randrange(i + 1)
            cards[i], cards[j] = cards[j], cards[i]

    def peek(self) -> Card:
        """Return the next card to be dealt without dealing it."""
        cards = self._buffer()
        if self._head > self._tail:
            raise NoDataError("Cannot deal from an empty deck")
        return cards[self._head]

    def advance(self) -> None:
        """Move the head past the next card."""
        self.peek()
        self._head += 1

    def draw(self) -> Card:
        """Draw a card from the top of the deck."""
        card = self.peek()
        self._head += 1
        return card

    def release(self) -> None:
        """Drop the card buffer; the deck is unusable afterwards."""
        self._cards = None

    @property
    def is_released(self) -> bool:
        """Check if the card buffer has been released."""
        return self._cards is None

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards left to deal."""
        self._buffer()
        if self._head > self._tail:
            return 0
        return self._tail - self._head + 1

    @property
    def head(self) -> int:
        """Return the index of the next card to deal."""
        return self._head

    @property
    def tail(self) -> int:
        """Return the index of the last dealable card."""
        return self._tail

    @property
    def capacity(self) -> int:
        """Return the size of the card buffer."""
        return len(self._buffer())

    @property
    def packs(self) -> int:
        """Return the number of packs the deck was built from."""
        return self._packs

    def __len__(self) -> int:
        return self.cards_remaining

    def __iter__(self) -> Iterator[Card]:
        cards = self._buffer()
        return iter(cards[self._head:self._tail + 1])

    def __repr__(self) -> str:
        if self._cards is None:
            return "Deck(released)"
        return f"Deck(packs={self._packs}, remaining={self.cards_remaining})"
