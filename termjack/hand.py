"""Hand container for one participant's cards."""

from dataclasses import dataclass, field
from typing import Iterator

from termjack.cards import Card


@dataclass
class Hand:
    """
    Cards held by the player or the dealer for one round.

    Newly dealt cards go to the front, so iteration yields the most recently
    dealt card first.
    """

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the front of the hand."""
        self.cards.insert(0, card)

    def release(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def num_cards(self) -> int:
        """Return the number of cards in the hand."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return " ".join(str(card) for card in self.cards)

    def __repr__(self) -> str:
        return f"Hand({self.cards!r})"
