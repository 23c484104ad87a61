"""Moving cards from a deck into a hand."""

from termjack.cards import Card, Deck
from termjack.errors import InvalidArgumentError
from termjack.hand import Hand


def deal(deck: Deck, hand: Hand) -> Card:
    """
    Deal the next card of the deck to the front of a hand.

    The card is placed in the hand before the deck head moves, so a failure
    part way through leaves the deck as it was.

    Raises:
        InvalidArgumentError: if deck is not a live Deck or hand is not a Hand
        NoDataError: if the deck is empty
    """
    if not isinstance(deck, Deck):
        raise InvalidArgumentError(f"Not a deck: {deck!r}")
    if not isinstance(hand, Hand):
        raise InvalidArgumentError(f"Not a hand: {hand!r}")

    card = deck.peek()
    hand.add_card(card)
    deck.advance()
    return card
