"""Blackjack point values and hand scoring."""

from termjack.cards import Card, Rank
from termjack.errors import InvalidArgumentError
from termjack.hand import Hand

BLACKJACK = 21
BUST = 0
NATURAL = 22
DEALER_STANDS_ON = 17


def card_value(card: Card) -> int:
    """Return the blackjack point value of a card (Ace = 11, face cards = 10)."""
    if not isinstance(card.rank, Rank):
        raise InvalidArgumentError(f"Invalid rank: {card.rank!r}")
    return card.rank.blackjack_value


def score(hand: Hand) -> int:
    """
    Score a hand under blackjack rules.

    Aces start at 11 and drop to 1 one at a time whenever the running total
    passes 21. The total is checked after every card, and scanning stops at
    the first card that busts the hand.

    Returns:
        BUST (0) for a busted hand, NATURAL (22) for a two-card 21,
        otherwise the hand total. An empty hand scores 0.
    """
    if not isinstance(hand, Hand):
        raise InvalidArgumentError(f"Not a hand: {hand!r}")

    total = 0
    aces = 0
    count = 0

    for card in hand:
        total += card_value(card)
        count += 1
        if card.is_ace:
            aces += 1

        while total > BLACKJACK and aces > 0:
            total -= 10
            aces -= 1

        if total > BLACKJACK:
            return BUST

    if count == 2 and total == BLACKJACK:
        return NATURAL
    return total


def describe_score(value: int) -> str:
    """Return a score for display: 'Blackjack' for a natural, else the number."""
    if value == NATURAL:
        return "Blackjack"
    return str(value)


def compare_scores(player_score: int, dealer_score: int) -> int:
    """
    Compare final scores.

    Returns:
        1 if player wins
        -1 if dealer wins
        0 if draw (including both busted)
    """
    if player_score > dealer_score:
        return 1
    if dealer_score > player_score:
        return -1
    return 0
