"""Terminal blackjack - card engine and game rules, UI-agnostic."""

from termjack.cards import Card, Deck, Rank, Suit, format_card
from termjack.dealing import deal
from termjack.errors import CardError, InvalidArgumentError, NoDataError, OutputError
from termjack.hand import Hand
from termjack.scoring import card_value, score

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "format_card",
    "deal",
    "Hand",
    "card_value",
    "score",
    "CardError",
    "InvalidArgumentError",
    "NoDataError",
    "OutputError",
]
