"""Plain-text listings of decks and hands."""

import sys
from typing import Iterable, TextIO

from termjack.cards import Card, Deck, format_card
from termjack.errors import InvalidArgumentError, OutputError
from termjack.hand import Hand

DECK_LINE_LENGTH = 13
HAND_LINE_LENGTH = 7
LABEL_WIDTH = 3


def format_cards(cards: Iterable[Card], per_line: int) -> str:
    """
    Lay out card labels in rows of at most ``per_line`` cards.

    Labels are right-aligned so that single-character ranks line up with
    tens. Every row ends with a newline.
    """
    if per_line < 1:
        raise ValueError("per_line must be at least 1")

    rows: list[str] = []
    row: list[str] = []
    for card in cards:
        if len(row) >= per_line:
            rows.append(" ".join(row))
            row = []
        row.append(format_card(card).rjust(LABEL_WIDTH))
    rows.append(" ".join(row))
    return "\n".join(rows) + "\n"


def write_text(text: str, stream: TextIO | None = None) -> None:
    """Write text to a stream (stdout by default), raising OutputError on failure."""
    out = stream if stream is not None else sys.stdout
    try:
        out.write(text)
        out.flush()
    except OSError as e:
        raise OutputError(f"Failed to write output: {e}") from e


def write_deck(
    deck: Deck,
    stream: TextIO | None = None,
    per_line: int = DECK_LINE_LENGTH,
) -> None:
    """Write the undealt cards of a deck, 13 to a line by default."""
    if not isinstance(deck, Deck):
        raise InvalidArgumentError(f"Not a deck: {deck!r}")
    write_text(format_cards(deck, per_line), stream)


def write_hand(
    hand: Hand,
    stream: TextIO | None = None,
    per_line: int = HAND_LINE_LENGTH,
) -> None:
    """Write the cards of a hand, 7 to a line by default."""
    if not isinstance(hand, Hand):
        raise InvalidArgumentError(f"Not a hand: {hand!r}")
    write_text(format_cards(hand, per_line), stream)
