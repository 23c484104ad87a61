"""Pytest fixtures for termjack tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from termjack.cards import Card, Deck, Rank, Suit
from termjack.game import BlackjackGame, EventEmitter
from termjack.hand import Hand


def make_hand(*labels: str) -> Hand:
    """Build a hand from card labels, dealt in the order given."""
    hand = Hand()
    for label in labels:
        hand.add_card(Card.from_string(label))
    return hand


def scripted(*tokens: str):
    """Return a read_action that replays tokens and records the prompts."""
    remaining = list(tokens)
    prompts: list[str] = []

    def read(prompt: str) -> str:
        prompts.append(prompt)
        return remaining.pop(0)

    read.prompts = prompts
    return read


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A single pack in new-deck order."""
    return Deck(rng=rng)


@pytest.fixture
def shoe(rng):
    """A shuffled 6-pack shoe."""
    d = Deck(packs=6, rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand("AS", "KH")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def events():
    """An event emitter."""
    return EventEmitter()


@pytest.fixture
def stacked_game():
    """
    Game factory dealing a fixed card order with no shuffle.

    Cards go dealer, player, dealer, player, then hits in order.
    """

    def build(labels, *tokens):
        cards = [Card.from_string(label) for label in labels]
        return BlackjackGame(
            deck_factory=lambda: Deck.from_cards(cards),
            shuffle=False,
            read_action=scripted(*tokens),
        )

    return build


@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=0, max_cards=8):
    """Generate a random hand."""
    cards = draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
    hand = Hand()
    for card in cards:
        hand.add_card(card)
    return hand
