"""Tests for Hand and dealing."""

import pytest

from termjack.cards import Card, Deck, Rank, Suit
from termjack.dealing import deal
from termjack.errors import InvalidArgumentError, NoDataError
from termjack.hand import Hand


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self, empty_hand):
        """Test empty hand properties."""
        assert len(empty_hand) == 0
        assert list(empty_hand) == []

    def test_add_card_prepends(self, empty_hand):
        """Test the newest card is first."""
        first = Card(Rank.TEN, Suit.SPADES)
        second = Card(Rank.ACE, Suit.DIAMONDS)
        empty_hand.add_card(first)
        empty_hand.add_card(second)
        assert list(empty_hand) == [second, first]
        assert empty_hand.num_cards == 2

    def test_release(self, blackjack_hand):
        """Test releasing empties the hand."""
        blackjack_hand.release()
        assert len(blackjack_hand) == 0

    def test_release_empty_hand(self, empty_hand):
        """Test releasing an empty hand is harmless."""
        empty_hand.release()
        empty_hand.release()
        assert len(empty_hand) == 0

    def test_str(self, blackjack_hand):
        """Test string form lists labels, newest first."""
        assert str(blackjack_hand) == "KH AS"


class TestDeal:
    """Tests for the deal operation."""

    def test_deal_moves_one_card(self, deck, empty_hand):
        """Test dealing shrinks the deck by one and grows the hand by one."""
        card = deal(deck, empty_hand)
        assert card == Card(Rank.ACE, Suit.SPADES)
        assert len(deck) == 51
        assert len(empty_hand) == 1
        assert list(empty_hand) == [card]

    def test_deal_takes_from_head(self, deck, empty_hand):
        """Test cards come off the front of the remaining range."""
        deal(deck, empty_hand)
        deal(deck, empty_hand)
        assert deck.head == 2
        assert list(empty_hand) == [
            Card(Rank.TWO, Suit.SPADES),
            Card(Rank.ACE, Suit.SPADES),
        ]

    def test_deal_whole_deck(self, deck, empty_hand):
        """Test the deck can be dealt out completely."""
        for expected in range(51, -1, -1):
            deal(deck, empty_hand)
            assert len(deck) == expected
        assert len(empty_hand) == 52

    def test_deal_from_empty_deck(self, empty_hand):
        """Test dealing from an empty deck fails without touching the hand."""
        deck = Deck.from_cards([])
        with pytest.raises(NoDataError):
            deal(deck, empty_hand)
        assert len(empty_hand) == 0

    def test_deal_from_released_deck(self, empty_hand):
        """Test dealing from a released deck is rejected."""
        deck = Deck()
        deck.release()
        with pytest.raises(InvalidArgumentError):
            deal(deck, empty_hand)

    def test_deal_from_non_deck(self, empty_hand):
        """Test a missing deck is rejected as a malformed handle."""
        with pytest.raises(InvalidArgumentError):
            deal(None, empty_hand)
        with pytest.raises(InvalidArgumentError):
            deal([Card(Rank.ACE, Suit.SPADES)], empty_hand)
        assert len(empty_hand) == 0

    def test_deal_to_non_hand(self, deck):
        """Test dealing into something that is not a hand leaves the deck alone."""
        with pytest.raises(InvalidArgumentError):
            deal(deck, [])
        assert len(deck) == 52

    def test_deal_is_atomic(self, deck):
        """Test a failed insert does not advance the deck."""

        class FullHand(Hand):
            def add_card(self, card):
                raise MemoryError

        with pytest.raises(MemoryError):
            deal(deck, FullHand())
        assert deck.head == 0
        assert len(deck) == 52
