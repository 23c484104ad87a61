"""Tests for blackjack scoring."""

import pytest
from hypothesis import given

from conftest import hand_strategy, make_hand
from termjack.cards import Card, Rank, Suit
from termjack.errors import InvalidArgumentError
from termjack.scoring import (
    BUST,
    NATURAL,
    card_value,
    compare_scores,
    describe_score,
    score,
)


class TestCardValue:
    """Tests for card point values."""

    def test_values(self):
        """Test every rank's point value."""
        expected = {
            Rank.ACE: 11,
            Rank.TWO: 2,
            Rank.NINE: 9,
            Rank.TEN: 10,
            Rank.JACK: 10,
            Rank.QUEEN: 10,
            Rank.KING: 10,
        }
        for rank, value in expected.items():
            assert card_value(Card(rank, Suit.CLUBS)) == value

    def test_invalid_rank(self):
        """Test a rank outside the enumeration is rejected."""
        with pytest.raises(InvalidArgumentError):
            card_value(Card(0, Suit.CLUBS))


class TestScore:
    """Tests for hand scores."""

    def test_natural(self, blackjack_hand):
        """Test Ace-King is a natural."""
        assert score(blackjack_hand) == NATURAL == 22

    def test_pair_of_aces(self):
        """Test A-A counts one ace as 1."""
        assert score(make_hand("AS", "AH")) == 12

    def test_bust(self):
        """Test 10-9-5 busts."""
        hand = make_hand("10S", "9H", "5C")
        assert score(hand) == BUST == 0

    def test_empty_hand(self, empty_hand):
        """Test an empty hand scores 0, not the natural sentinel."""
        assert score(empty_hand) == 0
        assert score(empty_hand) != NATURAL

    def test_three_aces_and_eight(self):
        """Test two aces drop to 1: 11+11+11+8 = 41 -> 31 -> 21."""
        assert score(make_hand("AS", "AH", "AC", "8D")) == 21

    def test_three_card_21_is_not_natural(self):
        """Test 21 with three cards scores 21."""
        assert score(make_hand("7S", "7H", "7C")) == 21

    def test_hard_total(self, hard_16_hand):
        """Test a plain total."""
        assert score(hard_16_hand) == 16

    def test_soft_to_hard(self):
        """Test an ace drops to 1 once the hand would bust."""
        assert score(make_hand("AS", "5H")) == 16
        assert score(make_hand("AS", "5H", "8C")) == 14

    def test_order_does_not_matter(self):
        """Test the same cards score the same in any order."""
        assert score(make_hand("10S", "6H", "AC")) == score(make_hand("AC", "10S", "6H")) == 17
        assert score(make_hand("KS", "5H", "9C", "AD")) == score(make_hand("AD", "9C", "5H", "KS"))

    def test_not_a_hand(self):
        """Test a malformed hand is rejected."""
        with pytest.raises(InvalidArgumentError):
            score(None)
        with pytest.raises(InvalidArgumentError):
            score([Card(Rank.ACE, Suit.SPADES)])

    @given(hand_strategy())
    def test_score_range(self, hand):
        """Test scores are 0, 22, or a total that cannot exceed 21."""
        value = score(hand)
        assert value == BUST or value == NATURAL or 2 <= value <= 21
        if value == NATURAL:
            assert len(hand) == 2

    @given(hand_strategy(min_cards=1))
    def test_bust_matches_hard_total(self, hand):
        """Test a hand busts exactly when it is over 21 with every ace as 1."""
        hard_total = sum(1 if card.is_ace else card.value for card in hand)
        assert (score(hand) == BUST) == (hard_total > 21)


class TestDescribeScore:
    """Tests for score display."""

    def test_natural(self):
        """Test a natural shows as Blackjack."""
        assert describe_score(22) == "Blackjack"

    def test_numbers(self):
        """Test other scores show as numbers."""
        assert describe_score(21) == "21"
        assert describe_score(0) == "0"


class TestCompareScores:
    """Tests for comparing final scores."""

    def test_higher_wins(self):
        """Test the higher score wins."""
        assert compare_scores(20, 18) == 1
        assert compare_scores(18, 20) == -1

    def test_natural_beats_21(self):
        """Test a natural beats a drawn 21."""
        assert compare_scores(22, 21) == 1

    def test_bust_loses_to_any_total(self):
        """Test a bust loses to a standing hand."""
        assert compare_scores(0, 17) == -1

    def test_equal_is_draw(self):
        """Test equal scores draw, including a double bust."""
        assert compare_scores(19, 19) == 0
        assert compare_scores(0, 0) == 0
