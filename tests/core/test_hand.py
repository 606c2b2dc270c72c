"""Tests for Hand evaluation."""

from itertools import product

from hypothesis import given, strategies as st

from core.hand import Hand, HandValue, best_total, is_bust

hands = st.lists(st.integers(min_value=1, max_value=10), max_size=8)


def _enumerated_best_total(cards: list[int]) -> int:
    """Best total by trying every Ace as 1 or 11."""
    others = sum(c for c in cards if c != 1)
    aces = cards.count(1)
    totals = [others + sum(choice) for choice in product((1, 11), repeat=aces)]
    safe = [t for t in totals if t <= 21]
    return max(safe) if safe else min(totals)


class TestBestTotal:
    """Tests for best_total."""

    def test_empty_hand(self):
        assert best_total([]) == HandValue(0, False)

    def test_hard_total(self):
        assert best_total([10, 6]) == HandValue(16, False)

    def test_soft_total(self):
        assert best_total([1, 6]) == HandValue(17, True)

    def test_two_aces(self):
        """Test A-A is 12 (11 + 1), not 2 or 22."""
        assert best_total([1, 1]).total == 12
        assert best_total([1, 1]).is_soft

    def test_blackjack(self):
        assert best_total([1, 10]) == HandValue(21, True)

    def test_ace_demoted_when_needed(self):
        """Test A-5-8 counts the ace as 1."""
        assert best_total([1, 5, 8]) == HandValue(14, False)

    def test_many_aces(self):
        """Test A-A-A-9 = 12 with every ace as 1."""
        assert best_total([1, 1, 1]) == HandValue(13, True)
        assert best_total([1, 1, 1, 9]) == HandValue(12, False)

    def test_unavoidable_bust_uses_minimal_total(self):
        assert best_total([10, 6, 10]) == HandValue(26, False)
        assert best_total([1, 10, 10, 5]) == HandValue(26, False)

    def test_exactly_21_with_promotion(self):
        assert best_total([1, 1, 9]) == HandValue(21, True)

    def test_order_does_not_matter(self):
        assert best_total([1, 9, 1]) == best_total([9, 1, 1])

    @given(hands)
    def test_matches_enumeration(self, cards):
        """Test the closed form agrees with trying every ace choice."""
        assert best_total(cards).total == _enumerated_best_total(cards)

    @given(hands)
    def test_total_over_21_only_when_unavoidable(self, cards):
        value = best_total(cards)
        if value.total > 21:
            assert value.total == sum(cards)
            assert not value.is_soft


class TestIsBust:
    """Tests for is_bust."""

    def test_not_bust(self):
        assert not is_bust([10, 9])
        assert not is_bust([10, 1, 10])

    def test_bust(self):
        assert is_bust([10, 9, 3])
        assert is_bust([10, 10, 10])


class TestHand:
    """Tests for the Hand value object."""

    def test_empty_hand(self, empty_hand):
        assert len(empty_hand) == 0
        assert empty_hand.value == 0
        assert not empty_hand.is_soft
        assert not empty_hand.is_busted

    def test_soft_hand(self, soft_17_hand):
        assert soft_17_hand.value == 17
        assert soft_17_hand.is_soft

    def test_with_card_returns_new_hand(self, soft_17_hand):
        """Test the ace switches from 11 to 1 and the original is untouched."""
        drawn = soft_17_hand.with_card(8)
        assert drawn.value == 15
        assert not drawn.is_soft
        assert soft_17_hand.cards == (1, 6)

    def test_bust_hand(self, bust_hand):
        assert bust_hand.is_busted
        assert bust_hand.value == 26

    def test_iteration(self, hard_19_hand):
        assert list(hard_19_hand) == [10, 9]

    def test_str(self, soft_17_hand, hard_19_hand, bust_hand):
        assert str(soft_17_hand) == "A 6 (soft 17)"
        assert str(hard_19_hand) == "10 9 (19)"
        assert str(bust_hand) == "10 6 10 (BUST)"

    def test_repr(self, hard_19_hand):
        assert repr(hard_19_hand) == "Hand([10, 9], value=19)"
