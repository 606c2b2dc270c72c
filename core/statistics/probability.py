"""Probability calculations for blackjack."""

from collections import Counter
from typing import Sequence

from core.hand import is_bust


def count_busting_cards(hand: Sequence[int], remaining_cards: Sequence[int]) -> int:
    """
    Count the remaining cards that would bust the hand if drawn next.

    Duplicates count once per physical card.
    """
    base = tuple(hand)
    return sum(
        copies
        for card, copies in Counter(remaining_cards).items()
        if is_bust(base + (card,))
    )


class BustProbabilityCalculator:
    """
    Exact probability of busting on the next draw.

    The remaining cards are the full, known population of the next draw,
    so the result is a combinatorial fraction rather than an estimate.
    Inputs are trusted: values must be in [1, 10] and remaining_cards must
    not be empty.
    """

    def get_busting_probability(
        self,
        hand: Sequence[int],
        remaining_cards: Sequence[int],
    ) -> float:
        """
        Get the probability of busting on the next card.

        Args:
            hand: Card values already in the hand (1 = Ace)
            remaining_cards: Every card that could be drawn next

        Returns:
            Probability of busting (0-1)
        """
        return count_busting_cards(hand, remaining_cards) / len(remaining_cards)


_calculator = BustProbabilityCalculator()


def get_busting_probability(hand: Sequence[int], remaining_cards: Sequence[int]) -> float:
    """Module-level shortcut for BustProbabilityCalculator.get_busting_probability."""
    return _calculator.get_busting_probability(hand, remaining_cards)
