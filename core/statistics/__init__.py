"""Statistical calculations for blackjack."""

from core.statistics.probability import (
    BustProbabilityCalculator,
    count_busting_cards,
    get_busting_probability,
)

__all__ = [
    "BustProbabilityCalculator",
    "count_busting_cards",
    "get_busting_probability",
]
