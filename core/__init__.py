"""Core blackjack engine - 100% UI-agnostic."""

from core.hand import Hand, HandValue, best_total, is_bust
from core.statistics import BustProbabilityCalculator, get_busting_probability

__all__ = [
    "Hand",
    "HandValue",
    "best_total",
    "is_bust",
    "BustProbabilityCalculator",
    "get_busting_probability",
]
