"""Pytest fixtures for bust probability tests."""

import os

# The shared limiter is built at import time; keep it out of the way of tests.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest

from core.hand import Hand
from core.statistics.probability import BustProbabilityCalculator


@pytest.fixture
def calculator():
    """A bust probability calculator."""
    return BustProbabilityCalculator()


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return Hand.of(1, 6)


@pytest.fixture
def hard_19_hand():
    """A hard 19 hand (10-9)."""
    return Hand.of(10, 9)


@pytest.fixture
def bust_hand():
    """A busted hand (10-6-10)."""
    return Hand.of(10, 6, 10)
