"""Hand evaluation for blackjack."""

from dataclasses import dataclass
from typing import Iterable, Iterator

from core.cards import ACE, ACE_BONUS, BLACKJACK, card_label


@dataclass(frozen=True, slots=True)
class HandValue:
    """Best achievable total of a hand."""

    total: int
    is_soft: bool

    @property
    def is_bust(self) -> bool:
        """Check if the total is over 21."""
        return self.total > BLACKJACK


def best_total(cards: Iterable[int]) -> HandValue:
    """
    Calculate the best hand value.

    Every Ace starts at 1 and is promoted to 11 while the total stays at or
    under 21. Returns the highest value that doesn't bust, or the lowest bust
    value when no choice of Aces avoids busting.
    """
    total = 0
    aces = 0
    for card in cards:
        total += card
        if card == ACE:
            aces += 1

    if total > BLACKJACK:
        return HandValue(total, False)

    promotions = min(aces, (BLACKJACK - total) // ACE_BONUS)
    return HandValue(total + ACE_BONUS * promotions, promotions > 0)


def is_bust(cards: Iterable[int]) -> bool:
    """Check if a hand has busted (best value > 21)."""
    return best_total(cards).is_bust


@dataclass(frozen=True)
class Hand:
    """An immutable hand of card values."""

    cards: tuple[int, ...] = ()

    @classmethod
    def of(cls, *cards: int) -> "Hand":
        """Create a hand from card values."""
        return cls(tuple(cards))

    def with_card(self, card: int) -> "Hand":
        """Return a new hand with one more card."""
        return Hand(self.cards + (card,))

    @property
    def value(self) -> int:
        return best_total(self.cards).total

    @property
    def is_soft(self) -> bool:
        """Check if the hand counts an Ace as 11."""
        return best_total(self.cards).is_soft

    @property
    def is_busted(self) -> bool:
        return is_bust(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[int]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(card_label(card) for card in self.cards)
        value_str = f"({self.value})"
        if self.is_soft:
            value_str = f"(soft {self.value})"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}".strip()

    def __repr__(self) -> str:
        return f"Hand({list(self.cards)!r}, value={self.value})"
