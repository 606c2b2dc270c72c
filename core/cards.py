"""Card value model - cards are plain integers without suit or identity."""

ACE = 1
TEN = 10

MIN_CARD_VALUE = ACE
MAX_CARD_VALUE = TEN

BLACKJACK = 21
ACE_BONUS = 10  # Extra points when an Ace counts as 11


def is_valid_card_value(value: object) -> bool:
    """
    Check if a value is a card value this engine understands.

    Booleans are rejected even though they are ints in Python.
    """
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and MIN_CARD_VALUE <= value <= MAX_CARD_VALUE
    )


def card_label(value: int) -> str:
    """Return a short display label for a card value."""
    if value == ACE:
        return "A"
    return str(value)
