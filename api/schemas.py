"""Pydantic schemas for API requests and responses."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictInt, WithJsonSchema

from core.cards import MAX_CARD_VALUE, MIN_CARD_VALUE, is_valid_card_value


def _check_card_value(value: int) -> int:
    """Reject values outside the card range."""
    if not is_valid_card_value(value):
        raise ValueError(f"card value must be between {MIN_CARD_VALUE} and {MAX_CARD_VALUE}")
    return value


CardValue = Annotated[
    StrictInt,
    AfterValidator(_check_card_value),
    WithJsonSchema({"type": "integer", "minimum": MIN_CARD_VALUE, "maximum": MAX_CARD_VALUE}),
]


class BustRequest(BaseModel):
    """
    Validated request for the bust probability.

    Instances only exist once every card is an integer in [1, 10] and at
    least one card remains, so the calculator never re-checks its input.
    The body must be sent as ``Content-Type: application/json``.
    """

    model_config = ConfigDict(frozen=True)

    hand: list[CardValue] = Field(
        ...,
        description="Hand of user",
        examples=[[10, 6]],
    )
    remaining_cards: list[CardValue] = Field(
        ...,
        alias="remainingCards",
        min_length=1,
        description="List of remaining cards",
        examples=[[1, 2, 3, 10]],
    )
