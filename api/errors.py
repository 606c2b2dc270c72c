"""Request rejection taxonomy for the bust endpoint."""

import json
from typing import Any, Sequence

FIELD_HAND = "hand"
FIELD_REMAINING_CARDS = "remainingCards"


class BustRequestError(Exception):
    """A request that must be rejected before reaching the calculator."""

    status_code = 422

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingFieldError(BustRequestError):
    """A required array is absent from the body."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing '{field}' array in the message body.")
        self.field = field


class InvalidCardValueError(BustRequestError):
    """An array element is not an integer in [1, 10]."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(
            f"Wrong value found in '{field}': {_format_value(value)}. "
            "Expected values are integer between 1 and 10 included"
        )
        self.field = field
        self.value = value


class EmptyRemainingCardsError(BustRequestError):
    """There is nothing left to draw."""

    def __init__(self, count: int = 0) -> None:
        super().__init__(
            f"There should be at least a value in '{FIELD_REMAINING_CARDS}', {count} given"
        )
        self.count = count


class MalformedBodyError(BustRequestError):
    """The body is not a JSON object holding arrays."""


_CARD_VALUE_ERROR_TYPES = {
    "int_type",
    "int_parsing",
    "int_from_float",
    "value_error",
}


def _format_value(value: Any) -> str:
    """Render a rejected value the way the client wrote it in JSON."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def from_validation_errors(errors: Sequence[dict[str, Any]]) -> BustRequestError:
    """
    Translate pydantic validation errors into the first applicable rejection.

    pydantic reports errors in field declaration order and item order, which
    matches the order the checks are documented in: hand first, then
    remainingCards.
    """
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if loc and loc[0] == "body":
            loc = loc[1:]
        error_type = error.get("type", "")

        if error_type == "json_invalid":
            return MalformedBodyError("The message body is not valid JSON.")

        if not loc:
            return MalformedBodyError(
                "Expected a JSON object in the message body "
                "(sent with Content-Type: application/json)."
            )

        field = str(loc[0])
        if field not in (FIELD_HAND, FIELD_REMAINING_CARDS):
            continue

        if len(loc) == 1:
            if error_type == "missing":
                return MissingFieldError(field)
            if error_type == "too_short":
                return EmptyRemainingCardsError(len(error.get("input") or ()))
            return MalformedBodyError(f"'{field}' should be an array of integers.")

        if error_type in _CARD_VALUE_ERROR_TYPES:
            return InvalidCardValueError(field, error.get("input"))

    return MalformedBodyError("Invalid body content.")
