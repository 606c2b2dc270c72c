"""Dealer API endpoints."""

import logging

from fastapi import APIRouter, Request

from api.rate_limit import DEFAULT_LIMIT, limiter
from api.schemas import BustRequest
from core.statistics.probability import BustProbabilityCalculator

logger = logging.getLogger(__name__)

router = APIRouter()

_calculator = BustProbabilityCalculator()


@router.post(
    "/bust",
    summary="Get probability for player to bust on next card",
    responses={
        200: {
            "description": "Probability to bust on next card",
            "content": {"application/json": {"example": 0.123456789}},
        },
        422: {
            "description": "Invalid data provided",
            "content": {
                "application/json": {
                    "example": "Missing 'hand' array in the message body.",
                },
            },
        },
    },
)
@limiter.limit(DEFAULT_LIMIT)
async def bust_probability(request: Request, payload: BustRequest) -> float:
    """Get the probability that the next card drawn busts the hand."""
    body = payload.model_dump(by_alias=True)
    logger.info("enter... body=%s", body)

    probability = _calculator.get_busting_probability(payload.hand, payload.remaining_cards)

    logger.info("exit... body=%s probability=%s", body, probability)
    return probability
