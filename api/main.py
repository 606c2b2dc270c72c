"""FastAPI application entry point."""

import logging
import logging.config

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from api.errors import BustRequestError, from_validation_errors
from api.rate_limit import DEFAULT_LIMIT, limiter, rate_limit_exceeded_handler
from api.routes import dealer
from config import config

logging.config.dictConfig(config.logging.as_dict_config())
logger = logging.getLogger(__name__)


async def _bust_request_error_handler(request: Request, exc: BustRequestError) -> JSONResponse:
    """Reject the request with a bare human-readable message."""
    logger.warning("Invalid body content: %s", exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.message)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Map pydantic validation errors onto the rejection taxonomy."""
    return await _bust_request_error_handler(request, from_validation_errors(exc.errors()))


app = FastAPI(
    title="Bust Probability",
    description="Probability of busting on the next card of a blackjack hand",
    version="0.1.0",
    debug=config.debug,
)

# Add rate limiter to app state and exception handlers
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_exception_handler(RequestValidationError, _validation_error_handler)

# CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors.allowed_origins,
    allow_credentials=config.cors.allow_credentials,
    allow_methods=config.cors.allow_methods,
    allow_headers=config.cors.allow_headers,
)


@app.get("/api/health")
@limiter.limit(DEFAULT_LIMIT)
async def health_check(request: Request) -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


# Include routers
app.include_router(dealer.router, prefix="/dealer", tags=["Dealer"])
