"""Swap quote API endpoints."""

import logging

from fastapi import APIRouter, Depends

from swapsim.web.contracts.quotes import (
    ErrorResponse,
    SwapQuoteRequest,
    SwapQuoteResponse,
    TokenListResponse,
)
from swapsim.web.dependencies import error_response, get_quote_service
from swapsim.web.services.quote_service import QuoteRequestError, QuoteService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/swap", tags=["swap"])


@router.post(
    "/quote",
    response_model=SwapQuoteResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_quote(
    request: SwapQuoteRequest,
    service: QuoteService = Depends(get_quote_service),
):
    """Get a simulated swap quote.

    Tries the requested pool first and falls back to routing through WETH.
    This is a READ-ONLY operation - no transactions are executed.
    """
    try:
        return await service.get_quote(request)
    except QuoteRequestError as e:
        return error_response(400, str(e))
    except Exception as e:
        logger.error(f"Swap quote error: {e}", exc_info=True)
        return error_response(500, str(e) or "Unknown error occurred")


@router.get("/tokens", response_model=TokenListResponse)
async def get_tokens(service: QuoteService = Depends(get_quote_service)):
    """List well-known tokens and Uniswap V3 fee tiers."""
    return service.get_tokens()
