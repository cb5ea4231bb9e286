"""Quote service for the swap simulator API.

Resolves token decimals, runs the quote and values both sides in USD.
Nothing here signs or sends a transaction.
"""

import asyncio
import logging
from typing import Optional

from swapsim.chain.provider import ChainProvider
from swapsim.routing.base import QuoteError
from swapsim.routing.quoter import QuoteResolver
from swapsim.tokens import COMMON_TOKENS, DEFAULT_DECIMALS, FEE_TIERS, find_token
from swapsim.web.contracts.quotes import (
    FeeTierModel,
    SwapQuoteRequest,
    SwapQuoteResponse,
    TokenListResponse,
    TokenModel,
)

logger = logging.getLogger(__name__)


class QuoteRequestError(Exception):
    """Exception raised for a quote request the caller can fix (HTTP 400)."""
    pass


class QuoteService:
    """Service for simulated Uniswap V3 swap quotes.

    The resolver is built from the provider on first use, so an app without
    RPC credentials still starts and only fails when a quote is requested.
    """

    def __init__(
        self,
        provider: Optional[ChainProvider] = None,
        resolver: Optional[QuoteResolver] = None,
    ):
        if provider is None and resolver is None:
            raise ValueError("QuoteService needs a provider or a resolver")
        self._provider = provider
        self._resolver = resolver

    @property
    def resolver(self) -> QuoteResolver:
        if self._resolver is None:
            self._resolver = QuoteResolver.from_provider(self._provider)
        return self._resolver

    async def _decimals_in(self, token: str) -> int:
        """Catalogue decimals, else on-chain decimals(), else 18."""
        info = find_token(token)
        if info:
            return info.decimals
        try:
            return await self.resolver.client.get_decimals(token)
        except Exception as e:
            logger.error(f"Error fetching token decimals for {token}: {e}")
            return DEFAULT_DECIMALS

    async def get_quote(self, request: SwapQuoteRequest) -> SwapQuoteResponse:
        """Quote a swap and value both sides in USD.

        Raises:
            QuoteRequestError: Missing parameters, bad amount/fee, or no route
            ConfigurationError: If no RPC endpoint is configured
        """
        if not request.is_complete:
            raise QuoteRequestError("Missing required parameters")

        resolver = self.resolver
        decimals_in = await self._decimals_in(request.token_in)

        try:
            result = await resolver.quote(
                request.token_in,
                request.token_out,
                request.fee,
                request.amount_in,
                decimals_in,
            )
        except QuoteError as e:
            raise QuoteRequestError(f"Failed to get quote: {e}") from e

        token_in_usd_price, token_out_usd_price = await asyncio.gather(
            resolver.usd_price(request.token_in, decimals_in),
            resolver.usd_price(request.token_out, result.decimals_out),
        )

        return SwapQuoteResponse(
            amount_in=request.amount_in,
            amount_out=result.amount_out,
            amount_in_usd=resolver.usd_value(request.amount_in, token_in_usd_price),
            amount_out_usd=resolver.usd_value(result.amount_out, token_out_usd_price),
            token_in_usd_price=token_in_usd_price,
            token_out_usd_price=token_out_usd_price,
            token_in=request.token_in,
            token_out=request.token_out,
            fee=request.fee,
            decimals_in=decimals_in,
            decimals_out=result.decimals_out,
            route=result.route.value,
        )

    def get_tokens(self) -> TokenListResponse:
        """Well-known tokens and fee tiers."""
        return TokenListResponse(
            tokens=[
                TokenModel(symbol=t.symbol, address=t.address, decimals=t.decimals)
                for t in COMMON_TOKENS.values()
            ],
            fee_tiers=[FeeTierModel(**tier) for tier in FEE_TIERS],
        )
