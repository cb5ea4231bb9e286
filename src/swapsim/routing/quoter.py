"""Uniswap V3 quote resolution with WETH fallback and USD pricing.

A quote first tries the single pool for the requested pair and fee tier.
If that call fails (most often because no such pool exists) the amount is
routed through WETH over the 0.3% pools: token_in -> WETH -> token_out.
Both quotes are simulations; price impact of the extra hop is not modelled.

USD prices are derived by quoting one unit of a token against USDC.
"""

import logging
from typing import Optional

from swapsim.chain.provider import ChainProvider
from swapsim.chain.uniswap import UniswapV3Client
from swapsim.routing.base import (
    InvalidAmountError,
    InvalidFeeTierError,
    NoRouteError,
    PriceUnavailableError,
    QuoteRequest,
    QuoteResult,
    QuoteRoute,
    QuoteUnavailableError,
)
from swapsim.routing.units import format_units, parse_units
from swapsim.tokens import (
    FALLBACK_FEE_TIER,
    FeeTier,
    USDC_ADDRESS,
    WETH_ADDRESS,
    is_fee_tier,
    same_address,
)

logger = logging.getLogger(__name__)


class QuoteResolver:
    """Resolves swap quotes against the Uniswap V3 Quoter.

    Stateless apart from the injected client; every call re-issues its
    chain reads, so concurrent resolutions never interfere.
    """

    def __init__(
        self,
        client: UniswapV3Client,
        weth_address: str = WETH_ADDRESS,
        stable_address: str = USDC_ADDRESS,
        fallback_fee_tier: int = FALLBACK_FEE_TIER,
    ):
        self.client = client
        self.weth_address = weth_address
        self.stable_address = stable_address
        self.fallback_fee_tier = int(fallback_fee_tier)
        logger.debug("QuoteResolver initialized")

    @classmethod
    def from_provider(cls, provider: ChainProvider) -> "QuoteResolver":
        """Build a resolver on the provider's shared connection."""
        return cls(UniswapV3Client(provider.get_connection()))

    # ------------------------------------------------------------------
    # Single pool
    # ------------------------------------------------------------------

    async def quote_direct(
        self, token_in: str, token_out: str, fee_tier: int, amount_in: int
    ) -> int:
        """Quote one pool, in smallest units.

        Raises:
            QuoteUnavailableError: If the Quoter call fails for any reason
        """
        try:
            return await self.client.quote_exact_input_single(
                token_in, token_out, fee_tier, amount_in
            )
        except Exception as e:
            raise QuoteUnavailableError(token_in, token_out, fee_tier, e) from e

    async def _get_decimals(self, token: str, fee_tier: int, token_in: str) -> int:
        try:
            return await self.client.get_decimals(token)
        except Exception as e:
            raise QuoteUnavailableError(token_in, token, fee_tier, e) from e

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    async def quote(
        self,
        token_in: str,
        token_out: str,
        fee_tier: int,
        amount_in: str,
        decimals_in: int,
    ) -> QuoteResult:
        """Get a quote for swapping an exact amount of token_in.

        Args:
            token_in: Input token address
            token_out: Output token address
            fee_tier: Pool fee (500, 3000 or 10000)
            amount_in: Human amount of token_in, e.g. "1.5"
            decimals_in: Decimals of token_in

        Returns:
            QuoteResult with the formatted output amount and the route used

        Raises:
            InvalidFeeTierError: If fee_tier is not a Uniswap V3 tier
            InvalidAmountError: If amount_in is malformed, negative or zero
            NoRouteError: If neither the direct pool nor the WETH route quotes
        """
        fee = self._validate_fee_tier(fee_tier)
        amount_raw = parse_units(amount_in, decimals_in)
        if amount_raw == 0:
            raise InvalidAmountError("Amount must be greater than zero")

        try:
            raw_out = await self.quote_direct(token_in, token_out, fee, amount_raw)
            decimals_out = await self._get_decimals(token_out, fee, token_in)
        except QuoteUnavailableError as direct_error:
            logger.warning(
                f"Direct quote failed, trying fallback through WETH: {direct_error}"
            )
            return await self._quote_via_weth(
                token_in, token_out, fee, amount_in, amount_raw, direct_error
            )

        amount_out = format_units(raw_out, decimals_out)
        logger.info(
            f"Quote: {amount_in} of token {token_in} -> {amount_out} of token {token_out}"
        )
        return QuoteResult(
            token_in=token_in,
            token_out=token_out,
            fee_tier=fee,
            amount_in=amount_in,
            amount_out=amount_out,
            amount_out_raw=raw_out,
            decimals_out=decimals_out,
            route=QuoteRoute.DIRECT,
            path=(token_in, token_out),
        )

    async def _quote_via_weth(
        self,
        token_in: str,
        token_out: str,
        fee_tier: int,
        amount_in: str,
        amount_raw: int,
        direct_error: QuoteUnavailableError,
    ) -> QuoteResult:
        """Two-hop quote token_in -> WETH -> token_out on the fallback fee tier.

        The WETH amount out of the first hop is fed, unrounded, as the input
        of the second hop.
        """
        fee = self.fallback_fee_tier
        try:
            weth_raw = await self.quote_direct(token_in, self.weth_address, fee, amount_raw)
            raw_out = await self.quote_direct(self.weth_address, token_out, fee, weth_raw)
            decimals_out = await self._get_decimals(token_out, fee, self.weth_address)
        except QuoteUnavailableError as fallback_error:
            logger.error(f"Fallback quote also failed: {fallback_error}")
            raise NoRouteError(token_in, token_out, direct_error, fallback_error) from fallback_error

        amount_out = format_units(raw_out, decimals_out)
        logger.info(
            f"Quote via WETH: {amount_in} of token {token_in} -> "
            f"{amount_out} of token {token_out} (requested fee {fee_tier})"
        )
        return QuoteResult(
            token_in=token_in,
            token_out=token_out,
            fee_tier=fee_tier,
            amount_in=amount_in,
            amount_out=amount_out,
            amount_out_raw=raw_out,
            decimals_out=decimals_out,
            route=QuoteRoute.WETH_FALLBACK,
            path=(token_in, self.weth_address, token_out),
        )

    async def resolve(self, request: QuoteRequest) -> QuoteResult:
        """Resolve a QuoteRequest."""
        return await self.quote(
            request.token_in,
            request.token_out,
            request.fee_tier,
            request.amount_in,
            request.decimals_in,
        )

    async def quote_amount(
        self,
        token_in: str,
        token_out: str,
        fee_tier: int,
        amount_in: str,
        decimals_in: int,
    ) -> str:
        """Same as quote() but returns only the formatted output amount."""
        result = await self.quote(token_in, token_out, fee_tier, amount_in, decimals_in)
        return result.amount_out

    @staticmethod
    def _validate_fee_tier(fee_tier: int) -> int:
        try:
            fee = int(fee_tier)
        except (TypeError, ValueError):
            raise InvalidFeeTierError(f"Invalid fee tier: {fee_tier!r}")
        if not is_fee_tier(fee):
            raise InvalidFeeTierError(
                f"Unsupported fee tier {fee}, expected one of {[t.value for t in FeeTier]}"
            )
        return fee

    # ------------------------------------------------------------------
    # USD pricing
    # ------------------------------------------------------------------

    async def _lookup_usd_price(self, token: str, decimals: int) -> float:
        request = QuoteRequest.for_usd_price(
            token, decimals, self.stable_address, fee_tier=FeeTier.MEDIUM
        )
        try:
            result = await self.resolve(request)
            return float(result.amount_out)
        except Exception as e:
            raise PriceUnavailableError(token, e) from e

    async def try_usd_price(self, token: str, decimals: int) -> Optional[float]:
        """USD price of one unit of token, or None when it cannot be determined."""
        if same_address(token, self.stable_address):
            return 1.0
        try:
            return await self._lookup_usd_price(token, decimals)
        except PriceUnavailableError as e:
            logger.error(f"Error getting USD price for token {token}: {e.cause}")
            return None

    async def usd_price(self, token: str, decimals: int) -> float:
        """USD price of one unit of token.

        Never raises. Returns 0.0 when the price is unknown, so a result of
        0.0 means "no price", not a worthless token. Use try_usd_price()
        to tell the two apart.
        """
        price = await self.try_usd_price(token, decimals)
        if price is None:
            return 0.0
        return price

    @staticmethod
    def usd_value(amount: str, usd_price: float) -> float:
        """USD value of a human decimal amount at the given price."""
        return float(amount) * usd_price
