"""Quote result types and the quote error hierarchy."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class QuoteRoute(str, Enum):
    """How a quote was obtained."""

    DIRECT = "DIRECT"
    WETH_FALLBACK = "WETH_FALLBACK"


@dataclass(frozen=True)
class QuoteRequest:
    """Parameters for a single quote resolution."""

    token_in: str
    token_out: str
    fee_tier: int
    amount_in: str
    decimals_in: int

    @classmethod
    def for_usd_price(
        cls, token: str, decimals: int, stable_address: str, fee_tier: int = 3000
    ) -> "QuoteRequest":
        """Quote one whole unit of token against the stable asset."""
        return cls(
            token_in=token,
            token_out=stable_address,
            fee_tier=fee_tier,
            amount_in="1",
            decimals_in=decimals,
        )


@dataclass(frozen=True)
class QuoteResult:
    """A resolved swap quote."""

    token_in: str
    token_out: str
    fee_tier: int
    amount_in: str
    amount_out: str
    amount_out_raw: int
    decimals_out: int
    route: QuoteRoute
    path: tuple[str, ...] = ()


class QuoteError(Exception):
    """Base exception for quote resolution failures."""
    pass


class InvalidAmountError(QuoteError, ValueError):
    """Exception raised when an input amount cannot be converted to smallest units."""
    pass


class InvalidFeeTierError(QuoteError, ValueError):
    """Exception raised when a fee tier is not one of the Uniswap V3 tiers."""
    pass


class QuoteUnavailableError(QuoteError):
    """Exception raised when a single-pool quote call fails."""

    def __init__(self, token_in: str, token_out: str, fee_tier: int, cause: Exception):
        self.token_in = token_in
        self.token_out = token_out
        self.fee_tier = fee_tier
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)


class NoRouteError(QuoteError):
    """Exception raised when both the direct and the WETH-routed quote fail."""

    def __init__(
        self,
        token_in: str,
        token_out: str,
        direct_error: Exception,
        fallback_error: Optional[Exception] = None,
    ):
        self.token_in = token_in
        self.token_out = token_out
        self.direct_error = direct_error
        self.fallback_error = fallback_error
        message = f"Could not get quote for {token_in} to {token_out}: {direct_error}"
        if fallback_error is not None:
            message += f" (WETH fallback: {fallback_error})"
        super().__init__(message)


class PriceUnavailableError(QuoteError):
    """Exception raised when a USD price lookup fails."""

    def __init__(self, token: str, cause: Exception):
        self.token = token
        self.cause = cause
        super().__init__(f"USD price unavailable for {token}: {cause}")
