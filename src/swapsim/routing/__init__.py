"""Quote resolution for Uniswap V3.

- Direct single-pool quote for the requested fee tier
- Two-hop fallback through WETH on the 0.3% pools
- USD pricing by quoting against USDC
"""

from swapsim.routing.base import (
    InvalidAmountError,
    InvalidFeeTierError,
    NoRouteError,
    PriceUnavailableError,
    QuoteError,
    QuoteRequest,
    QuoteResult,
    QuoteRoute,
    QuoteUnavailableError,
)
from swapsim.routing.quoter import QuoteResolver
from swapsim.routing.units import format_ether, format_units, parse_units

__all__ = [
    # Types
    "QuoteRequest",
    "QuoteResult",
    "QuoteRoute",
    # Errors
    "QuoteError",
    "InvalidAmountError",
    "InvalidFeeTierError",
    "QuoteUnavailableError",
    "NoRouteError",
    "PriceUnavailableError",
    # Resolution
    "QuoteResolver",
    # Units
    "parse_units",
    "format_units",
    "format_ether",
]
