"""Ethereum mainnet token catalogue and Uniswap V3 constants.

Addresses are stored checksummed; lookups are case-insensitive.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


@dataclass(frozen=True)
class TokenInfo:
    """A well-known ERC-20 token."""

    symbol: str
    address: str
    decimals: int


class FeeTier(IntEnum):
    """Uniswap V3 pool fee, in hundredths of a basis point."""

    LOWEST = 500
    MEDIUM = 3000
    HIGH = 10000

    @property
    def label(self) -> str:
        return f"{self.value / 10000:g}%"


# Uniswap V3 Quoter (v1) on mainnet
UNISWAP_V3_QUOTER_ADDRESS = "0xb27308f9F90D607463bb33eA1BeBb41C27CE5AB6"

WETH_ADDRESS = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
WETH_DECIMALS = 18

USDC_ADDRESS = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
USDC_DECIMALS = 6

# Both WETH hops of a fallback route use the 0.3% pools
FALLBACK_FEE_TIER = FeeTier.MEDIUM

DEFAULT_DECIMALS = 18

COMMON_TOKENS: dict[str, TokenInfo] = {
    "WETH": TokenInfo("WETH", WETH_ADDRESS, WETH_DECIMALS),
    "USDC": TokenInfo("USDC", USDC_ADDRESS, USDC_DECIMALS),
    "USDT": TokenInfo("USDT", "0xdAC17F958D2ee523a2206206994597C13D831ec7", 6),
    "DAI": TokenInfo("DAI", "0x6B175474E89094C44Da98b954EedeAC495271d0F", 18),
    "WBTC": TokenInfo("WBTC", "0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599", 8),
    "UNI": TokenInfo("UNI", "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984", 18),
    "LINK": TokenInfo("LINK", "0x514910771AF9Ca656af840dff83E8264EcF986CA", 18),
    "AAVE": TokenInfo("AAVE", "0x7Fc66500c84A76Ad7e9c93437bFc5Ac33E2DDaE9", 18),
}

FEE_TIERS = [{"value": str(tier.value), "label": tier.label} for tier in FeeTier]


def same_address(a: str, b: str) -> bool:
    """Compare two hex addresses ignoring checksum casing."""
    return a.lower() == b.lower()


def find_token(address: str) -> Optional[TokenInfo]:
    """Look up a catalogue token by address."""
    for token in COMMON_TOKENS.values():
        if same_address(token.address, address):
            return token
    return None


def is_fee_tier(value: int) -> bool:
    """Check if value is a supported Uniswap V3 fee tier."""
    return value in {tier.value for tier in FeeTier}
