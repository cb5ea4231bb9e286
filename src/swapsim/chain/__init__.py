"""Chain access: connection provider and Uniswap V3 contract client."""

from swapsim.chain.provider import ChainProvider, ConfigurationError
from swapsim.chain.uniswap import UniswapV3Client

__all__ = [
    "ChainProvider",
    "ConfigurationError",
    "UniswapV3Client",
]
