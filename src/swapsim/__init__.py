"""Swap simulator: Uniswap V3 quote simulation and local Ethereum wallets."""

__version__ = "0.1.0"
