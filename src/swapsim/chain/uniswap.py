"""Uniswap V3 Quoter and ERC-20 contract access.

All calls here are eth_call reads. quoteExactInputSingle is declared
nonpayable on the Quoter, but it is designed to be simulated: the
contract reverts internally and returns the amount, so calling it
statically never changes state or spends gas.
"""

import logging

from web3 import AsyncWeb3, Web3

from swapsim.tokens import UNISWAP_V3_QUOTER_ADDRESS

logger = logging.getLogger(__name__)

QUOTER_ABI = [
    {
        "name": "quoteExactInputSingle",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "tokenIn", "type": "address"},
            {"name": "tokenOut", "type": "address"},
            {"name": "fee", "type": "uint24"},
            {"name": "amountIn", "type": "uint256"},
            {"name": "sqrtPriceLimitX96", "type": "uint160"},
        ],
        "outputs": [{"name": "amountOut", "type": "uint256"}],
    },
]

ERC20_ABI = [
    {
        "name": "decimals",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint8"}],
    },
]

# No price limit
NO_SQRT_PRICE_LIMIT = 0


class UniswapV3Client:
    """Thin async wrapper over the Quoter and ERC-20 contracts.

    Errors from web3 (reverts, transport failures, bad addresses) are
    raised unchanged; callers decide how to classify them.
    """

    def __init__(self, connection: AsyncWeb3, quoter_address: str = UNISWAP_V3_QUOTER_ADDRESS):
        self.w3 = connection
        self.quoter_address = Web3.to_checksum_address(quoter_address)
        self._quoter = self.w3.eth.contract(address=self.quoter_address, abi=QUOTER_ABI)

    def _erc20(self, token: str):
        return self.w3.eth.contract(address=Web3.to_checksum_address(token), abi=ERC20_ABI)

    async def quote_exact_input_single(
        self,
        token_in: str,
        token_out: str,
        fee: int,
        amount_in: int,
    ) -> int:
        """Simulate an exact-input swap through one pool.

        Args:
            token_in: Input token address
            token_out: Output token address
            fee: Pool fee tier (500, 3000 or 10000)
            amount_in: Input amount in the token's smallest unit

        Returns:
            Output amount in token_out's smallest unit
        """
        amount_out = await self._quoter.functions.quoteExactInputSingle(
            Web3.to_checksum_address(token_in),
            Web3.to_checksum_address(token_out),
            fee,
            amount_in,
            NO_SQRT_PRICE_LIMIT,
        ).call()
        return int(amount_out)

    async def get_decimals(self, token: str) -> int:
        """Read an ERC-20 token's decimals()."""
        return int(await self._erc20(token).functions.decimals().call())
