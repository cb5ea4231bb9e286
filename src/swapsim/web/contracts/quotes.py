"""Swap quote request and response contracts.

Field names on the wire are camelCase. Chain amounts are strings so no
256-bit integer ever reaches JSON as a number.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SwapQuoteRequest(BaseModel):
    """Request for a swap quote.

    Every field is optional here so that missing parameters produce the
    API's own 400 error rather than a schema validation error.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    token_in: Optional[str] = Field(None, alias="tokenIn", description="Input token address")
    token_out: Optional[str] = Field(None, alias="tokenOut", description="Output token address")
    fee: Optional[str] = Field(None, description="Pool fee tier: 500, 3000 or 10000")
    amount_in: Optional[str] = Field(None, alias="amountIn", description="Human amount of tokenIn")

    @property
    def is_complete(self) -> bool:
        return all([self.token_in, self.token_out, self.fee, self.amount_in])


class SwapQuoteResponse(BaseModel):
    """Successful swap quote with USD valuations."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    amount_in: str = Field(..., alias="amountIn")
    amount_out: str = Field(..., alias="amountOut")
    amount_in_usd: float = Field(..., alias="amountInUsd")
    amount_out_usd: float = Field(..., alias="amountOutUsd")
    token_in_usd_price: float = Field(
        ..., alias="tokenInUsdPrice", description="0 when the price is unknown"
    )
    token_out_usd_price: float = Field(
        ..., alias="tokenOutUsdPrice", description="0 when the price is unknown"
    )
    token_in: str = Field(..., alias="tokenIn")
    token_out: str = Field(..., alias="tokenOut")
    fee: str
    decimals_in: int = Field(..., alias="decimalsIn")
    decimals_out: int = Field(..., alias="decimalsOut")
    route: str = Field(..., description="DIRECT or WETH_FALLBACK")


class ErrorResponse(BaseModel):
    """Failed request."""

    success: bool = False
    error: str


class TokenModel(BaseModel):
    symbol: str
    address: str
    decimals: int


class FeeTierModel(BaseModel):
    value: str
    label: str


class TokenListResponse(BaseModel):
    """Well-known tokens and Uniswap V3 fee tiers."""

    success: bool = True
    tokens: list[TokenModel] = Field(default_factory=list)
    fee_tiers: list[FeeTierModel] = Field(default_factory=list, alias="feeTiers")

    model_config = ConfigDict(populate_by_name=True)
