"""Request and response contracts for the web layer."""

from swapsim.web.contracts.quotes import (
    ErrorResponse,
    FeeTierModel,
    SwapQuoteRequest,
    SwapQuoteResponse,
    TokenListResponse,
    TokenModel,
)
from swapsim.web.contracts.wallets import (
    CreatedWallet,
    CreateWalletRequest,
    CreateWalletResponse,
    SuccessResponse,
    WalletDetail,
    WalletDetailResponse,
    WalletListItem,
    WalletListResponse,
)

__all__ = [
    # Quote contracts
    "SwapQuoteRequest",
    "SwapQuoteResponse",
    "ErrorResponse",
    "TokenModel",
    "FeeTierModel",
    "TokenListResponse",
    # Wallet contracts
    "CreateWalletRequest",
    "CreatedWallet",
    "CreateWalletResponse",
    "WalletListItem",
    "WalletListResponse",
    "WalletDetail",
    "WalletDetailResponse",
    "SuccessResponse",
]
