"""Web services for the swap simulator API.

These services read chain state and manage local wallets. They never
sign or broadcast transactions.
"""

from swapsim.web.services.quote_service import QuoteRequestError, QuoteService
from swapsim.web.services.wallet_service import (
    WalletNotFoundError,
    WalletRequestError,
    WalletService,
)

__all__ = [
    "QuoteService",
    "QuoteRequestError",
    "WalletService",
    "WalletRequestError",
    "WalletNotFoundError",
]
