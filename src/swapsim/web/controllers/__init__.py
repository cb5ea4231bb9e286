"""HTTP controllers for the swap simulator API."""

from swapsim.web.controllers.quotes import router as quotes_router
from swapsim.web.controllers.wallets import router as wallets_router

__all__ = [
    "quotes_router",
    "wallets_router",
]
