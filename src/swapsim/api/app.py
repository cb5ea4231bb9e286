"""FastAPI application factory.

This is where the chain provider, quote resolver and wallet store are
created and wired together; nothing else builds them.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from swapsim.chain.provider import ChainProvider
from swapsim.config import Settings, get_settings
from swapsim.wallets.manager import WalletManager
from swapsim.wallets.store import WalletStore
from swapsim.web.dependencies import error_response
from swapsim.web.services.quote_service import QuoteService
from swapsim.web.services.wallet_service import WalletService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings: Settings = app.state.settings
    if not settings.has_rpc_credentials:
        logger.warning("INFURA_API_KEY not set - quotes and balances will fail")
    logger.info(f"Swap simulator API ready (network: {settings.ethereum_network})")
    yield
    logger.info("Swap simulator API shutting down")


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies get the same error shape as other 400s."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return error_response(400, f"Invalid request: {details}")


def create_app(
    settings: Optional[Settings] = None,
    provider: Optional[ChainProvider] = None,
    quote_service: Optional[QuoteService] = None,
    wallet_service: Optional[WalletService] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    provider = provider or ChainProvider(settings)

    app = FastAPI(
        title="Swap Simulator API",
        description="Uniswap V3 quote simulation and local wallet API",
        version="0.1.0",
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.state.settings = settings
    app.state.provider = provider
    app.state.quote_service = quote_service or QuoteService(provider=provider)
    app.state.wallet_service = wallet_service or WalletService(
        WalletManager(WalletStore(Path(settings.wallets_dir)), provider=provider)
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Register routes
    from swapsim.api.routes import health
    from swapsim.web.controllers import quotes_router, wallets_router

    app.include_router(health.router, tags=["Health"])
    app.include_router(quotes_router, prefix="/api")
    app.include_router(wallets_router, prefix="/api")

    return app
