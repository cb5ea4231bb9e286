"""FastAPI dependencies and shared response helpers.

Services are created once by the application factory and kept on
``app.state``; controllers receive them through these dependencies so
tests can swap in their own.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from swapsim.web.contracts.quotes import ErrorResponse
from swapsim.web.services.quote_service import QuoteService
from swapsim.web.services.wallet_service import WalletService


def get_quote_service(request: Request) -> QuoteService:
    return request.app.state.quote_service


def get_wallet_service(request: Request) -> WalletService:
    return request.app.state.wallet_service


def error_response(status_code: int, message: str) -> JSONResponse:
    """JSON error payload: {"success": false, "error": message}."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )
