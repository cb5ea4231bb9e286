"""Local wallet API endpoints.

These wallets are throwaway simulator accounts. Responses include the
private key and mnemonic.
"""

import logging

from fastapi import APIRouter, Depends

from swapsim.web.contracts.quotes import ErrorResponse
from swapsim.web.contracts.wallets import (
    CreateWalletRequest,
    CreateWalletResponse,
    SuccessResponse,
    WalletDetailResponse,
    WalletListResponse,
)
from swapsim.web.dependencies import error_response, get_wallet_service
from swapsim.web.services.wallet_service import (
    WalletNotFoundError,
    WalletRequestError,
    WalletService,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/wallets", tags=["wallets"])

_error_responses = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("", response_model=WalletListResponse, responses=_error_responses)
async def list_wallets(service: WalletService = Depends(get_wallet_service)):
    """List stored wallets."""
    try:
        return service.list_wallets()
    except Exception as e:
        logger.error(f"Error listing wallets: {e}")
        return error_response(500, str(e))


@router.post("", response_model=CreateWalletResponse, responses=_error_responses)
async def create_wallet(
    request: CreateWalletRequest,
    service: WalletService = Depends(get_wallet_service),
):
    """Create a new random wallet under the given name."""
    try:
        return service.create_wallet(request)
    except WalletRequestError as e:
        return error_response(400, str(e))
    except Exception as e:
        logger.error(f"Error creating wallet: {e}")
        return error_response(500, str(e))


@router.get("/{name}", response_model=WalletDetailResponse, responses=_error_responses)
async def get_wallet(name: str, service: WalletService = Depends(get_wallet_service)):
    """Get a wallet, including its key material and ETH balance."""
    try:
        return await service.get_wallet(name)
    except WalletNotFoundError as e:
        return error_response(404, str(e))
    except Exception as e:
        logger.error(f"Error getting wallet: {e}")
        return error_response(500, str(e) or "Server error")


@router.delete("/{name}", response_model=SuccessResponse, responses=_error_responses)
async def delete_wallet(name: str, service: WalletService = Depends(get_wallet_service)):
    """Delete a wallet."""
    try:
        service.delete_wallet(name)
        return SuccessResponse()
    except WalletNotFoundError as e:
        return error_response(404, str(e))
    except Exception as e:
        logger.error(f"Error deleting wallet: {e}")
        return error_response(500, str(e) or "Server error")
