"""Wallet service: maps the wallet manager onto API contracts."""

import logging

from swapsim.wallets.manager import WalletManager
from swapsim.web.contracts.wallets import (
    CreatedWallet,
    CreateWalletRequest,
    CreateWalletResponse,
    WalletDetail,
    WalletDetailResponse,
    WalletListItem,
    WalletListResponse,
)

logger = logging.getLogger(__name__)


class WalletRequestError(Exception):
    """Exception raised for an invalid wallet request (HTTP 400)."""
    pass


class WalletNotFoundError(Exception):
    """Exception raised when a named wallet does not exist (HTTP 404)."""
    pass


class WalletService:
    """Service for local wallet management."""

    def __init__(self, manager: WalletManager):
        self.manager = manager

    def list_wallets(self) -> WalletListResponse:
        return WalletListResponse(
            wallets=[
                WalletListItem(name=w.name, address=w.address, created_at=w.created_at)
                for w in self.manager.list_wallets()
            ]
        )

    def create_wallet(self, request: CreateWalletRequest) -> CreateWalletResponse:
        """Create a wallet.

        Raises:
            WalletRequestError: If no name was given
        """
        name = (request.name or "").strip()
        if not name:
            raise WalletRequestError("Wallet name is required")

        record = self.manager.create_wallet(name)
        return CreateWalletResponse(
            wallet=CreatedWallet(
                address=record.address,
                private_key=record.private_key,
                mnemonic=record.mnemonic,
            )
        )

    async def get_wallet(self, name: str) -> WalletDetailResponse:
        """Get a wallet with its current ETH balance.

        Raises:
            WalletNotFoundError: If the wallet does not exist
        """
        record = self.manager.get_wallet(name)
        if record is None:
            raise WalletNotFoundError("Wallet not found")

        balance = await self.manager.get_balance(record.address)
        return WalletDetailResponse(
            wallet=WalletDetail(
                name=record.name,
                address=record.address,
                balance=balance,
                private_key=record.private_key,
                mnemonic=record.mnemonic,
                created_at=record.created_at,
            )
        )

    def delete_wallet(self, name: str) -> None:
        """Delete a wallet.

        Raises:
            WalletNotFoundError: If the wallet does not exist
        """
        if not self.manager.delete_wallet(name):
            raise WalletNotFoundError("Wallet not found")
