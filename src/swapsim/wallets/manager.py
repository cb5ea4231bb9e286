"""Local Ethereum wallet management.

Wallets are random secp256k1 accounts with a BIP-39 mnemonic, stored by
name in a WalletStore. Keys are kept in plain text: this is a simulator
for throwaway accounts, never for funded ones.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from eth_account import Account
from web3 import Web3

from swapsim.chain.provider import ChainProvider
from swapsim.routing.units import format_ether
from swapsim.wallets.store import WalletStore

logger = logging.getLogger(__name__)

NO_MNEMONIC = "No mnemonic available"

Account.enable_unaudited_hdwallet_features()


@dataclass
class WalletRecord:
    """A stored wallet."""

    name: str
    address: str
    private_key: str
    mnemonic: str
    created_at: str = "Unknown"

    def to_storage(self) -> dict:
        """Record as stored in wallets.json."""
        return {
            "address": self.address,
            "privateKey": self.private_key,
            "mnemonic": self.mnemonic,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_storage(cls, name: str, data: dict) -> "WalletRecord":
        return cls(
            name=name,
            address=data["address"],
            private_key=data["privateKey"],
            mnemonic=data.get("mnemonic") or NO_MNEMONIC,
            created_at=data.get("createdAt") or "Unknown",
        )


@dataclass
class WalletSummary:
    """Public listing entry for a wallet."""

    name: str
    address: str
    created_at: str


class WalletManager:
    """Create, list, look up and delete named wallets."""

    def __init__(self, store: WalletStore, provider: Optional[ChainProvider] = None):
        self.store = store
        self.provider = provider

    def create_wallet(self, name: str) -> WalletRecord:
        """Create a random wallet and store it under name.

        An existing wallet with the same name is replaced.
        """
        account, mnemonic = Account.create_with_mnemonic()
        record = WalletRecord(
            name=name,
            address=account.address,
            private_key=Web3.to_hex(account.key),
            mnemonic=mnemonic or NO_MNEMONIC,
            created_at=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        )

        wallets = self.store.load()
        wallets[name] = record.to_storage()
        self.store.save(wallets)

        logger.info(f'Created new wallet "{name}" with address {record.address}')
        return record

    def get_wallet(self, name: str) -> Optional[WalletRecord]:
        """Get a wallet by name, or None if it does not exist."""
        data = self.store.load().get(name)
        if not data:
            logger.error(f'Wallet "{name}" not found')
            return None
        return WalletRecord.from_storage(name, data)

    def list_wallets(self) -> list[WalletSummary]:
        """List all stored wallets."""
        return [
            WalletSummary(
                name=name,
                address=data.get("address", ""),
                created_at=data.get("createdAt") or "Unknown",
            )
            for name, data in self.store.load().items()
        ]

    def delete_wallet(self, name: str) -> bool:
        """Delete a wallet. Returns False if it does not exist."""
        wallets = self.store.load()
        if name not in wallets:
            logger.error(f'Wallet "{name}" not found')
            return False

        del wallets[name]
        self.store.save(wallets)
        logger.info(f'Deleted wallet "{name}"')
        return True

    async def get_balance(self, address: str) -> str:
        """ETH balance of an address, formatted in ether.

        Raises:
            RuntimeError: If the manager has no chain provider
            ConfigurationError: If the provider has no RPC endpoint
        """
        if self.provider is None:
            raise RuntimeError("WalletManager has no chain provider")
        w3 = self.provider.get_connection()
        wei = await w3.eth.get_balance(Web3.to_checksum_address(address))
        return format_ether(int(wei))
