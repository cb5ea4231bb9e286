"""Named local wallets persisted to a JSON file."""

from swapsim.wallets.manager import WalletManager, WalletRecord, WalletSummary
from swapsim.wallets.store import WalletStore

__all__ = [
    "WalletManager",
    "WalletRecord",
    "WalletSummary",
    "WalletStore",
]
