"""Flat JSON file storage for wallets.

The file holds a single object mapping wallet name to its record. If the
filesystem cannot be used (read-only container, missing permissions) the
store switches to an in-memory copy for the rest of the process.
"""

import json
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

WALLETS_FILENAME = "wallets.json"


class WalletStore:
    """Wallet mapping persisted to <directory>/wallets.json."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)
        self.path = self.directory / WALLETS_FILENAME
        self._memory: dict[str, dict] = {}
        self._using_memory = False

    @property
    def using_memory(self) -> bool:
        return self._using_memory

    def _switch_to_memory(self, error: Exception) -> None:
        logger.warning(
            f"Using in-memory wallet storage, file system operations failed: {error}"
        )
        self._using_memory = True

    def _ensure_directory(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    def load(self) -> dict[str, dict]:
        """Load the wallet mapping."""
        if self._using_memory:
            return dict(self._memory)

        try:
            self._ensure_directory()
            if not self.path.exists():
                self.path.write_text("{}", encoding="utf-8")
                return {}
            return json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            self._switch_to_memory(e)
            return dict(self._memory)

    def save(self, wallets: dict[str, dict]) -> None:
        """Replace the stored wallet mapping."""
        if self._using_memory:
            self._memory = dict(wallets)
            return

        try:
            self._ensure_directory()
            self.path.write_text(json.dumps(wallets, indent=2), encoding="utf-8")
        except (OSError, TypeError) as e:
            self._switch_to_memory(e)
            self._memory = dict(wallets)
