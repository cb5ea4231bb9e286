"""Read-only Ethereum connection provider.

The provider is constructed by the application and handed to whatever
needs chain access. The connection itself is built lazily on first use
and then reused for the lifetime of the provider.
"""

import logging
from typing import Optional

from web3 import AsyncHTTPProvider, AsyncWeb3

from swapsim.config import Settings, get_settings

logger = logging.getLogger(__name__)

INFURA_URL_TEMPLATE = "https://{network}.infura.io/v3/{api_key}"


class ConfigurationError(Exception):
    """Exception raised when the RPC endpoint cannot be configured."""
    pass


class ChainProvider:
    """Owns a single long-lived AsyncWeb3 connection.

    No health checks, retries or reconnects: a dead endpoint shows up as
    a failure of whichever call uses the connection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._connection: Optional[AsyncWeb3] = None

    @property
    def network(self) -> str:
        return self.settings.ethereum_network

    def _build_url(self) -> str:
        """Build the RPC endpoint URL.

        Raises:
            ConfigurationError: If neither an RPC URL nor an Infura key is set
        """
        if self.settings.rpc_url:
            return self.settings.rpc_url
        if not self.settings.infura_api_key:
            raise ConfigurationError(
                "INFURA_API_KEY is not defined in environment variables"
            )
        return INFURA_URL_TEMPLATE.format(
            network=self.settings.ethereum_network,
            api_key=self.settings.infura_api_key,
        )

    @property
    def rpc_url(self) -> str:
        """Endpoint URL with the credential redacted, for logs."""
        url = self._build_url()
        if self.settings.infura_api_key and self.settings.infura_api_key in url:
            url = url.replace(self.settings.infura_api_key, "***")
        return url

    def get_connection(self) -> AsyncWeb3:
        """Get or create the shared connection."""
        if self._connection is None:
            url = self._build_url()
            self._connection = AsyncWeb3(AsyncHTTPProvider(url))
            logger.info(f"JSON-RPC provider initialized for {self.network}")
        return self._connection

    @property
    def is_initialized(self) -> bool:
        return self._connection is not None
