"""Pytest configuration and fixtures."""

import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"
os.environ.pop("INFURA_API_KEY", None)
os.environ.pop("RPC_URL", None)

from swapsim.config import Settings
from swapsim.routing.quoter import QuoteResolver
from tests.fakes import FakeProvider, FakeUniswapClient, mainnet_like_client


@pytest.fixture
def fake_client() -> FakeUniswapClient:
    return mainnet_like_client()


@pytest.fixture
def resolver(fake_client) -> QuoteResolver:
    return QuoteResolver(fake_client)


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        infura_api_key="",
        rpc_url=None,
        wallets_dir=str(tmp_path / "wallets"),
        environment="test",
    )


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider(balance_wei=1_500_000_000_000_000_000)


@pytest_asyncio.fixture
async def client(test_settings, resolver, fake_provider) -> AsyncGenerator[AsyncClient, None]:
    """API client wired to the fake chain."""
    from swapsim.api.app import create_app
    from swapsim.wallets.manager import WalletManager
    from swapsim.wallets.store import WalletStore
    from swapsim.web.services.quote_service import QuoteService
    from swapsim.web.services.wallet_service import WalletService

    app = create_app(
        settings=test_settings,
        provider=fake_provider,
        quote_service=QuoteService(resolver=resolver),
        wallet_service=WalletService(
            WalletManager(WalletStore(test_settings.wallets_dir), provider=fake_provider)
        ),
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
