"""Component tests for configuration, the token catalogue and quote types."""

import pytest

from swapsim.config import Settings
from swapsim.routing.base import (
    NoRouteError,
    PriceUnavailableError,
    QuoteRequest,
    QuoteResult,
    QuoteRoute,
    QuoteUnavailableError,
)
from swapsim.tokens import (
    COMMON_TOKENS,
    FEE_TIERS,
    USDC_ADDRESS,
    FeeTier,
    find_token,
    is_fee_tier,
)


class TestSettings:
    """Tests for environment-driven settings."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("INFURA_API_KEY", "secret-key")
        monkeypatch.setenv("ETHEREUM_NETWORK", "sepolia")
        settings = Settings(_env_file=None)

        assert settings.infura_api_key == "secret-key"
        assert settings.ethereum_network == "sepolia"
        assert settings.has_rpc_credentials

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ETHEREUM_NETWORK", raising=False)
        settings = Settings(_env_file=None, infura_api_key="", rpc_url=None)

        assert settings.ethereum_network == "mainnet"
        assert not settings.has_rpc_credentials

    def test_safe_dict_redacts_key(self):
        settings = Settings(_env_file=None, infura_api_key="secret-key")

        safe = settings.get_safe_dict()
        assert safe["infura_api_key"] == "***"
        assert "secret-key" not in str(safe)

    def test_allowed_origins(self):
        settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")

        assert settings.allowed_origins == ["http://a.test", "http://b.test"]


class TestTokens:
    """Tests for the token catalogue."""

    def test_find_token_case_insensitive(self):
        token = find_token(USDC_ADDRESS.lower())

        assert token is not None
        assert token.symbol == "USDC"
        assert token.decimals == 6

    def test_find_unknown_token(self):
        assert find_token("0x0000000000000000000000000000000000000001") is None

    def test_fee_tiers(self):
        assert [t.value for t in FeeTier] == [500, 3000, 10000]
        assert FEE_TIERS[0] == {"value": "500", "label": "0.05%"}
        assert is_fee_tier(3000)
        assert not is_fee_tier(100)

    def test_catalogue_addresses_unique(self):
        addresses = [t.address.lower() for t in COMMON_TOKENS.values()]
        assert len(addresses) == len(set(addresses))


class TestQuoteTypes:
    """Tests for quote requests, results and errors."""

    def test_price_query(self):
        request = QuoteRequest.for_usd_price("0xabc", 8, USDC_ADDRESS)

        assert request.token_out == USDC_ADDRESS
        assert request.amount_in == "1"
        assert request.fee_tier == 3000
        assert request.decimals_in == 8

    def test_result_is_immutable(self):
        result = QuoteResult(
            token_in="0xa",
            token_out="0xb",
            fee_tier=3000,
            amount_in="2",
            amount_out="5.0",
            amount_out_raw=5_000_000,
            decimals_out=6,
            route=QuoteRoute.DIRECT,
        )

        with pytest.raises(AttributeError):
            result.amount_out = "6.0"
        assert result.path == ()

    def test_no_route_message_includes_both_errors(self):
        direct = QuoteUnavailableError("0xa", "0xb", 500, RuntimeError("pool missing"))
        fallback = QuoteUnavailableError("0xa", "0xweth", 3000, RuntimeError("hop failed"))
        err = NoRouteError("0xa", "0xb", direct, fallback)

        assert str(err) == (
            "Could not get quote for 0xa to 0xb: pool missing (WETH fallback: hop failed)"
        )

    def test_price_unavailable_keeps_cause(self):
        cause = RuntimeError("boom")
        err = PriceUnavailableError("0xa", cause)

        assert err.cause is cause
        assert "0xa" in str(err)
