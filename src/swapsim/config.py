"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Ethereum RPC
    # ======================
    infura_api_key: str = Field(default="", description="Infura project API key")
    ethereum_network: str = Field(
        default="mainnet", description="Infura network name (mainnet, sepolia, ...)"
    )
    rpc_url: Optional[str] = Field(
        default=None, description="Explicit RPC URL, overrides the Infura endpoint"
    )

    # ======================
    # Wallet storage
    # ======================
    wallets_dir: str = Field(default="./wallets", description="Directory holding wallets.json")

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")
    cors_origins: str = Field(
        default="*", description="Comma-separated list of allowed CORS origins"
    )

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug mode")

    @property
    def allowed_origins(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def has_rpc_credentials(self) -> bool:
        """Check if an RPC endpoint can be built."""
        return bool(self.rpc_url or self.infura_api_key)

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "ethereum_network": self.ethereum_network,
            "infura_api_key": "***" if self.infura_api_key else "(not set)",
            "rpc_url": "***" if self.rpc_url else "(not set)",
            "wallets_dir": self.wallets_dir,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
