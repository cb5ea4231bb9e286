"""Wallet request and response contracts."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateWalletRequest(BaseModel):
    """Request to create a named wallet."""

    name: Optional[str] = Field(None, description="Wallet name")


class WalletListItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    address: str
    created_at: str = Field(..., alias="createdAt")


class WalletListResponse(BaseModel):
    success: bool = True
    wallets: list[WalletListItem] = Field(default_factory=list)


class CreatedWallet(BaseModel):
    """Key material of a freshly created wallet."""

    model_config = ConfigDict(populate_by_name=True)

    address: str
    private_key: str = Field(..., alias="privateKey")
    mnemonic: str


class CreateWalletResponse(BaseModel):
    success: bool = True
    wallet: CreatedWallet


class WalletDetail(BaseModel):
    """Stored wallet with its current ETH balance."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    address: str
    balance: str = Field(..., description="ETH balance")
    private_key: str = Field(..., alias="privateKey")
    mnemonic: str
    created_at: str = Field(..., alias="createdAt")


class WalletDetailResponse(BaseModel):
    success: bool = True
    wallet: WalletDetail


class SuccessResponse(BaseModel):
    success: bool = True
