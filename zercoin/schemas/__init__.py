"""Pydantic schemas used across the project."""
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Amounts are validated by the ledger itself so that every malformed value
# surfaces as ``invalid_amount`` rather than a generic validation error.
AmountInput = Union[Decimal, int, str]


class TransferRequest(BaseModel):
    from_wallet_id: int
    to_wallet_id: int
    amount: AmountInput = Field(..., description="Positive amount with at most 8 fractional digits")


class WalletAmountRequest(BaseModel):
    wallet_id: int
    amount: AmountInput = Field(..., description="Positive amount with at most 8 fractional digits")


class TransferResponse(BaseModel):
    transaction_id: int
    from_wallet_id: int
    to_wallet_id: int
    amount: Decimal
    from_balance: Decimal
    to_balance: Decimal

    model_config = ConfigDict(from_attributes=True)


class BalanceResponse(BaseModel):
    transaction_id: int
    wallet_id: int
    amount: Decimal
    balance: Decimal

    model_config = ConfigDict(from_attributes=True)


class ErrorDetail(BaseModel):
    code: str
    message: str
    retryable: bool = False


class ErrorResponse(BaseModel):
    detail: ErrorDetail


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: Optional[str] = Field(default=None, max_length=100)
    status: str = Field(default="active", max_length=20)


class UserResponse(BaseModel):
    id: int
    username: str
    email: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UserListResponse(BaseModel):
    users: list[UserResponse] = Field(default_factory=list)


class WalletCreate(BaseModel):
    user_id: int
    address: str = Field(..., min_length=1, max_length=100)
    initial_balance: AmountInput = Decimal("0")


class WalletResponse(BaseModel):
    id: int
    user_id: int
    address: str
    balance: Decimal
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TransactionResponse(BaseModel):
    id: int
    type: str
    status: str
    amount: Decimal
    from_wallet_id: Optional[int] = None
    to_wallet_id: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TransactionListResponse(BaseModel):
    transactions: list[TransactionResponse] = Field(default_factory=list)


class AuditEntryResponse(BaseModel):
    id: int
    action: str
    info: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class AuditEntryListResponse(BaseModel):
    entries: list[AuditEntryResponse] = Field(default_factory=list)


class WalletOverviewResponse(BaseModel):
    wallet_id: int
    address: str
    username: Optional[str] = None
    balance: Decimal

    model_config = ConfigDict(from_attributes=True)


class WalletOverviewListResponse(BaseModel):
    wallets: list[WalletOverviewResponse] = Field(default_factory=list)


class WalletLatestTransactionResponse(BaseModel):
    wallet_id: int
    address: str
    transaction: Optional[TransactionResponse] = None

    model_config = ConfigDict(from_attributes=True)


class WalletLatestTransactionListResponse(BaseModel):
    wallets: list[WalletLatestTransactionResponse] = Field(default_factory=list)


class UserWalletActivityResponse(BaseModel):
    user_id: int
    username: str
    email: Optional[str] = None
    status: str
    wallet_id: Optional[int] = None
    address: Optional[str] = None
    balance: Optional[Decimal] = None
    last_transaction: Optional[TransactionResponse] = None

    model_config = ConfigDict(from_attributes=True)


class UserWalletActivityListResponse(BaseModel):
    rows: list[UserWalletActivityResponse] = Field(default_factory=list)
