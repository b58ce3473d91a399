"""Read-only reporting projections."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from zercoin.domain.transactions.models import TransactionRecord


@dataclass(slots=True)
class WalletOverview:
    wallet_id: int
    address: str
    username: Optional[str]
    balance: Decimal


@dataclass(slots=True)
class WalletLatestTransaction:
    wallet_id: int
    address: str
    transaction: Optional[TransactionRecord]


@dataclass(slots=True)
class UserWalletActivity:
    user_id: int
    username: str
    email: Optional[str]
    status: str
    wallet_id: Optional[int] = None
    address: Optional[str] = None
    balance: Optional[Decimal] = None
    last_transaction: Optional[TransactionRecord] = None
