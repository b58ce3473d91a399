"""Domain models for the transaction log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Protocol


class TransactionType(str, Enum):
    TRANSFER = "transfer"
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"


class TransactionStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class TransactionRecord:
    id: int
    type: TransactionType
    status: TransactionStatus
    amount: Decimal
    from_wallet_id: Optional[int]
    to_wallet_id: Optional[int]
    created_at: Optional[datetime]

    def touches(self, wallet_id: int) -> bool:
        return wallet_id in (self.from_wallet_id, self.to_wallet_id)


class TransactionObserver(Protocol):
    """Called synchronously after every append, inside the same unit of work."""

    async def transaction_appended(self, record: TransactionRecord) -> None:
        ...
