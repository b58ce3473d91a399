"""Domain models for wallet operations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Protocol


@dataclass(slots=True)
class WalletSnapshot:
    id: int
    user_id: int
    address: str
    balance: Decimal
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


@dataclass(slots=True, frozen=True)
class BalanceChange:
    wallet_id: int
    old_balance: Decimal
    new_balance: Decimal

    @property
    def delta(self) -> Decimal:
        return self.new_balance - self.old_balance


class BalanceObserver(Protocol):
    """Called synchronously after every balance change, inside the same unit of work."""

    async def balance_changed(self, change: BalanceChange) -> None:
        ...
