"""Results returned by the transfer engine."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(slots=True, frozen=True)
class TransferResult:
    transaction_id: int
    from_wallet_id: int
    to_wallet_id: int
    amount: Decimal
    from_balance: Decimal
    to_balance: Decimal


@dataclass(slots=True, frozen=True)
class BalanceResult:
    transaction_id: int
    wallet_id: int
    amount: Decimal
    balance: Decimal
