"""Repository protocol for the append-only transaction log."""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, Sequence

from zercoin.db.models import Transaction as TransactionModel


class TransactionRepository(Protocol):
    async def add_transaction(
        self,
        *,
        type: str,
        status: str,
        amount: Decimal,
        from_wallet_id: int | None,
        to_wallet_id: int | None,
    ) -> TransactionModel:
        ...

    async def get_transaction(self, transaction_id: int) -> TransactionModel | None:
        ...

    async def list_for_wallet(self, wallet_id: int, limit: int, offset: int) -> Sequence[TransactionModel]:
        ...

    async def latest_for_wallet(self, wallet_id: int) -> TransactionModel | None:
        ...

    async def count_transactions(self) -> int:
        ...
