"""SQLAlchemy implementation for the transaction log"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from sqlalchemy import desc, or_, select

from zercoin.db.models import Transaction
from zercoin.domain.common.repository import AsyncRepository

# Newest first; equal timestamps resolve to the higher id.
_NEWEST_FIRST = (desc(Transaction.created_at), desc(Transaction.id))


class SqlTransactionRepository(AsyncRepository[Transaction]):
    async def add_transaction(
        self,
        *,
        type: str,
        status: str,
        amount: Decimal,
        from_wallet_id: int | None,
        to_wallet_id: int | None,
    ) -> Transaction:
        return await self.add(
            Transaction(
                type=type,
                status=status,
                amount=amount,
                from_wallet_id=from_wallet_id,
                to_wallet_id=to_wallet_id,
            )
        )

    async def get_transaction(self, transaction_id: int) -> Transaction | None:
        return await self.session.get(Transaction, transaction_id)

    async def list_for_wallet(self, wallet_id: int, limit: int, offset: int) -> Sequence[Transaction]:
        stmt = (
            select(Transaction)
            .where(or_(Transaction.from_wallet_id == wallet_id, Transaction.to_wallet_id == wallet_id))
            .order_by(*_NEWEST_FIRST)
            .offset(offset)
            .limit(limit)
        )
        return await self.all(stmt)

    async def latest_for_wallet(self, wallet_id: int) -> Transaction | None:
        # One top-1 lookup per side so each is served by its (wallet, created_at) index.
        candidates = []
        for column in (Transaction.from_wallet_id, Transaction.to_wallet_id):
            stmt = select(Transaction).where(column == wallet_id).order_by(*_NEWEST_FIRST).limit(1)
            row = await self.first(stmt)
            if row is not None:
                candidates.append(row)
        if not candidates:
            return None
        return max(candidates, key=lambda tx: (tx.created_at, tx.id))

    async def count_transactions(self) -> int:
        return await self.count(select(Transaction.id))
