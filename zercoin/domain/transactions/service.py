"""Append-only transaction log."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from zercoin.db.models import Transaction as TransactionModel
from zercoin.domain.common.exceptions import (
    InvalidAmountError,
    SameWalletTransferError,
    TransactionShapeError,
)
from zercoin.infrastructure.database.repositories.transaction_repository import SqlTransactionRepository

from .models import TransactionObserver, TransactionRecord, TransactionStatus, TransactionType
from .repository import TransactionRepository


def _check_shape(type_: TransactionType, from_wallet_id: Optional[int], to_wallet_id: Optional[int]) -> None:
    if type_ is TransactionType.TRANSFER:
        if from_wallet_id is None or to_wallet_id is None:
            raise TransactionShapeError(type_.value, "transfer requires both a source and a destination wallet")
        if from_wallet_id == to_wallet_id:
            raise SameWalletTransferError(from_wallet_id)
    elif type_ is TransactionType.DEPOSIT:
        if from_wallet_id is not None or to_wallet_id is None:
            raise TransactionShapeError(type_.value, "deposit requires a destination wallet and no source")
    elif type_ is TransactionType.WITHDRAW:
        if from_wallet_id is None or to_wallet_id is not None:
            raise TransactionShapeError(type_.value, "withdraw requires a source wallet and no destination")


@dataclass(slots=True)
class TransactionLog:
    """Records completed operations. Rows are never updated or deleted."""

    repository: TransactionRepository
    observers: Sequence[TransactionObserver] = field(default_factory=tuple)

    @classmethod
    def with_session(
        cls,
        session: AsyncSession,
        observers: Sequence[TransactionObserver] = (),
    ) -> "TransactionLog":
        return cls(SqlTransactionRepository(session), observers=tuple(observers))

    async def append(
        self,
        type: TransactionType | str,
        *,
        amount: Decimal,
        from_wallet_id: Optional[int] = None,
        to_wallet_id: Optional[int] = None,
        status: TransactionStatus | str = TransactionStatus.CONFIRMED,
    ) -> int:
        type_ = TransactionType(type)
        status_ = TransactionStatus(status)
        if amount <= 0:
            raise InvalidAmountError(amount)
        _check_shape(type_, from_wallet_id, to_wallet_id)

        model = await self.repository.add_transaction(
            type=type_.value,
            status=status_.value,
            amount=amount,
            from_wallet_id=from_wallet_id,
            to_wallet_id=to_wallet_id,
        )
        record = self._to_record(model)
        for observer in self.observers:
            await observer.transaction_appended(record)
        return record.id

    async def get(self, transaction_id: int) -> TransactionRecord | None:
        model = await self.repository.get_transaction(transaction_id)
        return self._to_record(model) if model else None

    async def list_for_wallet(self, wallet_id: int, limit: int = 20, offset: int = 0) -> list[TransactionRecord]:
        rows = await self.repository.list_for_wallet(wallet_id, limit, offset)
        return [self._to_record(row) for row in rows]

    async def latest_for_wallet(self, wallet_id: int) -> TransactionRecord | None:
        model = await self.repository.latest_for_wallet(wallet_id)
        return self._to_record(model) if model else None

    async def count(self) -> int:
        return await self.repository.count_transactions()

    @staticmethod
    def _to_record(model: TransactionModel) -> TransactionRecord:
        return TransactionRecord(
            id=model.id,
            type=TransactionType(model.type),
            status=TransactionStatus(model.status),
            amount=model.amount,
            from_wallet_id=model.from_wallet_id,
            to_wallet_id=model.to_wallet_id,
            created_at=model.created_at,
        )
