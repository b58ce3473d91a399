"""Audit recorder: derives an audit entry from every balance change and transaction append."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from zercoin.db.models import AuditEntry as AuditEntryModel
from zercoin.domain.common.money import DEFAULT_SCALE, format_amount
from zercoin.domain.transactions.models import TransactionRecord
from zercoin.domain.wallets.models import BalanceChange
from zercoin.infrastructure.database.repositories.audit_repository import SqlAuditRepository

from .models import TRANSACTION_INSERT, WALLET_UPDATE, AuditEntry
from .repository import AuditRepository


def _ref(wallet_id: Optional[int]) -> str:
    return "NULL" if wallet_id is None else str(wallet_id)


@dataclass(slots=True)
class AuditRecorder:
    """Observer for ``WalletStore`` and ``TransactionLog``.

    Entries are written through the same session as the mutation that caused
    them, so they commit or roll back together with it.
    """

    repository: AuditRepository
    scale: int = DEFAULT_SCALE

    @classmethod
    def with_session(cls, session: AsyncSession, *, scale: int = DEFAULT_SCALE) -> "AuditRecorder":
        return cls(SqlAuditRepository(session), scale=scale)

    async def balance_changed(self, change: BalanceChange) -> None:
        await self.repository.add_entry(
            action=WALLET_UPDATE,
            info=(
                f"wallet_id={change.wallet_id}"
                f",old_balance={format_amount(change.old_balance, self.scale)}"
                f",new_balance={format_amount(change.new_balance, self.scale)}"
            ),
        )

    async def transaction_appended(self, record: TransactionRecord) -> None:
        await self.repository.add_entry(
            action=TRANSACTION_INSERT,
            info=(
                f"tx_id={record.id}"
                f",from={_ref(record.from_wallet_id)}"
                f",to={_ref(record.to_wallet_id)}"
                f",amount={format_amount(record.amount, self.scale)}"
            ),
        )

    async def list_entries(
        self,
        *,
        action: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[AuditEntry]:
        rows = await self.repository.list_entries(action=action, limit=limit, offset=offset)
        return [self._to_domain(row) for row in rows]

    async def count_entries(self, action: str | None = None) -> int:
        return await self.repository.count_entries(action)

    @staticmethod
    def _to_domain(model: AuditEntryModel) -> AuditEntry:
        return AuditEntry(
            id=model.id,
            action=model.action,
            info=model.info,
            created_at=model.created_at,
        )
