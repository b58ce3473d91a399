"""SQLAlchemy repository for the audit log."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select

from zercoin.db.models import AuditEntry
from zercoin.domain.common.repository import AsyncRepository


class SqlAuditRepository(AsyncRepository[AuditEntry]):
    async def add_entry(self, *, action: str, info: str) -> AuditEntry:
        return await self.add(AuditEntry(action=action, info=info))

    async def list_entries(
        self,
        *,
        action: str | None,
        limit: int,
        offset: int,
    ) -> Sequence[AuditEntry]:
        stmt = select(AuditEntry)
        if action:
            stmt = stmt.where(AuditEntry.action == action)
        return await self.all(stmt.order_by(AuditEntry.id).offset(offset).limit(limit))

    async def count_entries(self, action: str | None = None) -> int:
        stmt = select(AuditEntry.id)
        if action:
            stmt = stmt.where(AuditEntry.action == action)
        return await self.count(stmt)
