"""Repository protocol for the append-only audit log."""

from __future__ import annotations

from typing import Protocol, Sequence

from zercoin.db.models import AuditEntry as AuditEntryModel


class AuditRepository(Protocol):
    async def add_entry(self, *, action: str, info: str) -> AuditEntryModel:
        ...

    async def list_entries(
        self,
        *,
        action: str | None,
        limit: int,
        offset: int,
    ) -> Sequence[AuditEntryModel]:
        ...

    async def count_entries(self, action: str | None = None) -> int:
        ...
