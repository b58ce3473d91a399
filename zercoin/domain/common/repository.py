"""Base class for the SQLAlchemy repositories behind the ledger services."""

from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

ModelT = TypeVar("ModelT")


class AsyncRepository(Generic[ModelT]):
    """Holds the session of the current unit of work.

    Repositories never commit; the caller owns the transaction boundary.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def add(self, instance: ModelT) -> ModelT:
        """Stage ``instance`` and load its generated id and server defaults."""
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def first(self, stmt: Select[Any]) -> Any:
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def all(self, stmt: Select[Any]) -> Sequence[Any]:
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def count(self, stmt: Select[Any]) -> int:
        counted = select(func.count()).select_from(stmt.subquery())
        result = await self.session.execute(counted)
        return int(result.scalar_one())
