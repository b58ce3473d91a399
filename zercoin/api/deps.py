"""Reusable FastAPI dependencies."""

from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zercoin.core.container import get_container
from zercoin.domain.transfers import TransferEngine
from zercoin.domain.wallets import WalletStore
from zercoin.infrastructure.database.session import get_session


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    async for session in get_session():
        yield session


def get_transfer_engine() -> TransferEngine:
    return get_container().transfer_engine()


def get_wallet_store(db: AsyncSession = Depends(get_db_session)) -> WalletStore:
    return get_container().wallet_store(db)


__all__ = [
    "get_db_session",
    "get_transfer_engine",
    "get_wallet_store",
]
