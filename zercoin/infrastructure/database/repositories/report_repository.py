"""SQLAlchemy queries backing the read-only reporting projections."""

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy import select
from sqlalchemy.engine import Row

from zercoin.db.models import User, Wallet
from zercoin.domain.common.repository import AsyncRepository


class SqlReportRepository(AsyncRepository[Any]):
    async def wallet_overview(self) -> Sequence[Row]:
        stmt = (
            select(Wallet.id, Wallet.address, User.username, Wallet.balance)
            .outerjoin(User, Wallet.user_id == User.id)
            .order_by(Wallet.id)
        )
        result = await self.session.execute(stmt)
        return result.all()

    async def users_with_wallets(self) -> Sequence[Row]:
        stmt = (
            select(
                User.id.label("user_id"),
                User.username,
                User.email,
                User.status,
                Wallet.id.label("wallet_id"),
                Wallet.address,
                Wallet.balance,
            )
            .outerjoin(Wallet, Wallet.user_id == User.id)
            .order_by(User.id, Wallet.id)
        )
        result = await self.session.execute(stmt)
        return result.all()
