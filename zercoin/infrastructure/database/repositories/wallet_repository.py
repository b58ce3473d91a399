"""SQLAlchemy implementation for the wallet store"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Sequence

from sqlalchemy import select, update

from zercoin.db.models import Wallet
from zercoin.domain.common.repository import AsyncRepository


class SqlWalletRepository(AsyncRepository[Wallet]):
    async def get_wallet(self, wallet_id: int) -> Wallet | None:
        return await self.first(select(Wallet).where(Wallet.id == wallet_id))

    async def get_by_address(self, address: str) -> Wallet | None:
        return await self.first(select(Wallet).where(Wallet.address == address))

    async def lock_wallets(self, wallet_ids: Iterable[int]) -> Sequence[Wallet]:
        # Row locks are taken in primary key order; SQLite ignores FOR UPDATE.
        stmt = (
            select(Wallet)
            .where(Wallet.id.in_(list(wallet_ids)))
            .order_by(Wallet.id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return await self.all(stmt)

    async def set_balance(self, wallet_id: int, balance: Decimal) -> Decimal | None:
        stmt = (
            update(Wallet)
            .where(Wallet.id == wallet_id)
            .values(balance=balance)
            .returning(Wallet.balance)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create_wallet(self, *, user_id: int, address: str, balance: Decimal) -> Wallet:
        return await self.add(Wallet(user_id=user_id, address=address, balance=balance))

    async def list_wallets(self) -> Sequence[Wallet]:
        return await self.all(select(Wallet).order_by(Wallet.id))
