"""Repository protocol for wallet operations."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Protocol, Sequence

from zercoin.db.models import Wallet as WalletModel


class WalletRepository(Protocol):
    async def get_wallet(self, wallet_id: int) -> WalletModel | None:
        ...

    async def get_by_address(self, address: str) -> WalletModel | None:
        ...

    async def lock_wallets(self, wallet_ids: Iterable[int]) -> Sequence[WalletModel]:
        ...

    async def set_balance(self, wallet_id: int, balance: Decimal) -> Decimal | None:
        ...

    async def create_wallet(self, *, user_id: int, address: str, balance: Decimal) -> WalletModel:
        ...
