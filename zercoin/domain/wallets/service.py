"""Wallet store: owns balances and the non-negative balance invariant."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from zercoin.db.models import Wallet as WalletModel
from zercoin.domain.common.exceptions import InvalidAmountError
from zercoin.domain.common.money import DEFAULT_PRECISION, DEFAULT_SCALE, normalize_amount, quantize
from zercoin.domain.users.exceptions import UserNotFoundError
from zercoin.domain.users.repository import UserRepository
from zercoin.infrastructure.database.repositories.user_repository import SqlUserRepository
from zercoin.infrastructure.database.repositories.wallet_repository import SqlWalletRepository

from .exceptions import InsufficientFundsError, WalletAlreadyExistsError, WalletNotFoundError
from .models import BalanceChange, BalanceObserver, WalletSnapshot
from .repository import WalletRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WalletStore:
    """Reads and adjusts wallet balances.

    The store never commits. ``adjust_balance`` is one step of the caller's
    unit of work, and every adjustment is reported to ``observers`` before the
    call returns so that their writes share the same transaction.
    """

    repository: WalletRepository
    users: UserRepository | None = None
    observers: Sequence[BalanceObserver] = field(default_factory=tuple)
    scale: int = DEFAULT_SCALE
    precision: int = DEFAULT_PRECISION

    @classmethod
    def with_session(
        cls,
        session: AsyncSession,
        observers: Sequence[BalanceObserver] = (),
        *,
        scale: int = DEFAULT_SCALE,
        precision: int = DEFAULT_PRECISION,
    ) -> "WalletStore":
        return cls(
            SqlWalletRepository(session),
            users=SqlUserRepository(session),
            observers=tuple(observers),
            scale=scale,
            precision=precision,
        )

    async def get_wallet(self, wallet_id: int) -> WalletSnapshot:
        wallet = await self.repository.get_wallet(wallet_id)
        if wallet is None:
            raise WalletNotFoundError(wallet_id)
        return self._to_snapshot(wallet)

    async def get_balance(self, wallet_id: int) -> Decimal:
        return (await self.get_wallet(wallet_id)).balance

    async def lock_wallets(self, wallet_ids: Iterable[int]) -> dict[int, Decimal]:
        """Row-lock the existing wallets among ``wallet_ids`` in ascending id order."""
        rows = await self.repository.lock_wallets(sorted(set(wallet_ids)))
        return {row.id: row.balance for row in rows}

    async def adjust_balance(self, wallet_id: int, delta: Decimal) -> Decimal:
        wallet = await self.repository.get_wallet(wallet_id)
        if wallet is None:
            raise WalletNotFoundError(wallet_id)

        old_balance = wallet.balance
        new_balance = quantize(old_balance + delta, self.scale)
        if new_balance < 0:
            raise InsufficientFundsError(wallet_id, old_balance, -delta)
        integer_digits = self.precision - self.scale
        if new_balance >= Decimal(10) ** integer_digits:
            raise InvalidAmountError(delta, f"Balance of wallet {wallet_id} would exceed {integer_digits} integer digits")

        stored = await self.repository.set_balance(wallet_id, new_balance)
        if stored is None:
            raise WalletNotFoundError(wallet_id)

        change = BalanceChange(wallet_id=wallet_id, old_balance=old_balance, new_balance=stored)
        for observer in self.observers:
            await observer.balance_changed(change)
        return stored

    async def open_wallet(
        self,
        *,
        user_id: int,
        address: str,
        initial_balance: object = 0,
    ) -> WalletSnapshot:
        balance = normalize_amount(initial_balance, scale=self.scale, precision=self.precision, allow_zero=True)
        if self.users is not None and await self.users.get_user(user_id) is None:
            raise UserNotFoundError(user_id)
        if await self.repository.get_by_address(address) is not None:
            raise WalletAlreadyExistsError(f"Wallet address already in use: {address}")

        wallet = await self.repository.create_wallet(user_id=user_id, address=address, balance=balance)
        logger.info("Opened wallet %s (%s) for user %s with balance %s", wallet.id, address, user_id, balance)
        return self._to_snapshot(wallet)

    @staticmethod
    def _to_snapshot(model: WalletModel) -> WalletSnapshot:
        return WalletSnapshot(
            id=model.id,
            user_id=model.user_id,
            address=model.address,
            balance=model.balance,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
