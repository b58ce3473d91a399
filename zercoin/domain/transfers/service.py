"""Transfer engine: runs transfer, deposit and withdraw as atomic units of work."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from zercoin.core.locks import WalletLockManager
from zercoin.domain.audit.service import AuditRecorder
from zercoin.domain.common.exceptions import LedgerError, StorageUnavailableError
from zercoin.domain.common.money import DEFAULT_PRECISION, DEFAULT_SCALE, normalize_amount
from zercoin.domain.transactions.models import TransactionType
from zercoin.domain.transactions.service import TransactionLog
from zercoin.domain.wallets.exceptions import InsufficientFundsError, WalletNotFoundError
from zercoin.domain.wallets.service import WalletStore

from .exceptions import SameWalletTransferError
from .models import BalanceResult, TransferResult

logger = logging.getLogger(__name__)

_STORAGE_ERRORS = (OperationalError, InterfaceError, PoolTimeoutError)


@dataclass(slots=True)
class LedgerUnitOfWork:
    """Components bound to one database transaction."""

    session: AsyncSession
    wallets: WalletStore
    transactions: TransactionLog
    audit: AuditRecorder


class TransferEngine:
    """Composes wallet adjustments and log appends into atomic operations.

    Each operation takes the in-process locks of every wallet it touches in
    ascending id order, then opens a database transaction, row-locks the
    same wallets, validates, mutates and commits. Any exception rolls the
    whole transaction back, including staged transaction and audit rows.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        locks: WalletLockManager | None = None,
        *,
        amount_scale: int = DEFAULT_SCALE,
        amount_precision: int = DEFAULT_PRECISION,
    ) -> None:
        self._session_factory = session_factory
        self._locks = locks if locks is not None else WalletLockManager()
        self._scale = amount_scale
        self._precision = amount_precision

    @property
    def locks(self) -> WalletLockManager:
        return self._locks

    async def transfer(self, from_wallet_id: int, to_wallet_id: int, amount: object) -> TransferResult:
        value = self._normalize(amount)
        if from_wallet_id == to_wallet_id:
            logger.warning("transfer rejected: source and destination are wallet %s", from_wallet_id)
            raise SameWalletTransferError(from_wallet_id)

        async with self._unit_of_work("transfer", (from_wallet_id, to_wallet_id)) as uow:
            balances = await uow.wallets.lock_wallets((from_wallet_id, to_wallet_id))
            if from_wallet_id not in balances:
                raise WalletNotFoundError(from_wallet_id, side="source")
            if to_wallet_id not in balances:
                raise WalletNotFoundError(to_wallet_id, side="destination")
            if balances[from_wallet_id] < value:
                raise InsufficientFundsError(from_wallet_id, balances[from_wallet_id], value)

            from_balance = await uow.wallets.adjust_balance(from_wallet_id, -value)
            to_balance = await uow.wallets.adjust_balance(to_wallet_id, value)
            transaction_id = await uow.transactions.append(
                TransactionType.TRANSFER,
                amount=value,
                from_wallet_id=from_wallet_id,
                to_wallet_id=to_wallet_id,
            )

        logger.info(
            "Transfer %s committed: %s -> %s amount=%s",
            transaction_id,
            from_wallet_id,
            to_wallet_id,
            value,
        )
        return TransferResult(
            transaction_id=transaction_id,
            from_wallet_id=from_wallet_id,
            to_wallet_id=to_wallet_id,
            amount=value,
            from_balance=from_balance,
            to_balance=to_balance,
        )

    async def deposit(self, wallet_id: int, amount: object) -> BalanceResult:
        value = self._normalize(amount)

        async with self._unit_of_work("deposit", (wallet_id,)) as uow:
            balances = await uow.wallets.lock_wallets((wallet_id,))
            if wallet_id not in balances:
                raise WalletNotFoundError(wallet_id)

            balance = await uow.wallets.adjust_balance(wallet_id, value)
            transaction_id = await uow.transactions.append(
                TransactionType.DEPOSIT,
                amount=value,
                to_wallet_id=wallet_id,
            )

        logger.info("Deposit %s committed: wallet=%s amount=%s", transaction_id, wallet_id, value)
        return BalanceResult(transaction_id=transaction_id, wallet_id=wallet_id, amount=value, balance=balance)

    async def withdraw(self, wallet_id: int, amount: object) -> BalanceResult:
        value = self._normalize(amount)

        async with self._unit_of_work("withdraw", (wallet_id,)) as uow:
            balances = await uow.wallets.lock_wallets((wallet_id,))
            if wallet_id not in balances:
                raise WalletNotFoundError(wallet_id)
            if balances[wallet_id] < value:
                raise InsufficientFundsError(wallet_id, balances[wallet_id], value)

            balance = await uow.wallets.adjust_balance(wallet_id, -value)
            transaction_id = await uow.transactions.append(
                TransactionType.WITHDRAW,
                amount=value,
                from_wallet_id=wallet_id,
            )

        logger.info("Withdraw %s committed: wallet=%s amount=%s", transaction_id, wallet_id, value)
        return BalanceResult(transaction_id=transaction_id, wallet_id=wallet_id, amount=value, balance=balance)

    def _normalize(self, amount: object) -> Decimal:
        try:
            return normalize_amount(amount, scale=self._scale, precision=self._precision)
        except LedgerError as exc:
            logger.warning("Rejected amount %r: %s", amount, exc)
            raise

    def bind(self, session: AsyncSession) -> LedgerUnitOfWork:
        """Wire the ledger components to ``session`` with audit hooks attached."""
        recorder = AuditRecorder.with_session(session, scale=self._scale)
        return LedgerUnitOfWork(
            session=session,
            wallets=WalletStore.with_session(
                session,
                observers=(recorder,),
                scale=self._scale,
                precision=self._precision,
            ),
            transactions=TransactionLog.with_session(session, observers=(recorder,)),
            audit=recorder,
        )

    @asynccontextmanager
    async def _unit_of_work(self, operation: str, wallet_ids: Iterable[int]) -> AsyncIterator[LedgerUnitOfWork]:
        async with self._locks.acquire(wallet_ids):
            try:
                async with self._session_factory() as session:
                    async with session.begin():
                        yield self.bind(session)
            except LedgerError as exc:
                logger.warning("%s rejected: %s", operation, exc)
                raise
            except _STORAGE_ERRORS as exc:
                logger.error("%s failed on storage: %s", operation, exc)
                raise StorageUnavailableError(f"{operation} could not be completed: {exc}") from exc
