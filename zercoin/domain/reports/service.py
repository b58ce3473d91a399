"""Reporting service over wallets, users and the transaction log."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from zercoin.domain.transactions.service import TransactionLog
from zercoin.infrastructure.database.repositories.report_repository import SqlReportRepository

from .models import UserWalletActivity, WalletLatestTransaction, WalletOverview


@dataclass(slots=True)
class ReportService:
    repository: SqlReportRepository
    transactions: TransactionLog

    @classmethod
    def with_session(cls, session: AsyncSession) -> "ReportService":
        return cls(SqlReportRepository(session), TransactionLog.with_session(session))

    async def wallet_overview(self) -> list[WalletOverview]:
        rows = await self.repository.wallet_overview()
        return [
            WalletOverview(wallet_id=row.id, address=row.address, username=row.username, balance=row.balance)
            for row in rows
        ]

    async def latest_transactions(self) -> list[WalletLatestTransaction]:
        """Most recent transaction touching each wallet.

        Recency is ``created_at`` descending with ties going to the higher
        transaction id.
        """
        rows = await self.repository.wallet_overview()
        return [
            WalletLatestTransaction(
                wallet_id=row.id,
                address=row.address,
                transaction=await self.transactions.latest_for_wallet(row.id),
            )
            for row in rows
        ]

    async def user_wallet_activity(self) -> list[UserWalletActivity]:
        activity: list[UserWalletActivity] = []
        for row in await self.repository.users_with_wallets():
            last = None
            if row.wallet_id is not None:
                last = await self.transactions.latest_for_wallet(row.wallet_id)
            activity.append(
                UserWalletActivity(
                    user_id=row.user_id,
                    username=row.username,
                    email=row.email,
                    status=row.status,
                    wallet_id=row.wallet_id,
                    address=row.address,
                    balance=row.balance,
                    last_transaction=last,
                )
            )
        return activity
