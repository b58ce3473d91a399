"""Read-only reporting endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zercoin.api.deps import get_db_session
from zercoin.api.routers.ledger import to_transaction_response
from zercoin.domain.reports import ReportService
from zercoin.schemas import (
    UserWalletActivityListResponse,
    UserWalletActivityResponse,
    WalletLatestTransactionListResponse,
    WalletLatestTransactionResponse,
    WalletOverviewListResponse,
    WalletOverviewResponse,
)

router = APIRouter()


@router.get("/wallets", response_model=WalletOverviewListResponse, summary="Wallet overview")
async def wallet_overview(db: AsyncSession = Depends(get_db_session)) -> WalletOverviewListResponse:
    rows = await ReportService.with_session(db).wallet_overview()
    return WalletOverviewListResponse(wallets=[WalletOverviewResponse.model_validate(row) for row in rows])


@router.get(
    "/latest-transactions",
    response_model=WalletLatestTransactionListResponse,
    summary="Most recent transaction per wallet",
)
async def latest_transactions(db: AsyncSession = Depends(get_db_session)) -> WalletLatestTransactionListResponse:
    rows = await ReportService.with_session(db).latest_transactions()
    return WalletLatestTransactionListResponse(
        wallets=[
            WalletLatestTransactionResponse(
                wallet_id=row.wallet_id,
                address=row.address,
                transaction=to_transaction_response(row.transaction) if row.transaction else None,
            )
            for row in rows
        ]
    )


@router.get(
    "/activity",
    response_model=UserWalletActivityListResponse,
    summary="Users with their wallets and latest transaction",
)
async def user_wallet_activity(db: AsyncSession = Depends(get_db_session)) -> UserWalletActivityListResponse:
    rows = await ReportService.with_session(db).user_wallet_activity()
    return UserWalletActivityListResponse(
        rows=[
            UserWalletActivityResponse(
                user_id=row.user_id,
                username=row.username,
                email=row.email,
                status=row.status,
                wallet_id=row.wallet_id,
                address=row.address,
                balance=row.balance,
                last_transaction=(
                    to_transaction_response(row.last_transaction) if row.last_transaction else None
                ),
            )
            for row in rows
        ]
    )
