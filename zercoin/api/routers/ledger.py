"""Ledger endpoints: transfers, deposits, withdrawals and history."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from zercoin.api.deps import get_db_session, get_transfer_engine, get_wallet_store
from zercoin.api.errors import to_http_exception
from zercoin.domain.audit import AuditRecorder
from zercoin.domain.common.exceptions import LedgerError
from zercoin.domain.transactions import TransactionLog, TransactionRecord
from zercoin.domain.transfers import TransferEngine
from zercoin.domain.wallets import WalletStore
from zercoin.schemas import (
    AuditEntryListResponse,
    AuditEntryResponse,
    BalanceResponse,
    ErrorResponse,
    TransactionListResponse,
    TransactionResponse,
    TransferRequest,
    TransferResponse,
    WalletAmountRequest,
    WalletResponse,
)

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    402: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


def to_transaction_response(record: TransactionRecord) -> TransactionResponse:
    return TransactionResponse(
        id=record.id,
        type=record.type.value,
        status=record.status.value,
        amount=record.amount,
        from_wallet_id=record.from_wallet_id,
        to_wallet_id=record.to_wallet_id,
        created_at=record.created_at,
    )


@router.post(
    "/transfers",
    response_model=TransferResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
    summary="Move funds between two wallets",
)
async def create_transfer(
    payload: TransferRequest,
    engine: TransferEngine = Depends(get_transfer_engine),
) -> TransferResponse:
    try:
        result = await engine.transfer(payload.from_wallet_id, payload.to_wallet_id, payload.amount)
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return TransferResponse.model_validate(result)


@router.post(
    "/deposits",
    response_model=BalanceResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
    summary="Credit a wallet",
)
async def create_deposit(
    payload: WalletAmountRequest,
    engine: TransferEngine = Depends(get_transfer_engine),
) -> BalanceResponse:
    try:
        result = await engine.deposit(payload.wallet_id, payload.amount)
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return BalanceResponse.model_validate(result)


@router.post(
    "/withdrawals",
    response_model=BalanceResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
    summary="Debit a wallet",
)
async def create_withdrawal(
    payload: WalletAmountRequest,
    engine: TransferEngine = Depends(get_transfer_engine),
) -> BalanceResponse:
    try:
        result = await engine.withdraw(payload.wallet_id, payload.amount)
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return BalanceResponse.model_validate(result)


@router.get(
    "/wallets/{wallet_id}",
    response_model=WalletResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a wallet and its balance",
)
async def get_wallet(
    wallet_id: int = Path(..., description="Wallet ID"),
    store: WalletStore = Depends(get_wallet_store),
) -> WalletResponse:
    try:
        wallet = await store.get_wallet(wallet_id)
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return WalletResponse.model_validate(wallet)


@router.get(
    "/wallets/{wallet_id}/transactions",
    response_model=TransactionListResponse,
    responses={404: {"model": ErrorResponse}},
    summary="List transactions touching a wallet, newest first",
)
async def list_wallet_transactions(
    wallet_id: int = Path(..., description="Wallet ID"),
    limit: int = Query(20, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db_session),
    store: WalletStore = Depends(get_wallet_store),
) -> TransactionListResponse:
    try:
        await store.get_wallet(wallet_id)
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    records = await TransactionLog.with_session(db).list_for_wallet(wallet_id, limit, offset)
    return TransactionListResponse(transactions=[to_transaction_response(record) for record in records])


@router.get("/audit", response_model=AuditEntryListResponse, summary="List audit entries in insertion order")
async def list_audit_entries(
    action: Optional[str] = Query(None, description="Filter by action tag"),
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db_session),
) -> AuditEntryListResponse:
    entries = await AuditRecorder.with_session(db).list_entries(action=action, limit=limit, offset=offset)
    return AuditEntryListResponse(entries=[AuditEntryResponse.model_validate(entry) for entry in entries])
