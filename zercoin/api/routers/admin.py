"""Provisioning endpoints for users and wallets."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from zercoin.api.deps import get_db_session, get_wallet_store
from zercoin.api.errors import to_http_exception
from zercoin.domain.common.exceptions import LedgerError
from zercoin.domain.users import UserService
from zercoin.domain.wallets import WalletStore
from zercoin.schemas import (
    ErrorResponse,
    UserCreate,
    UserListResponse,
    UserResponse,
    WalletCreate,
    WalletResponse,
)

router = APIRouter()


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
    summary="Create a user",
)
async def create_user(payload: UserCreate, db: AsyncSession = Depends(get_db_session)) -> UserResponse:
    service = UserService.with_session(db)
    try:
        user = await service.create_user(payload.username, email=payload.email, status=payload.status)
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    await db.commit()
    return UserResponse.model_validate(user)


@router.get("/users", response_model=UserListResponse, summary="List users")
async def list_users(db: AsyncSession = Depends(get_db_session)) -> UserListResponse:
    users = await UserService.with_session(db).list_users()
    return UserListResponse(users=[UserResponse.model_validate(user) for user in users])


@router.post(
    "/wallets",
    response_model=WalletResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Open a wallet with an optional seed balance",
)
async def open_wallet(
    payload: WalletCreate,
    db: AsyncSession = Depends(get_db_session),
    store: WalletStore = Depends(get_wallet_store),
) -> WalletResponse:
    try:
        wallet = await store.open_wallet(
            user_id=payload.user_id,
            address=payload.address,
            initial_balance=payload.initial_balance,
        )
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    await db.commit()
    return WalletResponse.model_validate(wallet)
