"""Translation of ledger errors into HTTP errors."""

from __future__ import annotations

from fastapi import HTTPException, status

from zercoin.domain.common.exceptions import (
    InvalidAmountError,
    LedgerError,
    SameWalletTransferError,
    StorageUnavailableError,
    TransactionShapeError,
)
from zercoin.domain.users.exceptions import UserAlreadyExistsError, UserNotFoundError
from zercoin.domain.wallets.exceptions import (
    InsufficientFundsError,
    WalletAlreadyExistsError,
    WalletNotFoundError,
)

_STATUS_BY_ERROR: tuple[tuple[type[LedgerError], int], ...] = (
    (InvalidAmountError, status.HTTP_400_BAD_REQUEST),
    (SameWalletTransferError, status.HTTP_400_BAD_REQUEST),
    (TransactionShapeError, status.HTTP_400_BAD_REQUEST),
    (WalletNotFoundError, status.HTTP_404_NOT_FOUND),
    (UserNotFoundError, status.HTTP_404_NOT_FOUND),
    (InsufficientFundsError, status.HTTP_402_PAYMENT_REQUIRED),
    (WalletAlreadyExistsError, status.HTTP_409_CONFLICT),
    (UserAlreadyExistsError, status.HTTP_409_CONFLICT),
    (StorageUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def to_http_exception(exc: LedgerError) -> HTTPException:
    status_code = status.HTTP_400_BAD_REQUEST
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            status_code = code
            break
    return HTTPException(
        status_code=status_code,
        detail={"code": exc.code, "message": str(exc), "retryable": exc.retryable},
    )


__all__ = ["to_http_exception"]
