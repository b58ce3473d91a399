"""Ledger error taxonomy shared by every domain module."""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for ledger domain errors.

    Every subclass carries a stable ``code`` that the HTTP layer forwards to
    callers. ``retryable`` marks errors the caller may resubmit unchanged.
    """

    code = "ledger_error"
    retryable = False


class InvalidAmountError(LedgerError):
    """Raised when an amount is not a positive fixed-point decimal."""

    code = "invalid_amount"

    def __init__(self, amount: object, reason: str = "Amount must be positive") -> None:
        super().__init__(f"{reason}: {amount!r}")
        self.amount = amount
        self.reason = reason


class StorageUnavailableError(LedgerError):
    """Raised when the database fails underneath a unit of work."""

    code = "storage_unavailable"
    retryable = True


class SameWalletTransferError(LedgerError):
    """Raised when a transfer names the same wallet as source and destination."""

    code = "same_wallet_transfer"

    def __init__(self, wallet_id: int) -> None:
        super().__init__(f"Cannot transfer from wallet {wallet_id} to itself")
        self.wallet_id = wallet_id


class TransactionShapeError(LedgerError):
    """Raised when a transaction's source and destination do not fit its type."""

    code = "invalid_transaction_shape"

    def __init__(self, type_: str, message: str) -> None:
        super().__init__(message)
        self.type = type_
