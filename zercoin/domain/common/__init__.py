"""Shared abstractions used across domain modules."""

from .exceptions import (
    InvalidAmountError,
    LedgerError,
    SameWalletTransferError,
    StorageUnavailableError,
    TransactionShapeError,
)
from .money import format_amount, normalize_amount, quantize, to_decimal
from .repository import AsyncRepository

__all__ = [
    "AsyncRepository",
    "InvalidAmountError",
    "LedgerError",
    "SameWalletTransferError",
    "StorageUnavailableError",
    "TransactionShapeError",
    "format_amount",
    "normalize_amount",
    "quantize",
    "to_decimal",
]
