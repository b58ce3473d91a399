"""Transfer engine exports"""

from .exceptions import SameWalletTransferError
from .models import BalanceResult, TransferResult
from .service import LedgerUnitOfWork, TransferEngine

__all__ = [
    "BalanceResult",
    "LedgerUnitOfWork",
    "SameWalletTransferError",
    "TransferEngine",
    "TransferResult",
]
