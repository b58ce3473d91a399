"""Transaction log exports"""

from .models import TransactionObserver, TransactionRecord, TransactionStatus, TransactionType
from .service import TransactionLog

__all__ = [
    "TransactionLog",
    "TransactionObserver",
    "TransactionRecord",
    "TransactionStatus",
    "TransactionType",
]
