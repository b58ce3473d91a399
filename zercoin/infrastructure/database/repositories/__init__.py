"""SQLAlchemy-backed repository implementations."""

from .audit_repository import SqlAuditRepository
from .report_repository import SqlReportRepository
from .transaction_repository import SqlTransactionRepository
from .user_repository import SqlUserRepository
from .wallet_repository import SqlWalletRepository

__all__ = [
    "SqlAuditRepository",
    "SqlReportRepository",
    "SqlTransactionRepository",
    "SqlUserRepository",
    "SqlWalletRepository",
]
