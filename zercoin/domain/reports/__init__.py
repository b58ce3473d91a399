"""Reporting exports"""

from .models import UserWalletActivity, WalletLatestTransaction, WalletOverview
from .service import ReportService

__all__ = [
    "ReportService",
    "UserWalletActivity",
    "WalletLatestTransaction",
    "WalletOverview",
]
