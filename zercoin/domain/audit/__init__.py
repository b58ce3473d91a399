"""Audit log exports"""

from .models import TRANSACTION_INSERT, WALLET_UPDATE, AuditEntry
from .service import AuditRecorder

__all__ = [
    "AuditEntry",
    "AuditRecorder",
    "TRANSACTION_INSERT",
    "WALLET_UPDATE",
]
