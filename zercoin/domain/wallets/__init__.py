"""Wallet domain exports"""

from .exceptions import InsufficientFundsError, WalletAlreadyExistsError, WalletNotFoundError
from .models import BalanceChange, BalanceObserver, WalletSnapshot
from .service import WalletStore

__all__ = [
    "BalanceChange",
    "BalanceObserver",
    "InsufficientFundsError",
    "WalletAlreadyExistsError",
    "WalletNotFoundError",
    "WalletSnapshot",
    "WalletStore",
]
