"""Wallet domain specific exceptions."""

from __future__ import annotations

from decimal import Decimal

from zercoin.domain.common.exceptions import LedgerError


class WalletNotFoundError(LedgerError):
    """Raised when a referenced wallet does not exist.

    ``side`` names the role of the wallet in a transfer (``source`` or
    ``destination``) when the caller knows it.
    """

    code = "wallet_not_found"

    def __init__(self, wallet_id: int, side: str | None = None) -> None:
        label = f"{side.capitalize()} wallet" if side else "Wallet"
        super().__init__(f"{label} not found: {wallet_id}")
        self.wallet_id = wallet_id
        self.side = side


class InsufficientFundsError(LedgerError):
    """Raised when an operation would drive a balance below zero."""

    code = "insufficient_funds"

    def __init__(self, wallet_id: int, balance: Decimal, requested: Decimal) -> None:
        super().__init__(
            f"Insufficient funds in wallet {wallet_id}: balance {balance}, requested {requested}"
        )
        self.wallet_id = wallet_id
        self.balance = balance
        self.requested = requested


class WalletAlreadyExistsError(LedgerError):
    """Raised when opening a wallet with an address that is already taken."""

    code = "wallet_already_exists"
