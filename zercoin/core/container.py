"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncSession

from zercoin.core.config import Settings, get_settings
from zercoin.core.locks import WalletLockManager
from zercoin.domain.transfers import TransferEngine
from zercoin.domain.wallets import WalletStore
from zercoin.infrastructure.database.session import get_engine, get_session_factory


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    wallet_locks: WalletLockManager = field(default_factory=WalletLockManager)

    def init_infrastructure(self) -> None:
        """Ensure infrastructure singletons (database engine, etc.) are initialised."""
        get_engine()

    def transfer_engine(self) -> TransferEngine:
        # Every engine in the process shares one lock manager.
        return TransferEngine(
            get_session_factory(),
            self.wallet_locks,
            amount_scale=self.settings.ledger.amount_scale,
            amount_precision=self.settings.ledger.amount_precision,
        )

    def wallet_store(self, session: AsyncSession) -> WalletStore:
        return WalletStore.with_session(
            session,
            scale=self.settings.ledger.amount_scale,
            precision=self.settings.ledger.amount_precision,
        )


@lru_cache()
def get_container() -> ApplicationContainer:
    container = ApplicationContainer(settings=get_settings())
    container.init_infrastructure()
    return container


__all__ = ["ApplicationContainer", "get_container"]
