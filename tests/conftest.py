"""
conftest.py - Shared pytest fixtures for ledger tests

Every test gets its own file-backed SQLite database under ``tmp_path`` with
the schema created, a session factory bound to it and a TransferEngine with a
fresh lock manager.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

import pytest
import pytest_asyncio

from zercoin.core.config import DatabaseSettings
from zercoin.core.locks import WalletLockManager
from zercoin.domain.audit import AuditEntry, AuditRecorder
from zercoin.domain.transactions import TransactionLog
from zercoin.domain.transfers import TransferEngine
from zercoin.domain.users import UserService
from zercoin.domain.wallets import WalletStore
from zercoin.infrastructure.database.repositories import SqlWalletRepository
from zercoin.infrastructure.database.session import build_engine, build_session_factory, init_db


@dataclass
class LedgerState:
    balances: dict[int, Decimal]
    transaction_count: int
    audit: list[AuditEntry]


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    engine = build_engine(DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}"))
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return build_session_factory(db_engine)


@pytest.fixture
def ledger(session_factory):
    return TransferEngine(session_factory, WalletLockManager())


@pytest.fixture
def make_wallets(session_factory):
    """Open one wallet per name, each owned by its own user.

    Returns a mapping of name to wallet id.
    """

    async def _make(**balances) -> dict[str, int]:
        ids: dict[str, int] = {}
        async with session_factory() as session:
            users = UserService.with_session(session)
            wallets = WalletStore.with_session(session)
            for name, balance in balances.items():
                user = await users.create_user(name.lower(), email=f"{name.lower()}@example.com")
                wallet = await wallets.open_wallet(
                    user_id=user.id,
                    address=f"WALLET_{name.upper()}",
                    initial_balance=balance,
                )
                ids[name] = wallet.id
            await session.commit()
        return ids

    return _make


@pytest_asyncio.fixture
async def wallets(make_wallets):
    """The reference pair: A holds 1000, B holds 100."""
    return await make_wallets(A="1000", B="100")


@pytest.fixture
def ledger_state(session_factory):
    async def _state() -> LedgerState:
        async with session_factory() as session:
            rows = await SqlWalletRepository(session).list_wallets()
            transaction_count = await TransactionLog.with_session(session).count()
            audit = await AuditRecorder.with_session(session).list_entries(limit=10_000)
        return LedgerState(
            balances={row.id: row.balance for row in rows},
            transaction_count=transaction_count,
            audit=audit,
        )

    return _state
