"""Audit entries are derived from every mutation and share its fate."""

from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from zercoin.domain.audit import TRANSACTION_INSERT, WALLET_UPDATE, AuditEntry, AuditRecorder
from zercoin.domain.common import StorageUnavailableError
from zercoin.domain.transactions import TransactionLog, TransactionType
from zercoin.domain.wallets import WalletStore


async def test_recorder_formats_wallet_and_transaction_entries(session_factory, wallets):
    async with session_factory() as session:
        recorder = AuditRecorder.with_session(session)
        store = WalletStore.with_session(session, observers=[recorder])
        log = TransactionLog.with_session(session, observers=[recorder])

        await store.adjust_balance(wallets["B"], Decimal("50"))
        tx_id = await log.append(TransactionType.DEPOSIT, amount=Decimal("50"), to_wallet_id=wallets["B"])
        await session.commit()

    async with session_factory() as session:
        entries = await AuditRecorder.with_session(session).list_entries()

    assert [(entry.action, entry.info) for entry in entries] == [
        (WALLET_UPDATE, f"wallet_id={wallets['B']},old_balance=100.00000000,new_balance=150.00000000"),
        (TRANSACTION_INSERT, f"tx_id={tx_id},from=NULL,to={wallets['B']},amount=50.00000000"),
    ]


async def test_entry_fields_parse_info():
    entry = AuditEntry(id=1, action=TRANSACTION_INSERT, info="tx_id=4,from=1,to=NULL,amount=2.00000000", created_at=None)
    assert entry.fields() == {"tx_id": "4", "from": "1", "to": "NULL", "amount": "2.00000000"}


async def test_list_entries_filters_by_action(ledger, session_factory, wallets):
    await ledger.transfer(wallets["A"], wallets["B"], "10")
    await ledger.deposit(wallets["A"], "1")

    async with session_factory() as session:
        recorder = AuditRecorder.with_session(session)
        updates = await recorder.list_entries(action=WALLET_UPDATE)
        inserts = await recorder.list_entries(action=TRANSACTION_INSERT)
        assert await recorder.count_entries() == 5
        assert await recorder.count_entries(WALLET_UPDATE) == 3

    assert len(updates) == 3
    assert len(inserts) == 2


async def test_failure_after_mutation_leaves_no_trace(ledger, ledger_state, wallets, monkeypatch):
    before = await ledger_state()

    async def failing_append(self, *args, **kwargs):
        raise RuntimeError("log unavailable")

    monkeypatch.setattr(TransactionLog, "append", failing_append)

    with pytest.raises(RuntimeError):
        await ledger.transfer(wallets["A"], wallets["B"], "150")

    after = await ledger_state()
    assert after.balances == before.balances
    assert after.transaction_count == 0
    assert after.audit == []


async def test_storage_errors_surface_as_retryable(ledger, ledger_state, wallets, monkeypatch):
    async def broken_append(self, *args, **kwargs):
        raise OperationalError("INSERT INTO transactions", {}, Exception("database is locked"))

    monkeypatch.setattr(TransactionLog, "append", broken_append)

    with pytest.raises(StorageUnavailableError) as excinfo:
        await ledger.deposit(wallets["B"], "50")

    assert excinfo.value.retryable is True
    assert isinstance(excinfo.value.__cause__, OperationalError)
    state = await ledger_state()
    assert state.balances[wallets["B"]] == Decimal("100")
    assert state.audit == []
