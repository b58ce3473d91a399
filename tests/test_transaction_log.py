"""TransactionLog appends, shape rules and ordering."""

from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy import update

from zercoin.api.errors import to_http_exception
from zercoin.db.models import Transaction
from zercoin.domain.common import (
    InvalidAmountError,
    LedgerError,
    SameWalletTransferError,
    TransactionShapeError,
)
from zercoin.domain.transactions import (
    TransactionLog,
    TransactionRecord,
    TransactionStatus,
    TransactionType,
)


class RecordingObserver:
    def __init__(self):
        self.records: list[TransactionRecord] = []

    async def transaction_appended(self, record: TransactionRecord) -> None:
        self.records.append(record)


async def test_append_returns_id_and_notifies_observers(session_factory, wallets):
    observer = RecordingObserver()
    async with session_factory() as session:
        log = TransactionLog.with_session(session, observers=[observer])
        tx_id = await log.append(
            TransactionType.TRANSFER,
            amount=Decimal("150"),
            from_wallet_id=wallets["A"],
            to_wallet_id=wallets["B"],
        )
        await session.commit()

    assert len(observer.records) == 1
    record = observer.records[0]
    assert record.id == tx_id
    assert record.type is TransactionType.TRANSFER
    assert record.status is TransactionStatus.CONFIRMED
    assert record.amount == Decimal("150")
    assert record.created_at is not None
    assert record.touches(wallets["A"]) and record.touches(wallets["B"])

    async with session_factory() as session:
        stored = await TransactionLog.with_session(session).get(tx_id)
    assert stored == record


async def test_append_accepts_plain_strings(session_factory, wallets):
    async with session_factory() as session:
        log = TransactionLog.with_session(session)
        tx_id = await log.append("deposit", amount=Decimal("5"), to_wallet_id=wallets["B"], status="pending")
        record = await log.get(tx_id)
    assert record.type is TransactionType.DEPOSIT
    assert record.status is TransactionStatus.PENDING
    assert record.from_wallet_id is None


@pytest.mark.parametrize(
    "type_, from_wallet, to_wallet, error",
    [
        (TransactionType.TRANSFER, None, 2, TransactionShapeError),
        (TransactionType.TRANSFER, 1, None, TransactionShapeError),
        (TransactionType.TRANSFER, 1, 1, SameWalletTransferError),
        (TransactionType.DEPOSIT, 1, 2, TransactionShapeError),
        (TransactionType.DEPOSIT, None, None, TransactionShapeError),
        (TransactionType.WITHDRAW, 1, 2, TransactionShapeError),
        (TransactionType.WITHDRAW, None, 1, TransactionShapeError),
    ],
)
async def test_append_rejects_invalid_shapes(session_factory, wallets, type_, from_wallet, to_wallet, error):
    async with session_factory() as session:
        log = TransactionLog.with_session(session)
        with pytest.raises(error) as excinfo:
            await log.append(type_, amount=Decimal("1"), from_wallet_id=from_wallet, to_wallet_id=to_wallet)
        assert isinstance(excinfo.value, LedgerError)
        assert excinfo.value.code in {"invalid_transaction_shape", "same_wallet_transfer"}
        assert await log.count() == 0


def test_shape_errors_map_to_bad_request():
    response = to_http_exception(TransactionShapeError("deposit", "deposit requires a destination wallet and no source"))
    assert response.status_code == 400
    assert response.detail["code"] == "invalid_transaction_shape"


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-1")])
async def test_append_rejects_non_positive_amounts(session_factory, wallets, amount):
    async with session_factory() as session:
        with pytest.raises(InvalidAmountError):
            await TransactionLog.with_session(session).append(
                TransactionType.DEPOSIT, amount=amount, to_wallet_id=wallets["A"]
            )


async def test_list_for_wallet_is_newest_first_with_id_tiebreak(session_factory, wallets):
    a, b = wallets["A"], wallets["B"]
    async with session_factory() as session:
        log = TransactionLog.with_session(session)
        first = await log.append(TransactionType.DEPOSIT, amount=Decimal("1"), to_wallet_id=a)
        second = await log.append(TransactionType.TRANSFER, amount=Decimal("2"), from_wallet_id=a, to_wallet_id=b)
        third = await log.append(TransactionType.WITHDRAW, amount=Decimal("3"), from_wallet_id=b)
        tied = datetime(2026, 1, 1, 12, 0, 0)
        await session.execute(update(Transaction).values(created_at=tied))
        await session.execute(
            update(Transaction).where(Transaction.id == first).values(created_at=datetime(2026, 1, 2))
        )
        await session.commit()

    async with session_factory() as session:
        log = TransactionLog.with_session(session)
        history_a = await log.list_for_wallet(a)
        history_b = await log.list_for_wallet(b)
        paged = await log.list_for_wallet(b, limit=1, offset=1)
        latest_b = await log.latest_for_wallet(b)
        latest_a = await log.latest_for_wallet(a)

    assert [record.id for record in history_a] == [first, second]
    assert [record.id for record in history_b] == [third, second]
    assert [record.id for record in paged] == [second]
    assert latest_b.id == third
    assert latest_a.id == first


async def test_latest_for_wallet_without_transactions(session_factory, wallets):
    async with session_factory() as session:
        assert await TransactionLog.with_session(session).latest_for_wallet(wallets["A"]) is None
