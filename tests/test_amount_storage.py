"""Exact storage of DECIMAL(18, 8) amounts."""

from decimal import Decimal

import pytest
from sqlalchemy import text

from zercoin.db.types import LedgerAmount
from zercoin.domain.transactions import TransactionLog


@pytest.mark.parametrize(
    "balance",
    ["9999999999.99999999", "123456789.12345678", "0.00000001", "0", "1000000000.1"],
)
async def test_wallet_balance_round_trips_exactly(make_wallets, ledger_state, balance):
    ids = await make_wallets(W=balance)
    state = await ledger_state()
    assert state.balances[ids["W"]] == Decimal(balance)


async def test_sqlite_stores_integer_units(session_factory, make_wallets):
    ids = await make_wallets(W="9999999999.99999999")

    async with session_factory() as session:
        row = (
            await session.execute(
                text("SELECT typeof(balance), balance FROM wallets WHERE id = :id"), {"id": ids["W"]}
            )
        ).one()

    assert row[0] == "integer"
    assert row[1] == 999999999999999999


async def test_transaction_amounts_are_exact(session_factory, ledger, make_wallets):
    ids = await make_wallets(A="9999999999.99999999", B="0")
    result = await ledger.transfer(ids["A"], ids["B"], "9999999999.99999999")

    async with session_factory() as session:
        record = await TransactionLog.with_session(session).get(result.transaction_id)
    assert record.amount == Decimal("9999999999.99999999")


def test_results_are_quantized_to_eight_places():
    column_type = LedgerAmount()

    class SQLiteDialect:
        name = "sqlite"

    class NativeDialect:
        name = "postgresql"

    assert column_type.process_bind_param(Decimal("1.5"), SQLiteDialect()) == 150000000
    assert str(column_type.process_result_value(150000000, SQLiteDialect())) == "1.50000000"
    assert column_type.process_bind_param(Decimal("1.5"), NativeDialect()) == Decimal("1.50000000")
    assert str(column_type.process_result_value(Decimal("1.5"), NativeDialect())) == "1.50000000"
    assert column_type.process_bind_param(None, SQLiteDialect()) is None
