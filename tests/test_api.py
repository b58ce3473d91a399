"""HTTP API behaviour through an in-process ASGI client."""

from decimal import Decimal

import httpx
import pytest
import pytest_asyncio

from zercoin.api.deps import get_db_session, get_transfer_engine
from zercoin.core.config import LedgerSettings, Settings
from zercoin.core.container import ApplicationContainer
from zercoin.main import create_app


@pytest_asyncio.fixture
async def client(session_factory, ledger, monkeypatch):
    container = ApplicationContainer(settings=Settings(_env_file=None))
    monkeypatch.setattr("zercoin.api.deps.get_container", lambda: container)
    app = create_app()

    async def override_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_transfer_engine] = lambda: ledger

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
        yield http


@pytest_asyncio.fixture
async def funded(client):
    """Alice holds 1000 and Bob holds 100, both provisioned over HTTP."""
    ids = {}
    for name, balance in (("alice", "1000"), ("bob", "100")):
        user = await client.post("/api/admin/users", json={"username": name, "email": f"{name}@example.com"})
        assert user.status_code == 201
        wallet = await client.post(
            "/api/admin/wallets",
            json={"user_id": user.json()["id"], "address": f"WALLET_{name.upper()}", "initial_balance": balance},
        )
        assert wallet.status_code == 201
        ids[name] = wallet.json()["id"]
    return ids


async def _balance(client, wallet_id):
    response = await client.get(f"/api/ledger/wallets/{wallet_id}")
    assert response.status_code == 200
    return Decimal(response.json()["balance"])


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_transfer_deposit_withdraw_flow(client, funded):
    alice, bob = funded["alice"], funded["bob"]

    transfer = await client.post(
        "/api/ledger/transfers",
        json={"from_wallet_id": alice, "to_wallet_id": bob, "amount": "150"},
    )
    assert transfer.status_code == 201
    body = transfer.json()
    assert Decimal(body["from_balance"]) == Decimal("850")
    assert Decimal(body["to_balance"]) == Decimal("250")

    deposit = await client.post("/api/ledger/deposits", json={"wallet_id": bob, "amount": 50})
    assert deposit.status_code == 201
    assert Decimal(deposit.json()["balance"]) == Decimal("300")

    withdraw = await client.post("/api/ledger/withdrawals", json={"wallet_id": alice, "amount": "100"})
    assert withdraw.status_code == 201
    assert Decimal(withdraw.json()["balance"]) == Decimal("750")

    history = await client.get(f"/api/ledger/wallets/{alice}/transactions")
    assert history.status_code == 200
    assert [tx["type"] for tx in history.json()["transactions"]] == ["withdraw", "transfer"]

    audit = await client.get("/api/ledger/audit")
    assert len(audit.json()["entries"]) == 7
    inserts = await client.get("/api/ledger/audit", params={"action": "transaction_insert"})
    assert len(inserts.json()["entries"]) == 3


@pytest.mark.parametrize(
    "payload, status_code, code",
    [
        ({"to_wallet_id": "bob", "amount": "-5"}, 400, "invalid_amount"),
        ({"to_wallet_id": "bob", "amount": "0.000000001"}, 400, "invalid_amount"),
        ({"to_wallet_id": "alice", "amount": "10"}, 400, "same_wallet_transfer"),
        ({"to_wallet_id": 9999, "amount": "10"}, 404, "wallet_not_found"),
        ({"to_wallet_id": "bob", "amount": "100000"}, 402, "insufficient_funds"),
    ],
)
async def test_transfer_errors(client, funded, payload, status_code, code):
    to_wallet = funded.get(payload["to_wallet_id"], payload["to_wallet_id"])
    response = await client.post(
        "/api/ledger/transfers",
        json={"from_wallet_id": funded["alice"], "to_wallet_id": to_wallet, "amount": payload["amount"]},
    )

    assert response.status_code == status_code
    detail = response.json()["detail"]
    assert detail["code"] == code
    assert detail["retryable"] is False
    assert await _balance(client, funded["alice"]) == Decimal("1000")
    assert await _balance(client, funded["bob"]) == Decimal("100")


async def test_deposit_to_unknown_wallet_is_404(client, funded):
    response = await client.post("/api/ledger/deposits", json={"wallet_id": 9999, "amount": "50"})
    assert response.status_code == 404
    audit = await client.get("/api/ledger/audit")
    assert audit.json()["entries"] == []


async def test_unknown_wallet_lookups(client):
    assert (await client.get("/api/ledger/wallets/42")).status_code == 404
    assert (await client.get("/api/ledger/wallets/42/transactions")).status_code == 404


async def test_provisioning_conflicts(client, funded):
    duplicate_user = await client.post("/api/admin/users", json={"username": "alice"})
    assert duplicate_user.status_code == 409
    assert duplicate_user.json()["detail"]["code"] == "user_already_exists"

    users = await client.get("/api/admin/users")
    alice_id = next(user["id"] for user in users.json()["users"] if user["username"] == "alice")

    duplicate_wallet = await client.post("/api/admin/wallets", json={"user_id": alice_id, "address": "WALLET_ALICE"})
    assert duplicate_wallet.status_code == 409

    orphan = await client.post("/api/admin/wallets", json={"user_id": 9999, "address": "WALLET_NOBODY"})
    assert orphan.status_code == 404
    assert orphan.json()["detail"]["code"] == "user_not_found"

    negative = await client.post(
        "/api/admin/wallets",
        json={"user_id": alice_id, "address": "WALLET_NEGATIVE", "initial_balance": "-1"},
    )
    assert negative.status_code == 400


async def test_reports(client, funded):
    alice, bob = funded["alice"], funded["bob"]
    await client.post("/api/ledger/transfers", json={"from_wallet_id": alice, "to_wallet_id": bob, "amount": "150"})
    await client.post("/api/admin/users", json={"username": "carol"})

    overview = (await client.get("/api/reports/wallets")).json()["wallets"]
    assert [(row["username"], Decimal(row["balance"])) for row in overview] == [
        ("alice", Decimal("850")),
        ("bob", Decimal("250")),
    ]

    latest = (await client.get("/api/reports/latest-transactions")).json()["wallets"]
    assert all(row["transaction"]["type"] == "transfer" for row in latest)

    activity = (await client.get("/api/reports/activity")).json()["rows"]
    assert [row["username"] for row in activity] == ["alice", "bob", "carol"]
    assert activity[2]["wallet_id"] is None
    assert activity[2]["last_transaction"] is None


async def test_wallet_seed_follows_configured_scale(client, monkeypatch):
    settings = Settings(_env_file=None, ledger=LedgerSettings(amount_scale=2, amount_precision=12))
    container = ApplicationContainer(settings=settings)
    monkeypatch.setattr("zercoin.api.deps.get_container", lambda: container)
    user = (await client.post("/api/admin/users", json={"username": "dora"})).json()

    too_fine = await client.post(
        "/api/admin/wallets",
        json={"user_id": user["id"], "address": "WALLET_DORA", "initial_balance": "1.001"},
    )
    too_large = await client.post(
        "/api/admin/wallets",
        json={"user_id": user["id"], "address": "WALLET_DORA", "initial_balance": "10000000000"},
    )
    accepted = await client.post(
        "/api/admin/wallets",
        json={"user_id": user["id"], "address": "WALLET_DORA", "initial_balance": "1.25"},
    )

    assert too_fine.status_code == 400
    assert too_large.status_code == 400
    assert too_large.json()["detail"]["code"] == "invalid_amount"
    assert accepted.status_code == 201
    assert Decimal(accepted.json()["balance"]) == Decimal("1.25")
