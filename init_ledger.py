"""
Seed a demo ledger and replay the reference scenario.

Creates two users with one wallet each, runs a transfer, a deposit and a
withdrawal, then prints the wallet overview and the audit log.
"""
import asyncio

from zercoin.core.container import get_container
from zercoin.domain.audit import AuditRecorder
from zercoin.domain.reports import ReportService
from zercoin.domain.users import UserService
from zercoin.domain.wallets import WalletStore
from zercoin.infrastructure.database.session import dispose_engine, get_session_factory, init_db

USERS = [
    ("Fares", "faris@mail.com", "WALLET_ALICE", "1000.00"),
    ("Zeref", "zeref7780@mail.com", "WALLET_BOB", "100.00"),
]


async def seed_demo_ledger():
    """Create the demo users and wallets, then run the scenario."""
    await init_db()
    session_factory = get_session_factory()

    async with session_factory() as db:
        users = UserService.with_session(db)
        if await users.list_users():
            print("Ledger already seeded")
            return

        wallets = WalletStore.with_session(db)
        wallet_ids = []
        for username, email, address, balance in USERS:
            user = await users.create_user(username, email=email)
            wallet = await wallets.open_wallet(user_id=user.id, address=address, initial_balance=balance)
            wallet_ids.append(wallet.id)
        await db.commit()

    alice, bob = wallet_ids
    engine = get_container().transfer_engine()
    await engine.transfer(alice, bob, "150.00")
    await engine.deposit(bob, "50.00")
    await engine.withdraw(alice, "100.00")

    async with session_factory() as db:
        for row in await ReportService.with_session(db).wallet_overview():
            print(f"{row.wallet_id:>3} {row.address:<14} {row.username or '-':<8} {row.balance}")
        for entry in await AuditRecorder.with_session(db).list_entries(limit=100):
            print(f"{entry.id:>3} {entry.action:<20} {entry.info}")


async def main():
    try:
        await seed_demo_ledger()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
