"""Per-wallet asyncio locks acquired in a deterministic order."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)


class WalletLockManager:
    """Hands out one lock per wallet id.

    Locks are created on first use and dropped once no task holds or waits
    for them. ``acquire`` always takes locks in ascending wallet id order, so
    two operations touching the same wallets in opposite order cannot
    deadlock, and operations on disjoint wallets never wait on each other.
    """

    def __init__(self) -> None:
        self._locks: dict[int, asyncio.Lock] = {}
        self._refcounts: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._locks)

    def is_locked(self, wallet_id: int) -> bool:
        lock = self._locks.get(wallet_id)
        return lock is not None and lock.locked()

    @asynccontextmanager
    async def acquire(self, wallet_ids: Iterable[int]) -> AsyncIterator[list[int]]:
        ordered = sorted(set(wallet_ids))
        held: list[int] = []
        try:
            for wallet_id in ordered:
                lock = self._checkout(wallet_id)
                try:
                    await lock.acquire()
                except BaseException:
                    self._checkin(wallet_id)
                    raise
                held.append(wallet_id)
            logger.debug("Acquired wallet locks %s", held)
            yield ordered
        finally:
            for wallet_id in reversed(held):
                self._locks[wallet_id].release()
                self._checkin(wallet_id)

    def _checkout(self, wallet_id: int) -> asyncio.Lock:
        lock = self._locks.get(wallet_id)
        if lock is None:
            lock = self._locks[wallet_id] = asyncio.Lock()
        self._refcounts[wallet_id] = self._refcounts.get(wallet_id, 0) + 1
        return lock

    def _checkin(self, wallet_id: int) -> None:
        remaining = self._refcounts[wallet_id] - 1
        if remaining:
            self._refcounts[wallet_id] = remaining
        else:
            del self._refcounts[wallet_id]
            del self._locks[wallet_id]


__all__ = ["WalletLockManager"]
