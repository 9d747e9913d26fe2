import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from booking_engine.application.interfaces.transaction_manager import TransactionManager


class InMemoryTransactionManager(TransactionManager):
    """
    No rollback, but ``lock_offer`` serialises writers per offer with one
    ``asyncio.Lock`` each.
    """

    def __init__(self) -> None:
        self._offer_locks: dict[int, asyncio.Lock] = {}

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        yield

    @asynccontextmanager
    async def lock_offer(self, offer_id: int) -> AsyncIterator[None]:
        lock = self._offer_locks.setdefault(offer_id, asyncio.Lock())
        async with lock:
            yield
