from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Protocol


class TransactionManager(Protocol):
    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        yield

    @asynccontextmanager
    async def lock_offer(self, offer_id: int) -> AsyncIterator[None]:
        """
        Transaction serialised against every other ``lock_offer`` of the
        same offer. The booking check-then-insert runs inside it.
        """
        yield
