from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from booking_engine.application.interfaces.transaction_manager import TransactionManager
from booking_engine.infrastructure.db.tables import offers


class SQLAlchemyTransactionManager(TransactionManager):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        if self._session.in_transaction():
            # Autobegun by an earlier read of the same request; finish it here.
            try:
                yield
            except BaseException:
                await self._session.rollback()
                raise
            await self._session.commit()
        else:
            async with self._session.begin():
                yield

    @asynccontextmanager
    async def lock_offer(self, offer_id: int) -> AsyncIterator[None]:
        async with self.start():
            # Row lock on MySQL/PostgreSQL; SQLite ignores FOR UPDATE and is
            # already serialised by BEGIN IMMEDIATE.
            await self._session.execute(
                select(offers.c.id).where(offers.c.id == offer_id).with_for_update()
            )
            yield
