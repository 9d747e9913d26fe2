from datetime import datetime, timezone

from sqlalchemy import insert

from booking_engine.application.interfaces.notifier import Notifier
from booking_engine.infrastructure.db.engine import session_scope
from booking_engine.infrastructure.db.tables import messages


class MessageNotifierSQL(Notifier):
    """
    Stores notifications in the ``messages`` table.

    Uses its own session so a failing message never touches the booking
    transaction that triggered it.
    """

    def __init__(self, session_maker) -> None:
        self._session_maker = session_maker

    async def notify(self, sender_id: int, recipient_id: int, offer_id: int | None, text: str) -> None:
        async with session_scope(self._session_maker) as session:
            await session.execute(
                insert(messages).values(
                    sender_id=sender_id,
                    recipient_id=recipient_id,
                    offer_id=offer_id,
                    content=text,
                    created_at=datetime.now(timezone.utc),
                )
            )
