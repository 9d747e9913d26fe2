import logging
from collections.abc import Callable

from booking_engine.application.interfaces.notifier import Notifier

logger = logging.getLogger(__name__)


async def notify_best_effort(
    notifier: Notifier,
    sender_id: int,
    recipient_id: int,
    offer_id: int | None,
    compose_text: Callable[[], str],
) -> bool:
    """
    Sends a notification without ever failing the caller.

    The text is composed inside the guarded block, so a formatting error
    is treated like a delivery error. Returns whether the notifier accepted
    the message. Failures are logged and swallowed so a booking or
    cancellation is never rolled back because of messaging.
    """
    try:
        await notifier.notify(sender_id, recipient_id, offer_id, compose_text())
    except Exception as exc:
        logger.warning(
            "Notification could not be delivered",
            exc_info=exc,
            extra={
                "sender_id": sender_id,
                "recipient_id": recipient_id,
                "offer_id": offer_id,
            },
        )
        return False
    return True
