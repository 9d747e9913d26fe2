"""
Circuit breaker around the notifier.

Notifications are best effort: when the messaging store keeps failing the
circuit opens and further notifications fail fast with
``CircuitBreakerError`` until ``reset_timeout`` elapses. Callers swallow
both kinds of failure, so bookings keep succeeding either way.
"""

import logging

from pybreaker import CircuitBreaker, CircuitBreakerError, CircuitBreakerListener

from booking_engine.application.interfaces.notifier import Notifier

logger = logging.getLogger(__name__)


class StateChangeLogger(CircuitBreakerListener):
    """Logs circuit state transitions."""

    def state_change(self, cb, old_state, new_state):
        logger.warning(
            "Circuit breaker state changed",
            extra={
                "breaker_name": cb.name,
                "old_state": old_state.name if old_state else None,
                "new_state": new_state.name,
            },
        )


def build_notification_breaker(fail_max: int = 5, reset_timeout: int = 60) -> CircuitBreaker:
    return CircuitBreaker(
        fail_max=fail_max,
        reset_timeout=reset_timeout,
        name="notification_circuit_breaker",
        listeners=[StateChangeLogger()],
    )


class CircuitBreakerNotifier(Notifier):
    def __init__(self, inner: Notifier, breaker: CircuitBreaker) -> None:
        self._inner = inner
        self._breaker = breaker

    async def notify(self, sender_id: int, recipient_id: int, offer_id: int | None, text: str) -> None:
        # calling() records the outcome of the awaited call; call() would
        # only see the coroutine object.
        with self._breaker.calling():
            await self._inner.notify(sender_id, recipient_id, offer_id, text)


__all__ = [
    "CircuitBreakerError",
    "CircuitBreakerNotifier",
    "build_notification_breaker",
]
