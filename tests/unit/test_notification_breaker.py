import pytest

from booking_engine.application.notifications import notify_best_effort
from booking_engine.infrastructure.in_memory import InMemoryNotifier
from booking_engine.infrastructure.messaging.circuit_breaker import (
    CircuitBreakerError,
    CircuitBreakerNotifier,
    build_notification_breaker,
)


class CountingNotifier(InMemoryNotifier):
    def __init__(self):
        super().__init__()
        self.calls = 0

    async def notify(self, sender_id, recipient_id, offer_id, text):
        self.calls += 1
        await super().notify(sender_id, recipient_id, offer_id, text)


async def test_messages_pass_through_closed_circuit():
    inner = InMemoryNotifier()
    notifier = CircuitBreakerNotifier(inner, build_notification_breaker(fail_max=2))

    await notifier.notify(1, 2, 10, "hello")

    assert [m.text for m in inner.sent_to(2)] == ["hello"]


async def test_circuit_opens_after_repeated_failures():
    inner = CountingNotifier()
    inner.fail_with = ConnectionError("message store down")
    breaker = build_notification_breaker(fail_max=2, reset_timeout=60)
    notifier = CircuitBreakerNotifier(inner, breaker)

    with pytest.raises(ConnectionError):
        await notifier.notify(1, 2, 10, "first")
    with pytest.raises((ConnectionError, CircuitBreakerError)):
        await notifier.notify(1, 2, 10, "second")
    with pytest.raises(CircuitBreakerError):
        await notifier.notify(1, 2, 10, "third")

    assert inner.calls == 2
    assert breaker.current_state == "open"


async def test_best_effort_swallows_open_circuit():
    inner = InMemoryNotifier()
    inner.fail_with = ConnectionError()
    notifier = CircuitBreakerNotifier(inner, build_notification_breaker(fail_max=1))

    assert await notify_best_effort(notifier, 1, 2, 10, lambda: "a") is False
    assert await notify_best_effort(notifier, 1, 2, 10, lambda: "b") is False


async def test_best_effort_swallows_text_composition_errors():
    notifier = InMemoryNotifier()

    def broken_text():
        raise ValueError("currency_code must have 3 characters: EURO")

    assert await notify_best_effort(notifier, 1, 2, 10, broken_text) is False
    assert notifier.messages == []
