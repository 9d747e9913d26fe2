"""In-memory notifier that keeps every message it is given."""

from dataclasses import dataclass

from booking_engine.application.interfaces.notifier import Notifier


@dataclass(frozen=True)
class SentMessage:
    sender_id: int
    recipient_id: int
    offer_id: int | None
    text: str


class InMemoryNotifier(Notifier):
    def __init__(self) -> None:
        self.messages: list[SentMessage] = []
        self.fail_with: Exception | None = None

    async def notify(self, sender_id: int, recipient_id: int, offer_id: int | None, text: str) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.messages.append(SentMessage(sender_id, recipient_id, offer_id, text))

    def sent_to(self, recipient_id: int) -> list[SentMessage]:
        return [m for m in self.messages if m.recipient_id == recipient_id]

    def clear(self) -> None:
        self.messages.clear()
        self.fail_with = None
