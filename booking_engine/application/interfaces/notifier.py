"""Notifier port - messaging collaborator."""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """
    Persists a message from one user to another about an offer.

    Callers treat delivery as best effort.
    """

    @abstractmethod
    async def notify(self, sender_id: int, recipient_id: int, offer_id: int | None, text: str) -> None:
        raise NotImplementedError
