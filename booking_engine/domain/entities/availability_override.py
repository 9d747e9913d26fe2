"""Provider-entered availability override for a single day."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass
class AvailabilityOverride:
    """
    At most one override exists per ``(offer_id, day)``.

    ``is_available = False`` marks the day as blocked by the provider. A
    missing row means the day follows the regular booking calendar.
    """

    offer_id: int
    day: date
    is_available: bool = False
    reason: str | None = None
    created_at: datetime | None = None
    id: int | None = None

    @property
    def is_blocked(self) -> bool:
        return not self.is_available
