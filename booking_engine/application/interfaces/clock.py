"""Clock port - abstraction over system time."""

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, timezone, tzinfo


class Clock(ABC):
    """
    System time port.

    Timestamps are stored in UTC, while calendar decisions (what is
    "today", the same-day cutoff) use the marketplace's local time.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Current time, timezone-aware UTC."""
        raise NotImplementedError

    @abstractmethod
    def local_now(self) -> datetime:
        """Current wall-clock time of the marketplace."""
        raise NotImplementedError

    def today(self) -> date:
        """Current local calendar day."""
        return self.local_now().date()


class SystemClock(Clock):
    """Real clock. ``local_tz=None`` uses the host's local time."""

    def __init__(self, local_tz: tzinfo | None = None):
        self._local_tz = local_tz

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def local_now(self) -> datetime:
        if self._local_tz is None:
            return datetime.now()
        return datetime.now(self._local_tz)


class FakeClock(Clock):
    """
    Fixed clock for tests.

    ``fixed_time`` is interpreted as local wall-clock time; ``now()`` returns
    the same instant tagged as UTC.
    """

    def __init__(self, fixed_time: datetime | None = None):
        self._fixed_time = fixed_time or datetime.now()

    def now(self) -> datetime:
        return self._fixed_time.replace(tzinfo=timezone.utc)

    def local_now(self) -> datetime:
        return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        self._fixed_time = new_time

    def advance(self, seconds: int = 0, minutes: int = 0, hours: int = 0, days: int = 0) -> None:
        delta = timedelta(seconds=seconds, minutes=minutes, hours=hours, days=days)
        self._fixed_time = self._fixed_time + delta
