"""Wall-clock abstraction for date and timestamp placeholders."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    """Source of the current moment."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current moment."""
        pass


class SystemClock(Clock):
    """Reads the system clock, in local time unless ``utc`` is set."""

    def __init__(self, utc: bool = False):
        self.utc = utc

    def now(self) -> datetime:
        if self.utc:
            return datetime.now(timezone.utc)
        return datetime.now()


class FixedClock(Clock):
    """Always returns the same moment."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment
