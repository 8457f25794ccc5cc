from datetime import datetime

from filesender.clock.base import BaseClock


class SystemClock(BaseClock):
    """Reads the local wall clock as a naive datetime."""

    def now(self) -> datetime:
        return datetime.now()
