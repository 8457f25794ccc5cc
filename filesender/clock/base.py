from abc import ABC, abstractmethod
from datetime import datetime


class BaseClock(ABC):
    """Contract for the source of "now" used by freshness checks."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant.

        Must be comparable with Document.created: both naive or both aware.
        """
