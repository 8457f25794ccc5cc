"""Format and freshness rules a recognized document must pass before signing."""

import calendar
from collections.abc import Iterable
from datetime import datetime

from filesender.clock.base import BaseClock
from filesender.documents.models import Document

DEFAULT_ACCEPTED_FORMATS = ("4.0", "3.1")
DEFAULT_FRESHNESS_MONTHS = 1


def add_months(moment: datetime, months: int) -> datetime:
    """Shift a datetime by whole calendar months.

    The day is clamped to the last day of the target month, so
    Jan 31 + 1 month is Feb 28 (Feb 29 in leap years). Time of day and
    tzinfo are preserved.
    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


class DocumentValidator:
    """Pure predicates over a recognized document."""

    def __init__(
        self,
        clock: BaseClock,
        accepted_formats: Iterable[str] = DEFAULT_ACCEPTED_FORMATS,
        freshness_months: int = DEFAULT_FRESHNESS_MONTHS,
    ) -> None:
        if freshness_months < 1:
            raise ValueError(f"freshness_months must be >= 1, got {freshness_months}")
        self._clock = clock
        self._accepted_formats = frozenset(accepted_formats)
        if not self._accepted_formats:
            raise ValueError("accepted_formats must contain at least one format")
        self._freshness_months = freshness_months

    @property
    def accepted_formats(self) -> frozenset[str]:
        return self._accepted_formats

    def check_format(self, document: Document) -> bool:
        """True iff the format is exactly one of the accepted versions."""
        return document.format in self._accepted_formats

    def check_actual(self, document: Document) -> bool:
        """True iff the document is still inside its freshness window.

        The window end is exclusive: a document created exactly
        ``freshness_months`` calendar months before now is stale.
        """
        expires_at = add_months(document.created, self._freshness_months)
        return expires_at > self._clock.now()
