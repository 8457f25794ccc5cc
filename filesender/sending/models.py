from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

from filesender.documents.models import File


class SkipReason(str, Enum):
    """Why a file did not make it through the pipeline."""

    RECOGNITION_FAILED = "recognition_failed"
    FORMAT_REJECTED = "format_rejected"
    STALE_DOCUMENT = "stale_document"
    SIGNING_FAILED = "signing_failed"
    DELIVERY_FAILED = "delivery_failed"


@dataclass(frozen=True)
class SkippedFile:
    file: File
    reason: SkipReason


@dataclass(frozen=True)
class BatchResult:
    """Outcome of one send_files call.

    Only skipped files are recorded, in input order. A file absent from
    ``skipped`` was sent.
    """

    skipped: tuple[SkippedFile, ...] = field(default_factory=tuple)

    @property
    def skipped_files(self) -> tuple[File, ...]:
        return tuple(entry.file for entry in self.skipped)

    def reason_for(self, file: File) -> SkipReason | None:
        """Return the skip reason of the first matching entry, None if it was sent."""
        for entry in self.skipped:
            if entry.file == file:
                return entry.reason
        return None

    def count_by_reason(self) -> dict[SkipReason, int]:
        return dict(Counter(entry.reason for entry in self.skipped))
