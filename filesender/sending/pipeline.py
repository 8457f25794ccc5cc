from abc import ABC, abstractmethod
from dataclasses import dataclass

from filesender.documents.models import Certificate, Document, File, SignedContent
from filesender.sending.models import SkipReason


@dataclass(slots=True)
class FileContext:
    """Per-file state carried through the pipeline steps."""

    file: File
    certificate: Certificate
    document: Document | None = None
    signed_content: SignedContent | None = None
    skip_reason: SkipReason | None = None

    def skip(self, reason: SkipReason) -> "FileContext":
        self.skip_reason = reason
        return self


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: FileContext) -> FileContext:
        raise NotImplementedError
