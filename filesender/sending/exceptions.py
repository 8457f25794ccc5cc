from filesender.documents.models import File
from filesender.sending.models import BatchResult


class FileSenderError(Exception):
    """Base exception for all file sender errors."""


class BatchFaultError(FileSenderError):
    """Raised after a batch completes when one or more collaborators faulted.

    Attributes:
        result: BatchResult for the files that finished normally.
        faults: (file, exception) pairs in input order.
    """

    def __init__(
        self,
        result: BatchResult,
        faults: list[tuple[File, Exception]],
    ) -> None:
        names = ", ".join(file.name for file, _ in faults)
        super().__init__(f"{len(faults)} file(s) failed with collaborator errors: {names}")
        self.result = result
        self.faults = faults
