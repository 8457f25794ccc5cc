from filesender.sending.exceptions import BatchFaultError, FileSenderError
from filesender.sending.file_sender import FileSender, build_file_sender
from filesender.sending.models import BatchResult, SkippedFile, SkipReason

__all__ = [
    "BatchFaultError",
    "BatchResult",
    "FileSender",
    "FileSenderError",
    "SkipReason",
    "SkippedFile",
    "build_file_sender",
]
