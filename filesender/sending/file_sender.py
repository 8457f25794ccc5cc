from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from filesender.clock.base import BaseClock
from filesender.clock.system_clock import SystemClock
from filesender.collaborators.base import BaseRecognizer, BaseSender, BaseSigner
from filesender.config.settings import Settings
from filesender.documents.models import Certificate, File
from filesender.logging.logger import Log
from filesender.sending.exceptions import BatchFaultError
from filesender.sending.models import BatchResult, SkippedFile
from filesender.sending.pipeline import FileContext, PipelineStep
from filesender.sending.steps import (
    CheckActualStep,
    CheckFormatStep,
    RecognizeStep,
    SendStep,
    SignStep,
)
from filesender.validation.validator import DocumentValidator

# Either the finished context or the exception a collaborator raised.
_Outcome = FileContext | Exception


class FileSender:
    """Sends a batch of files, each through its own pipeline.

    Pipeline per file: recognize -> check format -> check freshness -> sign -> send.
    A file stops at the first step that skips it. Files never affect each
    other: a skip or a collaborator fault on one file leaves the calls made
    for every other file unchanged.
    """

    def __init__(self, steps: list[PipelineStep], max_workers: int = 1) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self._steps = steps
        self._max_workers = max_workers

    def send_files(self, files: Sequence[File], certificate: Certificate) -> BatchResult:
        """Run every file through the pipeline and report the skipped ones.

        Returns:
            BatchResult with skipped files in input order.

        Raises:
            BatchFaultError: after all files were processed, if any
                collaborator raised an unexpected exception.
        """
        Log.info(f"Sending batch of {len(files)} file(s)")
        outcomes = self._run_all(files, certificate)

        skipped: list[SkippedFile] = []
        faults: list[tuple[File, Exception]] = []
        for file, outcome in zip(files, outcomes):
            if isinstance(outcome, Exception):
                faults.append((file, outcome))
            elif outcome.skip_reason is not None:
                skipped.append(SkippedFile(file=file, reason=outcome.skip_reason))

        result = BatchResult(skipped=tuple(skipped))
        sent = len(files) - len(skipped) - len(faults)
        Log.info(f"Batch finished: {sent} sent, {len(skipped)} skipped, {len(faults)} faulted")
        if faults:
            raise BatchFaultError(result, faults) from faults[0][1]
        return result

    def _run_all(self, files: Sequence[File], certificate: Certificate) -> list[_Outcome]:
        if self._max_workers == 1 or len(files) <= 1:
            return [self._run_file(file, certificate) for file in files]
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            # map() yields in submission order, not completion order
            return list(executor.map(lambda f: self._run_file(f, certificate), files))

    def _run_file(self, file: File, certificate: Certificate) -> _Outcome:
        context = FileContext(file=file, certificate=certificate)
        try:
            for step in self._steps:
                context = step.run(context)
                reason = context.skip_reason
                if reason is not None:
                    Log.warning(f"Skipped file {file.name}: {reason.value}")
                    return context
        except Exception as exc:
            Log.error(f"Collaborator failed on file {file.name}: {exc}", exc=exc)
            return exc
        Log.debug(f"Sent file {file.name}")
        return context


def build_file_sender(
    settings: Settings,
    recognizer: BaseRecognizer,
    signer: BaseSigner,
    sender: BaseSender,
    clock: BaseClock | None = None,
) -> FileSender:
    """Build a FileSender with the default pipeline steps."""
    Log.configure(settings.log_level)
    validator = DocumentValidator(
        clock=clock if clock is not None else SystemClock(),
        accepted_formats=settings.accepted_formats,
        freshness_months=settings.freshness_months,
    )
    steps: list[PipelineStep] = [
        RecognizeStep(recognizer),
        CheckFormatStep(validator),
        CheckActualStep(validator),
        SignStep(signer),
        SendStep(sender),
    ]
    return FileSender(steps=steps, max_workers=settings.max_workers)
