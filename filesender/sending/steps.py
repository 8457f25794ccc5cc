from filesender.collaborators.base import BaseRecognizer, BaseSender, BaseSigner
from filesender.collaborators.exceptions import SigningError
from filesender.documents.models import Document
from filesender.logging.logger import Log
from filesender.sending.models import SkipReason
from filesender.sending.pipeline import FileContext, PipelineStep
from filesender.validation.validator import DocumentValidator


def _require_document(context: FileContext, step: str) -> Document:
    if context.document is None:
        raise ValueError(f"FileContext.document must be set before {step}")
    return context.document


class RecognizeStep(PipelineStep):
    def __init__(self, recognizer: BaseRecognizer) -> None:
        self._recognizer = recognizer

    def run(self, context: FileContext) -> FileContext:
        document = self._recognizer.recognize(context.file)
        if document is None:
            return context.skip(SkipReason.RECOGNITION_FAILED)
        context.document = document
        return context


class CheckFormatStep(PipelineStep):
    def __init__(self, validator: DocumentValidator) -> None:
        self._validator = validator

    def run(self, context: FileContext) -> FileContext:
        document = _require_document(context, "format check")
        if not self._validator.check_format(document):
            return context.skip(SkipReason.FORMAT_REJECTED)
        return context


class CheckActualStep(PipelineStep):
    def __init__(self, validator: DocumentValidator) -> None:
        self._validator = validator

    def run(self, context: FileContext) -> FileContext:
        document = _require_document(context, "freshness check")
        if not self._validator.check_actual(document):
            return context.skip(SkipReason.STALE_DOCUMENT)
        return context


class SignStep(PipelineStep):
    def __init__(self, signer: BaseSigner) -> None:
        self._signer = signer

    def run(self, context: FileContext) -> FileContext:
        document = _require_document(context, "signing")
        try:
            context.signed_content = self._signer.sign(document.content, context.certificate)
        except SigningError as exc:
            Log.warning(f"Signing failed for file {context.file.name}: {exc}")
            return context.skip(SkipReason.SIGNING_FAILED)
        return context


class SendStep(PipelineStep):
    def __init__(self, sender: BaseSender) -> None:
        self._sender = sender

    def run(self, context: FileContext) -> FileContext:
        if context.signed_content is None:
            raise ValueError("FileContext.signed_content must be set before sending")
        if not self._sender.try_send(context.signed_content):
            return context.skip(SkipReason.DELIVERY_FAILED)
        return context
