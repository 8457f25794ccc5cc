from abc import ABC, abstractmethod

from filesender.documents.models import Certificate, Document, File, SignedContent


class BaseRecognizer(ABC):
    """Contract for adapters that turn raw files into documents."""

    @abstractmethod
    def recognize(self, file: File) -> Document | None:
        """Recognize a file into a structured document.

        Args:
            file: The submitted file.

        Returns:
            The recognized Document, or None when the file is not recognized.
        """


class BaseSigner(ABC):
    """Contract for signing adapters."""

    @abstractmethod
    def sign(self, content: bytes, certificate: Certificate) -> SignedContent:
        """Sign document content with the given certificate.

        Raises:
            SigningError: if the content cannot be signed.
        """


class BaseSender(ABC):
    """Contract for delivery adapters."""

    @abstractmethod
    def try_send(self, signed_content: SignedContent) -> bool:
        """Attempt one delivery; return False when delivery failed."""
