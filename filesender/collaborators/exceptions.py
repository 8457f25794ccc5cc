class CollaboratorError(Exception):
    """Base exception for errors reported by external collaborators."""


class SigningError(CollaboratorError):
    """Raised by a signer when the content cannot be signed."""
