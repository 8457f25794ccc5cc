from filesender.collaborators.base import BaseRecognizer, BaseSender, BaseSigner
from filesender.collaborators.exceptions import CollaboratorError, SigningError

__all__ = [
    "BaseRecognizer",
    "BaseSender",
    "BaseSigner",
    "CollaboratorError",
    "SigningError",
]
