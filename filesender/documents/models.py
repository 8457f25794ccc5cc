from dataclasses import dataclass
from datetime import datetime
from typing import Any

# Opaque credential handle; only passed through to the signer.
Certificate = Any

SignedContent = bytes


@dataclass(frozen=True)
class File:
    """A submitted file: name plus raw bytes."""

    name: str
    content: bytes


@dataclass(frozen=True)
class Document:
    """Structured form of a File produced by a recognizer."""

    name: str
    content: bytes
    created: datetime
    format: str  # version string, e.g. "4.0"
