"""Exception types raised by the verifier and its tooling."""
from __future__ import annotations

from typing import Optional


class EmbeddedSchnorrError(Exception):
    """Base class for errors raised by this package."""


class InvalidSignatureError(EmbeddedSchnorrError):
    """Raised by :func:`assert_valid_signature` on the first failed check."""

    def __init__(self, reason: str, message: str, *, byte_index: Optional[int] = None) -> None:
        super().__init__(message)
        self.reason = reason
        self.byte_index = byte_index


class VectorFormatError(EmbeddedSchnorrError, ValueError):
    """A signature vector document could not be parsed."""


__all__ = ["EmbeddedSchnorrError", "InvalidSignatureError", "VectorFormatError"]
