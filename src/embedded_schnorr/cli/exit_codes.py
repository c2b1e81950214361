"""Stable exit codes for the verifier CLI."""
from __future__ import annotations

EXIT_VERIFIED = 0
EXIT_INVALID_SIGNATURE = 10
EXIT_MALFORMED = 20

_DESCRIPTIONS = {
    EXIT_VERIFIED: "signature verified",
    EXIT_INVALID_SIGNATURE: "signature rejected",
    EXIT_MALFORMED: "malformed input",
}


def exit_code_description(code: int) -> str:
    return _DESCRIPTIONS.get(code, "unknown")


__all__ = [
    "EXIT_VERIFIED",
    "EXIT_INVALID_SIGNATURE",
    "EXIT_MALFORMED",
    "exit_code_description",
]
