"""Schnorr signature verification over the embedded curve.

A signature is 64 bytes: the response scalar ``s`` followed by the
challenge ``e``. Verification rebuilds the signer's commitment
``R = s*G + e*P``, binds it to the key with a Pedersen hash and hashes that
together with the message using BLAKE2s. The signature is accepted when the
result equals ``e`` byte for byte.
"""
from __future__ import annotations

import hmac
import logging
from typing import Tuple

from .curve import GENERATOR, CurvePoint, multi_scalar_mul
from .errors import InvalidSignatureError
from .field import to_be_bytes
from .hashes import blake2s, pedersen_hash
from .scalar import SCALAR_BYTES, Scalar, decode_scalar

LOGGER = logging.getLogger(__name__)

SIGNATURE_BYTES = 2 * SCALAR_BYTES

REASON_MALFORMED = "malformed_signature"
REASON_NOT_ON_CURVE = "public_key_not_on_curve"
REASON_KEY_INFINITE = "public_key_infinite"
REASON_ZERO_S = "zero_sig_s"
REASON_ZERO_E = "zero_sig_e"
REASON_R_INFINITE = "commitment_infinite"
REASON_MISMATCH = "challenge_mismatch"


def compute_challenge(
    public_key: CurvePoint, sig_s: Scalar, sig_e: Scalar, message: bytes
) -> Tuple[bool, bytes]:
    """Recompute the challenge hash for ``(public_key, sig_s, sig_e, message)``.

    Returns ``(r_is_infinite, challenge)``.
    """
    r = multi_scalar_mul([GENERATOR, public_key], [sig_s, sig_e])
    binding = pedersen_hash([r.x, public_key.x, public_key.y])
    challenge = blake2s(to_be_bytes(binding) + bytes(message))
    return r.is_infinite, challenge


def verify_signature(public_key: CurvePoint, signature: bytes, message: bytes) -> bool:
    """Return whether ``signature`` authenticates ``message`` under ``public_key``."""
    signature = bytes(signature)
    if len(signature) != SIGNATURE_BYTES:
        LOGGER.debug("rejecting signature of length %d", len(signature))
        return False

    if not public_key.is_on_curve() or public_key.is_infinite:
        LOGGER.debug("rejecting public key that is not a finite curve point")
        return False

    sig_s = decode_scalar(signature, 0)
    sig_e = decode_scalar(signature, SCALAR_BYTES)
    if sig_s.is_zero() or sig_e.is_zero():
        LOGGER.debug("rejecting signature with a zero scalar")
        return False

    r_is_infinite, challenge = compute_challenge(public_key, sig_s, sig_e, message)
    challenge_ok = hmac.compare_digest(challenge, signature[SCALAR_BYTES:])
    return not r_is_infinite and challenge_ok


def assert_valid_signature(public_key: CurvePoint, signature: bytes, message: bytes) -> None:
    """Raise :class:`InvalidSignatureError` unless the signature is valid."""
    signature = bytes(signature)
    if len(signature) != SIGNATURE_BYTES:
        raise InvalidSignatureError(
            REASON_MALFORMED, f"signature must be {SIGNATURE_BYTES} bytes, got {len(signature)}"
        )
    if not public_key.is_on_curve():
        raise InvalidSignatureError(REASON_NOT_ON_CURVE, "public key is not on the curve")
    if public_key.is_infinite:
        raise InvalidSignatureError(REASON_KEY_INFINITE, "public key is the point at infinity")

    sig_s = decode_scalar(signature, 0)
    if sig_s.is_zero():
        raise InvalidSignatureError(REASON_ZERO_S, "signature response scalar is zero")
    sig_e = decode_scalar(signature, SCALAR_BYTES)
    if sig_e.is_zero():
        raise InvalidSignatureError(REASON_ZERO_E, "signature challenge scalar is zero")

    r_is_infinite, challenge = compute_challenge(public_key, sig_s, sig_e, message)
    if r_is_infinite:
        raise InvalidSignatureError(REASON_R_INFINITE, "commitment point is at infinity")

    expected = signature[SCALAR_BYTES:]
    for index, (got, want) in enumerate(zip(challenge, expected)):
        if got != want:
            raise InvalidSignatureError(
                REASON_MISMATCH,
                f"challenge byte {index} does not match",
                byte_index=index,
            )


__all__ = [
    "SIGNATURE_BYTES",
    "compute_challenge",
    "verify_signature",
    "assert_valid_signature",
]
