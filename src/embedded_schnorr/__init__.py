"""Schnorr signature verification over the BN254 embedded curve.

Usage:
    from embedded_schnorr import CurvePoint, verify_signature

    key = CurvePoint(x=..., y=...)
    if verify_signature(key, signature, message):
        ...
"""

__version__ = "0.1.0"

from .curve import CURVE_ORDER, GENERATOR, CurvePoint, multi_scalar_mul
from .errors import EmbeddedSchnorrError, InvalidSignatureError, VectorFormatError
from .field import MODULUS as FIELD_MODULUS
from .hashes import blake2s, pedersen_commitment, pedersen_hash
from .scalar import Scalar, decode_scalar
from .schnorr import (
    SIGNATURE_BYTES,
    assert_valid_signature,
    compute_challenge,
    verify_signature,
)

__all__ = [
    "__version__",
    "CURVE_ORDER",
    "FIELD_MODULUS",
    "GENERATOR",
    "CurvePoint",
    "Scalar",
    "SIGNATURE_BYTES",
    "EmbeddedSchnorrError",
    "InvalidSignatureError",
    "VectorFormatError",
    "assert_valid_signature",
    "blake2s",
    "compute_challenge",
    "decode_scalar",
    "multi_scalar_mul",
    "pedersen_commitment",
    "pedersen_hash",
    "verify_signature",
]
