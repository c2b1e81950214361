"""Deterministic generator derivation by hashing to the embedded curve.

Derivation follows the barretenberg/Noir convention so that Pedersen hashes
computed here agree with circuits built on that stack.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Tuple

from blake3 import blake3

from .curve import CURVE_B, CurvePoint
from .field import MODULUS, sqrt

LOGGER = logging.getLogger(__name__)

DEFAULT_DOMAIN_SEPARATOR = b"DEFAULT_DOMAIN_SEPARATOR"
LENGTH_DOMAIN_SEPARATOR = b"pedersen_hash_length"

_INDEX_BLOCK_BYTES = 32
_MAX_ATTEMPTS = 256


def hash_to_curve(seed: bytes, attempt: int = 0) -> CurvePoint:
    """Map ``seed`` to a curve point by try-and-increment."""
    while attempt < _MAX_ATTEMPTS:
        target = bytes(seed) + bytes([attempt])
        hash_hi = blake3(target + b"\x00").digest()
        hash_lo = blake3(target + b"\x01").digest()
        x = int.from_bytes(hash_hi + hash_lo, "big") % MODULUS
        y = sqrt(x * x * x + CURVE_B)
        if y is not None:
            sign_bit = hash_hi[0] > 127
            if (y & 1) != sign_bit:
                y = (-y) % MODULUS
            return CurvePoint(x, y)
        LOGGER.debug("hash_to_curve attempt %d missed the curve", attempt)
        attempt += 1
    raise RuntimeError("hash_to_curve exhausted its attempt counter")


@lru_cache(maxsize=128)
def _derive(separator: bytes, count: int, starting_index: int) -> Tuple[CurvePoint, ...]:
    domain_hash = blake3(separator).digest()
    points = []
    for index in range(starting_index, starting_index + count):
        block = index.to_bytes(4, "big").ljust(_INDEX_BLOCK_BYTES, b"\x00")
        points.append(hash_to_curve(domain_hash + block))
    LOGGER.debug(
        "derived %d generators for %r starting at %d", count, separator, starting_index
    )
    return tuple(points)


def derive_generators(
    domain_separator: bytes, count: int, starting_index: int = 0
) -> Tuple[CurvePoint, ...]:
    if count < 0:
        raise ValueError("count must be non-negative")
    if starting_index < 0 or starting_index + count > 1 << 32:
        raise ValueError("generator index must fit in 32 bits")
    return _derive(bytes(domain_separator), count, starting_index)


__all__ = [
    "DEFAULT_DOMAIN_SEPARATOR",
    "LENGTH_DOMAIN_SEPARATOR",
    "hash_to_curve",
    "derive_generators",
]
