"""Hash primitives used by the signature challenge."""
from __future__ import annotations

import hashlib
from typing import Sequence

from .curve import CurvePoint, multi_scalar_mul
from .field import MODULUS
from .generators import (
    DEFAULT_DOMAIN_SEPARATOR,
    LENGTH_DOMAIN_SEPARATOR,
    derive_generators,
)

DIGEST_SIZE = 32


def pedersen_commitment(inputs: Sequence[int], separator: int = 0) -> CurvePoint:
    """``sum(inputs[i] * G_i)`` over the default-domain generators."""
    generators = derive_generators(DEFAULT_DOMAIN_SEPARATOR, len(inputs), separator)
    return multi_scalar_mul(generators, [int(v) % MODULUS for v in inputs])


def pedersen_hash(inputs: Sequence[int], separator: int = 0) -> int:
    """Length-bound Pedersen hash of field elements, returned as a field element."""
    generators = derive_generators(DEFAULT_DOMAIN_SEPARATOR, len(inputs), separator)
    (length_generator,) = derive_generators(LENGTH_DOMAIN_SEPARATOR, 1)
    scalars = [int(v) % MODULUS for v in inputs] + [len(inputs)]
    point = multi_scalar_mul(list(generators) + [length_generator], scalars)
    return point.x


def blake2s(data: bytes) -> bytes:
    return hashlib.blake2s(bytes(data), digest_size=DIGEST_SIZE).digest()


__all__ = ["pedersen_commitment", "pedersen_hash", "blake2s", "DIGEST_SIZE"]
