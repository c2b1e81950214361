"""Two-limb scalars as consumed by the embedded curve multiplication."""
from __future__ import annotations

from dataclasses import dataclass

LIMB_BITS = 128
LIMB_BYTES = LIMB_BITS // 8
SCALAR_BYTES = 2 * LIMB_BYTES


@dataclass(frozen=True)
class Scalar:
    """Integer ``lo + hi * 2^128`` with each limb below ``2^128``.

    The split mirrors how the scalar is laid out inside a constraint system;
    arithmetic in this package always works on :attr:`value`.
    """

    lo: int
    hi: int

    def __post_init__(self) -> None:
        for name in ("lo", "hi"):
            limb = getattr(self, name)
            if limb < 0 or limb >> LIMB_BITS:
                raise ValueError(f"scalar limb {name} must fit in {LIMB_BITS} bits")

    @classmethod
    def from_int(cls, value: int) -> "Scalar":
        if value < 0 or value >> (2 * LIMB_BITS):
            raise ValueError("scalar must fit in 256 bits")
        return cls(lo=value & ((1 << LIMB_BITS) - 1), hi=value >> LIMB_BITS)

    @property
    def value(self) -> int:
        return self.lo + (self.hi << LIMB_BITS)

    def is_zero(self) -> bool:
        return self.lo == 0 and self.hi == 0


def decode_scalar(data: bytes, offset: int = 0) -> Scalar:
    """Decode the 32 big-endian bytes at ``offset`` into a :class:`Scalar`.

    The first 16 bytes form ``hi`` and the next 16 form ``lo``. The value is
    not checked against the curve order.
    """
    if offset < 0 or offset + SCALAR_BYTES > len(data):
        raise ValueError("offset must leave 32 bytes to decode")
    hi = int.from_bytes(data[offset : offset + LIMB_BYTES], "big")
    lo = int.from_bytes(data[offset + LIMB_BYTES : offset + SCALAR_BYTES], "big")
    return Scalar(lo=lo, hi=hi)


__all__ = ["Scalar", "decode_scalar", "SCALAR_BYTES"]
