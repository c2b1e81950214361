"""Arithmetic in the embedded curve's base field (the BN254 scalar field)."""
from __future__ import annotations

from typing import Optional

from py_ecc.bn128 import curve_order

MODULUS = curve_order

# MODULUS - 1 = Q * 2^S with Q odd
_S = ((MODULUS - 1) & -(MODULUS - 1)).bit_length() - 1
_Q = (MODULUS - 1) >> _S


def _mod(x: int) -> int:
    return x % MODULUS


def inverse(x: int) -> int:
    x = _mod(x)
    if x == 0:
        raise ZeroDivisionError("zero has no inverse in the field")
    return pow(x, -1, MODULUS)


def is_square(x: int) -> bool:
    x = _mod(x)
    return x == 0 or pow(x, (MODULUS - 1) // 2, MODULUS) == 1


def _non_residue() -> int:
    z = 2
    while is_square(z):
        z += 1
    return z


_Z = _non_residue()


def sqrt(x: int) -> Optional[int]:
    """Tonelli-Shanks square root, or ``None`` when ``x`` is not a square.

    Which of the two roots is returned is unspecified; callers that care
    about the sign fix the parity themselves.
    """
    x = _mod(x)
    if x == 0:
        return 0
    if not is_square(x):
        return None
    m = _S
    c = pow(_Z, _Q, MODULUS)
    t = pow(x, _Q, MODULUS)
    r = pow(x, (_Q + 1) // 2, MODULUS)
    while t != 1:
        i = 0
        t2 = t
        while t2 != 1:
            t2 = (t2 * t2) % MODULUS
            i += 1
        b = pow(c, 1 << (m - i - 1), MODULUS)
        m = i
        c = (b * b) % MODULUS
        t = (t * c) % MODULUS
        r = (r * b) % MODULUS
    return r


def to_be_bytes(value: int, length: int = 32) -> bytes:
    """Serialize a field element most-significant byte first."""
    return _mod(value).to_bytes(length, "big", signed=False)


__all__ = [
    "MODULUS",
    "inverse",
    "is_square",
    "sqrt",
    "to_be_bytes",
]
