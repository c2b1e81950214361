"""Embedded curve ``y^2 = x^3 - 17`` over the BN254 scalar field.

The curve's group order equals the BN254 base field modulus, which is what
lets a BN254 constraint system do native arithmetic on it. Points are
affine; the identity is flagged with ``is_infinite`` and carries ``(0, 0)``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from py_ecc.bn128 import field_modulus

from .field import MODULUS, inverse
from .scalar import Scalar

CURVE_B = -17
CURVE_ORDER = field_modulus


@dataclass(frozen=True)
class CurvePoint:
    x: int
    y: int
    is_infinite: bool = False

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} coordinate must be an int")
            if value < 0 or value >= MODULUS:
                raise ValueError(f"{name} coordinate is not a field element")

    @classmethod
    def infinity(cls) -> "CurvePoint":
        return cls(0, 0, True)

    def is_on_curve(self) -> bool:
        """Check the curve equation on the raw coordinates."""
        return (self.y * self.y - (self.x * self.x * self.x + CURVE_B)) % MODULUS == 0


GENERATOR = CurvePoint(
    x=1,
    y=0x0000000000000002CF135E7506A45D632D270D45F1181294833FC48D823F272C,
)

ScalarLike = Union[Scalar, int]


def point_negate(p: CurvePoint) -> CurvePoint:
    if p.is_infinite:
        return p
    return CurvePoint(p.x, (-p.y) % MODULUS)


def point_double(p: CurvePoint) -> CurvePoint:
    if p.is_infinite or p.y == 0:
        return CurvePoint.infinity()
    s = (3 * p.x * p.x * inverse(2 * p.y)) % MODULUS
    x3 = (s * s - 2 * p.x) % MODULUS
    y3 = (s * (p.x - x3) - p.y) % MODULUS
    return CurvePoint(x3, y3)


def point_add(p: CurvePoint, q: CurvePoint) -> CurvePoint:
    if p.is_infinite:
        return q
    if q.is_infinite:
        return p
    if p.x == q.x:
        if p.y == q.y:
            return point_double(p)
        return CurvePoint.infinity()
    s = ((q.y - p.y) * inverse(q.x - p.x)) % MODULUS
    x3 = (s * s - p.x - q.x) % MODULUS
    y3 = (s * (p.x - x3) - p.y) % MODULUS
    return CurvePoint(x3, y3)


def _scalar_value(k: ScalarLike) -> int:
    if isinstance(k, Scalar):
        return k.value
    if k < 0:
        raise ValueError("scalar must be non-negative")
    return k


def scalar_mul(p: CurvePoint, k: ScalarLike) -> CurvePoint:
    """Double-and-add over the full integer value of ``k``."""
    k = _scalar_value(k)
    result = CurvePoint.infinity()
    addend = p
    while k:
        if k & 1:
            result = point_add(result, addend)
        addend = point_double(addend)
        k >>= 1
    return result


def multi_scalar_mul(
    points: Sequence[CurvePoint], scalars: Sequence[ScalarLike]
) -> CurvePoint:
    """Return ``sum(scalars[i] * points[i])``."""
    if len(points) != len(scalars):
        raise ValueError("multi_scalar_mul expects as many scalars as points")
    acc = CurvePoint.infinity()
    for point, k in zip(points, scalars):
        acc = point_add(acc, scalar_mul(point, k))
    return acc


__all__ = [
    "CURVE_B",
    "CURVE_ORDER",
    "CurvePoint",
    "GENERATOR",
    "point_add",
    "point_double",
    "point_negate",
    "scalar_mul",
    "multi_scalar_mul",
]
