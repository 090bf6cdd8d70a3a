"""Möbius transforms restricted to isometries of the open unit disk.

Every disk automorphism can be written as

    f(z) = t * (z + b) / (conj(b) * z + 1)

with ``|b| < 1`` and ``|t| == 1``.  Transforms are stored in this ``(b, t)``
form only; the point at infinity is never represented.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .complex import ONE, ZERO, Complex
from .config import GEOMETRY_TOLERANCE
from .errors import SingularTransform


@dataclass(frozen=True)
class MobiusTransform:
    """Isometry of the Poincaré disk, ``f(z) = t*(z + b)/(conj(b)*z + 1)``.

    ``b`` is the image of the origin under the inverse map (up to rotation) and
    must lie strictly inside the unit disk.  ``t`` is a unit rotation factor;
    the constructors below keep it normalized.
    """

    b: Complex
    t: Complex

    def __post_init__(self) -> None:
        if self.b.magnitude_squared() >= 1.0:
            raise SingularTransform(f"|b| must be < 1 for a disk isometry, got b={self.b}")

    @staticmethod
    def identity() -> "MobiusTransform":
        return IDENTITY

    @staticmethod
    def rotate(theta: float) -> "MobiusTransform":
        """Rotate counterclockwise about the origin by ``theta`` radians."""

        return MobiusTransform(ZERO, Complex.unit(theta))

    @staticmethod
    def origin_to_point(p: Complex) -> "MobiusTransform":
        return MobiusTransform(p, ONE)

    @staticmethod
    def point_to_origin(p: Complex) -> "MobiusTransform":
        """Send ``p`` to the origin, keeping the ideal points in line with ``p`` fixed."""

        return MobiusTransform.origin_to_point(p.neg())

    @staticmethod
    def from_zero_one(p: Complex, q: Complex) -> "MobiusTransform":
        """Return the transform sending 0 to ``p`` (``|p| < 1``) and 1 to ideal ``q``."""

        # t*b = p and t*(1 + b)/(conj(b) + 1) = q solve to
        # t = (q - p)/(1 - conj(p)*q), b = p*conj(t)
        t = q.sub(p).div(ONE.sub(q.mul_conjugate(p))).normalize()
        b = p.mul_conjugate(t)
        return MobiusTransform(b, t)

    @staticmethod
    def to_zero_one(x: Complex, y: Complex) -> "MobiusTransform":
        """Return the transform sending ``x`` to 0 and ideal ``y`` to 1."""

        b = x.neg()
        t = y.mul_conjugate(b).add(ONE).div(y.add(b)).normalize()
        return MobiusTransform(b, t)

    @staticmethod
    def two_point(x1: Complex, y1: Complex, x2: Complex, y2: Complex) -> "MobiusTransform":
        """Return the transform sending ``x1`` to ``x2`` and ideal ``y1`` to ideal ``y2``."""

        to_std = MobiusTransform.to_zero_one(x1, y1)
        from_std = MobiusTransform.from_zero_one(x2, y2)
        return from_std.compose(to_std)

    @staticmethod
    def compose_many(xforms: Sequence["MobiusTransform"]) -> "MobiusTransform":
        """Compose ``xforms`` right to left, like ``xforms[0].compose(xforms[1])...``."""

        p = ZERO
        q = ONE
        for xf in reversed(xforms):
            p = xf.xform(p)
            q = xf.xform(q)
        return MobiusTransform.from_zero_one(p, q)

    def xform(self, z: Complex) -> Complex:
        den = z.mul_conjugate(self.b).add(ONE)
        num = self.b.add(z)
        return num.div(den).mul(self.t)

    def xform_all(self, points: Iterable[Complex]) -> List[Complex]:
        return [self.xform(p) for p in points]

    def invert(self) -> "MobiusTransform":
        """Return ``g`` with ``g.compose(self) == self.compose(g) == identity``."""

        # self sends -b to 0 and 0 to t*b, so the inverse has b' = -t*b, t' = conj(t)
        return MobiusTransform(self.b.mul(self.t).neg(), self.t.conjugate())

    def inverse_xform(self, p: Complex) -> Complex:
        """Same as ``self.invert().xform(p)`` without building the inverse."""

        q = p.mul_conjugate(self.t)
        return q.sub(self.b).div(ONE.sub(q.mul_conjugate(self.b)))

    def compose(self, other: "MobiusTransform") -> "MobiusTransform":
        """Return ``res`` such that ``res.xform(z) == self.xform(other.xform(z))``."""

        p = self.xform(other.xform(ZERO))
        q = self.xform(other.xform(ONE))
        return MobiusTransform.from_zero_one(p, q)

    def isclose(self, other: "MobiusTransform", tol: float = GEOMETRY_TOLERANCE) -> bool:
        return self.xform(ZERO).isclose(other.xform(ZERO), tol) and self.xform(ONE).isclose(
            other.xform(ONE), tol
        )


IDENTITY = MobiusTransform(ZERO, ONE)


__all__ = ["MobiusTransform", "IDENTITY"]
