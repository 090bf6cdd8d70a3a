"""Euclidean affine transforms used for the disk-to-pixel projection."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .complex import Complex
from .errors import SingularTransform

# Determinants with smaller magnitude are treated as singular.
SINGULAR_DET_EPSILON = 1e-12


@dataclass(frozen=True)
class ScreenXY:
    """Pixel coordinates, ``y`` growing downwards."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class AffineTransform:
    """``(x, y) -> (a*x + b*y + c, d*x + e*y + f)``."""

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    @staticmethod
    def identity() -> "AffineTransform":
        return AffineTransform(1.0, 0.0, 0.0, 0.0, 1.0, 0.0)

    @staticmethod
    def translate(offset: Complex) -> "AffineTransform":
        return AffineTransform(1.0, 0.0, offset.a, 0.0, 1.0, offset.b)

    @staticmethod
    def rotate(radians: float) -> "AffineTransform":
        cos = math.cos(radians)
        sin = math.sin(radians)
        return AffineTransform(cos, -sin, 0.0, sin, cos, 0.0)

    @staticmethod
    def scale(xscale: float, yscale: float) -> "AffineTransform":
        return AffineTransform(xscale, 0.0, 0.0, 0.0, yscale, 0.0)

    @staticmethod
    def flip_x() -> "AffineTransform":
        return AffineTransform.scale(-1.0, 1.0)

    @staticmethod
    def flip_y() -> "AffineTransform":
        return AffineTransform.scale(1.0, -1.0)

    @staticmethod
    def disk_to_screen(width: float, height: float) -> "AffineTransform":
        """Fit the unit disk in a ``width`` x ``height`` surface, centered, y down."""

        x_offset = width / 2.0
        y_offset = height / 2.0
        radius = min(x_offset, y_offset)
        return AffineTransform(radius, 0.0, x_offset, 0.0, -radius, y_offset)

    @staticmethod
    def from_points(src: Sequence[Complex], dst: Sequence[Complex]) -> "AffineTransform":
        """Return the transform sending each of three ``src`` points to the matching ``dst`` point."""

        if len(src) != 3 or len(dst) != 3:
            raise ValueError("from_points needs exactly three point pairs")
        lhs = np.array([[p.a, p.b, 1.0] for p in src], dtype=float)
        if abs(float(np.linalg.det(lhs))) <= SINGULAR_DET_EPSILON:
            raise SingularTransform("source points are collinear")
        rhs = np.array([[q.a, q.b] for q in dst], dtype=float)
        coeffs = np.linalg.solve(lhs, rhs)
        a, b, c = (float(v) for v in coeffs[:, 0])
        d, e, f = (float(v) for v in coeffs[:, 1])
        return AffineTransform(a, b, c, d, e, f)

    def determinant(self) -> float:
        return self.a * self.e - self.b * self.d

    def xform(self, p: Complex) -> Complex:
        return Complex(
            self.a * p.a + self.b * p.b + self.c,
            self.d * p.a + self.e * p.b + self.f,
        )

    def to_screen(self, p: Complex) -> ScreenXY:
        q = self.xform(p)
        return ScreenXY(q.a, q.b)

    def from_screen(self, xy: ScreenXY) -> Complex:
        return self.invert().xform(Complex(xy.x, xy.y))

    def compose(self, other: "AffineTransform") -> "AffineTransform":
        """Return ``res`` with ``res.xform(p) == self.xform(other.xform(p))``."""

        return AffineTransform(
            self.a * other.a + self.b * other.d,
            self.a * other.b + self.b * other.e,
            self.a * other.c + self.b * other.f + self.c,
            self.d * other.a + self.e * other.d,
            self.d * other.b + self.e * other.e,
            self.d * other.c + self.e * other.f + self.f,
        )

    def invert(self) -> "AffineTransform":
        det = self.determinant()
        if abs(det) <= SINGULAR_DET_EPSILON:
            raise SingularTransform(f"affine transform is singular (det={det!r})")
        inv = 1.0 / det
        a = self.e * inv
        b = -self.b * inv
        d = -self.d * inv
        e = self.a * inv
        c = -(a * self.c + b * self.f)
        f = -(d * self.c + e * self.f)
        return AffineTransform(a, b, c, d, e, f)


__all__ = ["ScreenXY", "AffineTransform", "SINGULAR_DET_EPSILON"]
