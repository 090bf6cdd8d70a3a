from __future__ import annotations

import math
from dataclasses import dataclass

from .config import DIVISION_EPSILON, GEOMETRY_TOLERANCE
from .errors import DivisionBySingularity, InvalidNumber


@dataclass(frozen=True)
class Complex:
    """Immutable complex number ``a + b*i``.

    Equality is exact; use :meth:`isclose` for geometric comparisons.
    """

    a: float
    b: float

    def __post_init__(self) -> None:
        a = float(self.a)
        b = float(self.b)
        if not (math.isfinite(a) and math.isfinite(b)):
            raise InvalidNumber(f"non-finite component in Complex({a!r}, {b!r})")
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)

    @classmethod
    def from_complex(cls, value: complex) -> "Complex":
        return cls(value.real, value.imag)

    @staticmethod
    def unit(theta: float) -> "Complex":
        """Return ``e^(i*theta)``."""

        return Complex(math.cos(theta), math.sin(theta))

    def add(self, other: "Complex") -> "Complex":
        return Complex(self.a + other.a, self.b + other.b)

    def sub(self, other: "Complex") -> "Complex":
        return Complex(self.a - other.a, self.b - other.b)

    def mul(self, other: "Complex") -> "Complex":
        return Complex(
            self.a * other.a - self.b * other.b,
            self.a * other.b + self.b * other.a,
        )

    def mul_conjugate(self, other: "Complex") -> "Complex":
        """Return ``self * conj(other)`` without building the conjugate."""

        return Complex(
            self.a * other.a + self.b * other.b,
            self.b * other.a - self.a * other.b,
        )

    def div(self, other: "Complex") -> "Complex":
        # (a + bi)/(c + di) = ((ac + bd) + (bc - ad)i) / (c^2 + d^2)
        den = other.magnitude_squared()
        if den < DIVISION_EPSILON:
            raise DivisionBySingularity(f"division of {self} by near-zero {other}")
        inv = 1.0 / den
        return Complex(
            (self.a * other.a + self.b * other.b) * inv,
            (self.b * other.a - self.a * other.b) * inv,
        )

    def magnitude_squared(self) -> float:
        return self.a * self.a + self.b * self.b

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def argument(self) -> float:
        return math.atan2(self.b, self.a)

    def invert(self) -> "Complex":
        mag2 = self.magnitude_squared()
        if mag2 < DIVISION_EPSILON:
            raise DivisionBySingularity(f"cannot invert near-zero {self}")
        inv = 1.0 / mag2
        return Complex(self.a * inv, -self.b * inv)

    def conjugate(self) -> "Complex":
        return Complex(self.a, -self.b)

    def normalize(self) -> "Complex":
        mag2 = self.magnitude_squared()
        if mag2 < DIVISION_EPSILON:
            raise DivisionBySingularity(f"cannot normalize near-zero {self}")
        return self.scale(1.0 / math.sqrt(mag2))

    def clamp_radius(self, max_radius: float) -> "Complex":
        mag = self.magnitude()
        if mag <= max_radius:
            return self
        if mag > 0:
            return self.scale(max_radius / mag)
        return ZERO

    def neg(self) -> "Complex":
        return Complex(-self.a, -self.b)

    def scale(self, s: float) -> "Complex":
        return Complex(self.a * s, self.b * s)

    def isclose(self, other: "Complex", tol: float = GEOMETRY_TOLERANCE) -> bool:
        return abs(self.a - other.a) <= tol and abs(self.b - other.b) <= tol

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __neg__ = neg
    __abs__ = magnitude

    def __complex__(self) -> complex:
        return complex(self.a, self.b)

    def __str__(self) -> str:
        sign = " - " if self.b < 0 else " + "
        return f"[{self.a}{sign}{abs(self.b)}i]"


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
I = Complex(0.0, 1.0)


__all__ = ["Complex", "ZERO", "ONE", "I"]
