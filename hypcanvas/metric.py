"""Distances in the Poincaré disk (curvature K = -1)."""

from __future__ import annotations

import math

from .complex import ONE, Complex


def polar(r: float, radians: float) -> Complex:
    """Return the disk point at hyperbolic distance ``r`` from the origin along ``radians``."""

    # a disk radius rho is at hyperbolic distance 2*atanh(rho)
    disk_r = math.tanh(0.5 * r)
    return Complex.unit(radians).scale(disk_r)


def distance(z1: Complex, z2: Complex) -> float:
    """Hyperbolic distance between two disk points; ``inf`` for ideal points."""

    num = z1.sub(z2).magnitude()
    den = ONE.sub(z1.mul_conjugate(z2)).magnitude()
    if num == 0.0:
        return 0.0
    ratio = num / den
    if ratio >= 1.0:
        return math.inf
    return 2.0 * math.atanh(ratio)


def origin_distance(z: Complex) -> float:
    mag = z.magnitude()
    if mag >= 1.0:
        return math.inf
    return 2.0 * math.atanh(mag)


__all__ = ["polar", "distance", "origin_distance"]
