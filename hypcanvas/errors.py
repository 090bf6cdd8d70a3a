"""Exception taxonomy for the hyperbolic canvas engine."""

from __future__ import annotations


class HypCanvasError(Exception):
    """Base class for every error raised by the engine."""


class InvalidNumber(HypCanvasError, ValueError):
    """Raised when a complex component is NaN or infinite."""


class DivisionBySingularity(HypCanvasError, ZeroDivisionError):
    """Raised when dividing by (or inverting) a complex number too close to zero."""


class SingularTransform(HypCanvasError, ArithmeticError):
    """Raised when a transform has a vanishing determinant."""


class InvalidTiling(HypCanvasError, ValueError):
    """Raised for ``{sides, order}`` pairs that do not tile the hyperbolic plane."""


class InvalidTriangle(HypCanvasError, ValueError):
    """Raised for angle triples that do not form a hyperbolic triangle."""


class TargetTooClose(HypCanvasError, ValueError):
    """Raised when a turtle is asked to aim at its own position."""


__all__ = [
    "HypCanvasError",
    "InvalidNumber",
    "DivisionBySingularity",
    "SingularTransform",
    "InvalidTiling",
    "InvalidTriangle",
    "TargetTooClose",
]
