"""Turtle graphics on the Poincaré disk.

A :class:`DiskTurtle` is a thin mutable wrapper around a
:class:`~hypcanvas.mobius.MobiusTransform` that sends the origin and the +x
direction to the turtle's position and heading.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

from .complex import ONE, ZERO, Complex
from .config import AIM_EPSILON, RFR_TRANSLATION_EPSILON
from .errors import TargetTooClose
from .metric import origin_distance, polar
from .mobius import IDENTITY, MobiusTransform


@dataclass(frozen=True)
class FrameTransition:
    """Instructions taking one home frame to another.

    ``rotate(bearing); forward(offset); rotate(orientation)``.  Equivalent to a
    move followed by a rotation, but real-valued.
    """

    bearing: float = 0.0
    offset: float = 0.0
    orientation: float = 0.0


class DiskTurtle:
    def __init__(self, arg: Optional[Union[MobiusTransform, "DiskTurtle"]] = None) -> None:
        if arg is None:
            self.xform = IDENTITY
        elif isinstance(arg, DiskTurtle):
            self.xform = arg.xform
        elif isinstance(arg, MobiusTransform):
            self.xform = arg
        else:
            raise TypeError(f"DiskTurtle expects a MobiusTransform or DiskTurtle, got {arg!r}")

    def __repr__(self) -> str:
        return f"DiskTurtle(position={self.position()}, ideal={self.ideal_position()})"

    def copy(self) -> "DiskTurtle":
        return DiskTurtle(self)

    def home(self) -> None:
        """Send the turtle to the origin, pointing in the +x direction."""

        self.xform = IDENTITY

    def rotate(self, radians: float) -> None:
        """Rotate counterclockwise in place."""

        self.xform = self.xform.compose(MobiusTransform.rotate(radians))

    def move(self, offset: Complex) -> None:
        """Move to ``offset`` as if the turtle were at home (offset is in the turtle's frame)."""

        self.xform = self.xform.compose(MobiusTransform.origin_to_point(offset))

    def forward(self, distance: float) -> None:
        """Move forward ``distance`` in the hyperbolic metric."""

        self.move(polar(distance, 0.0))

    def apply(self, transition: FrameTransition) -> None:
        self.rotate(transition.bearing)
        self.forward(transition.offset)
        self.rotate(transition.orientation)

    def position(self) -> Complex:
        return self.xform.xform(ZERO)

    def ideal_position(self) -> Complex:
        """The ideal point hit by a ray fired straight ahead of the turtle."""

        return self.xform.xform(ONE)

    def relative_position(self, p: Complex) -> Complex:
        """Express disk point ``p`` in this turtle's frame.

        After ``t.move(t.relative_position(p))`` the turtle sits at ``p``.
        """

        return self.xform.inverse_xform(p)

    def aim_at(self, p: Complex) -> None:
        rp = self.relative_position(p)
        if rp.magnitude_squared() < AIM_EPSILON:
            raise TargetTooClose(f"point {p} is too close to the turtle at {self.position()}")
        self.rotate(math.atan2(rp.b, rp.a))

    def rfr(self, other: "DiskTurtle") -> FrameTransition:
        """Rotate-forward-rotate instructions taking this turtle onto ``other``.

        ``diff = self^-1 . other`` has the form ``(t=dt) . (b=db)``.  With
        ``q = db/|db|`` it factors as
        ``rotate(dt*q) . translate(|db|) . rotate(conj(q))``.
        """

        diff = self.xform.invert().compose(other.xform)
        dt = diff.t
        db = diff.b
        if db.magnitude_squared() < RFR_TRANSLATION_EPSILON:
            return FrameTransition(bearing=math.atan2(dt.b, dt.a), offset=0.0, orientation=0.0)
        q = db.normalize()
        t1 = dt.mul(q)
        return FrameTransition(
            bearing=math.atan2(t1.b, t1.a),
            offset=origin_distance(db),
            orientation=math.atan2(-q.b, q.a),
        )


__all__ = ["DiskTurtle", "FrameTransition"]
