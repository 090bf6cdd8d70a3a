"""Geometry of regular polygons that tile the hyperbolic plane.

A ``{sides, order}`` tiling uses regular polygons with ``sides`` edges,
``order`` of which meet at every vertex.  A *slice* is the triangle formed by
the center and two consecutive vertices: it has ``slice_angle`` at the center
and ``internal_angle / 2`` at each vertex.  Halving a slice gives a right
triangle whose legs are the apothem and half an edge.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .complex import Complex
from .errors import InvalidTiling, InvalidTriangle
from .logging_utils import apply_debug_logging
from .metric import polar
from .tiling import Anchor, DrawCallback, Neighbor, WorldMap
from .turtle import FrameTransition

logger = logging.getLogger(__name__)


def triangle_side_length(alpha: float, beta: float, gamma: float) -> float:
    """Length of the side opposite ``alpha`` in a hyperbolic triangle with the given angles.

    Hyperbolic law of cosines (K = -1):
    ``cos(alpha) = -cos(beta)cos(gamma) + sin(beta)sin(gamma)cosh(a)``.
    """

    if alpha + beta + gamma >= math.pi or alpha <= 0 or beta <= 0 or gamma <= 0:
        raise InvalidTriangle(
            f"invalid triangle angles ({alpha!r}, {beta!r}, {gamma!r}): "
            "each must be positive and the sum below pi"
        )
    cosh_a = (math.cos(alpha) + math.cos(beta) * math.cos(gamma)) / (math.sin(beta) * math.sin(gamma))
    return math.acosh(cosh_a)


@dataclass(frozen=True)
class PolygonGeometry:
    """Derived measurements of one tile of a regular ``{sides, order}`` tiling."""

    sides: int
    order: int
    internal_angle: float = field(init=False)
    slice_angle: float = field(init=False)
    external_angle: float = field(init=False)
    edge_length: float = field(init=False)
    vertex_radius: float = field(init=False)
    edge_radius: float = field(init=False)

    def __post_init__(self) -> None:
        if self.sides < 3:
            raise InvalidTiling(f"a polygon needs at least 3 sides, got {self.sides}")
        if self.order < 1:
            raise InvalidTiling(f"order must be positive, got {self.order}")
        internal = 2.0 * math.pi / self.order
        slice_angle = 2.0 * math.pi / self.sides
        # internal + slice < pi, checked in integers so {4,4}, {6,3}, {3,6} are exact
        if (self.sides - 2) * (self.order - 2) <= 4:
            raise InvalidTiling(
                f"{{{self.sides}, {self.order}}} is not hyperbolic: "
                "internal angle plus slice angle must be below pi"
            )
        half_internal = internal / 2.0
        values = {
            "internal_angle": internal,
            "slice_angle": slice_angle,
            "external_angle": math.pi - internal,
            "edge_length": triangle_side_length(slice_angle, half_internal, half_internal),
            "vertex_radius": triangle_side_length(half_internal, slice_angle, half_internal),
            "edge_radius": triangle_side_length(half_internal, slice_angle / 2.0, math.pi / 2.0),
        }
        for name, value in values.items():
            object.__setattr__(self, name, value)

    @property
    def angle_defect(self) -> float:
        """``(sides - 2)*pi`` minus the polygon's angle sum; equals its area at K = -1."""

        return (self.sides - 2) * math.pi - self.sides * self.internal_angle

    def vertices(self) -> List[Complex]:
        """Vertices of the tile centered at the origin, the first one on heading 0."""

        return [polar(self.vertex_radius, k * self.slice_angle) for k in range(self.sides)]

    def edge_midpoints(self) -> List[Complex]:
        return [polar(self.edge_radius, (k + 0.5) * self.slice_angle) for k in range(self.sides)]

    def neighbor_transition(self, edge: int) -> FrameTransition:
        """Transition from this tile's home frame to the tile across ``edge``.

        The neighbor ends up facing back across the shared edge, turned by half
        a slice so its own vertices line up with ours.
        """

        return FrameTransition(
            bearing=(edge + 0.5) * self.slice_angle,
            offset=2.0 * self.edge_radius,
            orientation=math.pi - self.slice_angle / 2.0,
        )


def regular_tiling_map(
    geometry: PolygonGeometry,
    *,
    anchor_id: str = "tile",
    fill_style: Optional[str] = "#fff",
    stroke_style: Optional[str] = "#000",
    draw: Optional[DrawCallback] = None,
) -> WorldMap:
    """Return a one-anchor world map rendering the ``{sides, order}`` tiling.

    ``draw`` overrides the default callback, which fills and outlines the tile.
    """

    vertices = geometry.vertices()

    def _draw_tile(drawer) -> None:
        drawer.draw_poly(vertices, fill_style=fill_style, stroke_style=stroke_style)

    neighbors = [
        Neighbor(anchor_id, geometry.neighbor_transition(edge)) for edge in range(geometry.sides)
    ]
    anchor = Anchor(anchor_id, neighbors, draw or _draw_tile)
    world: Dict[str, Anchor] = {anchor_id: anchor}
    logger.info(
        "Built {%d, %d} tiling map: edge=%.6f vertex_radius=%.6f edge_radius=%.6f",
        geometry.sides,
        geometry.order,
        geometry.edge_length,
        geometry.vertex_radius,
        geometry.edge_radius,
    )
    return world


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "triangle_side_length",
    "PolygonGeometry",
    "regular_tiling_map",
]
