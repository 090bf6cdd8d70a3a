"""World maps of self-similar anchors and the breadth-first tiling traversal.

A world map describes an unbounded periodic tiling with a finite set of
anchors.  Each anchor knows how to draw itself in its own home frame and how
to reach the home frames of its neighbors.  :func:`traverse` walks the anchor
graph outward from a focal anchor, drawing every distinct visible copy once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from .config import TraversalConfig, get_traversal_config
from .fifo import Fifo
from .logging_utils import apply_debug_logging
from .mobius import IDENTITY, MobiusTransform
from .point_bag import PointBag
from .rendering import Drawer
from .turtle import DiskTurtle, FrameTransition

logger = logging.getLogger(__name__)

DrawCallback = Callable[[Drawer], None]


@dataclass(frozen=True)
class Neighbor:
    id: str
    transition: FrameTransition


@dataclass(frozen=True)
class Anchor:
    id: str
    neighbors: Sequence[Neighbor] = ()
    draw: Optional[DrawCallback] = None


WorldMap = Mapping[str, Anchor]


@dataclass
class TraversalResult:
    """Outcome of one traversal.

    ``drawn`` lists ``(anchor_id, turtle)`` in draw order.  ``anchor_id`` and
    ``turtle`` identify the drawn anchor nearest the disk origin, and ``view``
    is the view re-based onto that anchor's home frame.
    """

    drawn: List[Tuple[str, DiskTurtle]] = field(default_factory=list)
    anchor_id: str = ""
    turtle: DiskTurtle = field(default_factory=DiskTurtle)
    view: MobiusTransform = IDENTITY
    visited: int = 0


def _lookup(world: WorldMap, anchor_id: str, source: Optional[str] = None) -> Anchor:
    try:
        return world[anchor_id]
    except KeyError:
        where = f" (neighbor of {source!r})" if source is not None else ""
        raise KeyError(f"unknown anchor {anchor_id!r}{where}") from None


def traverse(
    world: WorldMap,
    start_id: str,
    view: MobiusTransform = IDENTITY,
    *,
    drawer: Optional[Drawer] = None,
    config: Optional[TraversalConfig] = None,
) -> TraversalResult:
    """Draw every visible, distinct anchor reachable from ``start_id``.

    The start anchor is always drawn.  Any other anchor is drawn only when its
    viewed position lies within ``config.visibility_radius`` of the disk
    origin and no drawn anchor lies within ``config.search_radius``
    (hyperbolic distance) of it.  Drawn anchors enqueue their neighbors, so
    termination follows from the shrinking of positions toward the boundary.
    """

    cfg = config or get_traversal_config()
    start = _lookup(world, start_id)
    queue: Fifo[Tuple[DiskTurtle, Anchor]] = Fifo()
    queue.push((DiskTurtle(), start))
    seen: PointBag[str] = PointBag()
    result = TraversalResult(anchor_id=start_id, view=view)
    closest_magsq: Optional[float] = None
    first = True

    while queue:
        turtle, anchor = queue.shift()
        result.visited += 1
        position = turtle.position()
        viewed_magsq = view.xform(position).magnitude_squared()
        if not first:
            if viewed_magsq >= cfg.visibility_radius * cfg.visibility_radius:
                continue
            if seen.any(position, cfg.search_radius) is not None:
                continue
        first = False

        seen.push((position, anchor.id))
        result.drawn.append((anchor.id, turtle))
        if drawer is not None and anchor.draw is not None:
            anchor.draw(drawer.with_frame(turtle.xform))

        if closest_magsq is None or viewed_magsq < closest_magsq:
            closest_magsq = viewed_magsq
            result.anchor_id = anchor.id
            result.turtle = turtle

        for neighbor in anchor.neighbors:
            next_anchor = _lookup(world, neighbor.id, anchor.id)
            next_turtle = turtle.copy()
            next_turtle.apply(neighbor.transition)
            queue.push((next_turtle, next_anchor))

    result.view = view.compose(result.turtle.xform)
    logger.debug(
        "Traversal from %r drew %d of %d visited anchor(s); recentred on %r",
        start_id,
        len(result.drawn),
        result.visited,
        result.anchor_id,
    )
    return result


apply_debug_logging(globals(), logger=logger, skip={"_lookup"})


__all__ = [
    "Anchor",
    "Neighbor",
    "WorldMap",
    "DrawCallback",
    "TraversalResult",
    "traverse",
]
