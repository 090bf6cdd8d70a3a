"""Host-facing controller: view state, pointer panning and redraw coalescing."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from .affine import AffineTransform, ScreenXY
from .complex import Complex
from .config import (
    PanConfig,
    RenderConfig,
    TraversalConfig,
    get_pan_config,
    get_render_config,
    get_traversal_config,
)
from .errors import HypCanvasError
from .frame_status import FrameStatus
from .metric import distance, origin_distance, polar
from .mobius import IDENTITY, MobiusTransform
from .rendering import DiskRenderingContext, Drawer
from .surfaces.base import Surface
from .tiling import DrawCallback, TraversalResult, WorldMap, traverse

logger = logging.getLogger(__name__)

Scheduler = Callable[[Callable[[], object]], object]


def pan_view(
    view: MobiusTransform,
    disk_start: Complex,
    disk_end: Complex,
    radius_limit: float = 0.9,
) -> MobiusTransform:
    """Return ``view`` dragged so that ``disk_start`` lands on ``disk_end``.

    Both points are clamped to ``radius_limit`` first.  Raises
    :class:`~hypcanvas.errors.HypCanvasError` subclasses for singular input;
    ``view`` itself is never modified.
    """

    start = disk_start.clamp_radius(radius_limit)
    end = disk_end.clamp_radius(radius_limit)
    change = MobiusTransform.origin_to_point(end).compose(MobiusTransform.point_to_origin(start))
    return change.compose(view)


class HypCanvas:
    """Turtle-graphics canvas for the hyperbolic plane (Poincaré disk, K = -1).

    The canvas owns the current view and either a list of draw functions, a
    world map, or both.  The host supplies a :class:`Surface` and optionally a
    ``scheduler`` (e.g. an animation-frame callback) used by
    :meth:`post_redraw`.
    """

    def __init__(
        self,
        size: int = 500,
        *,
        scheduler: Optional[Scheduler] = None,
        render_config: Optional[RenderConfig] = None,
        traversal_config: Optional[TraversalConfig] = None,
        pan_config: Optional[PanConfig] = None,
        frame_status: Optional[FrameStatus] = None,
    ) -> None:
        self.size = size or 500
        self.scheduler = scheduler
        self.render_config = render_config or get_render_config()
        self.traversal_config = traversal_config or get_traversal_config()
        self.pan_config = pan_config or get_pan_config()
        self.frame_status = frame_status or FrameStatus()
        self.surface: Optional[Surface] = None
        self.view: MobiusTransform = IDENTITY
        self.pending_redraw = False
        self.world: Optional[WorldMap] = None
        self.anchor_id: Optional[str] = None
        # maps the focused anchor's home frame into the frame draw functions use
        self.world_frame: MobiusTransform = IDENTITY
        self._draw_funcs: List[DrawCallback] = []
        self._touch: Optional[Tuple[int, ScreenXY]] = None
        self._projection = AffineTransform.disk_to_screen(self.size, self.size)

    @property
    def K(self) -> int:
        return -1

    @staticmethod
    def polar(r: float, radians: float) -> Complex:
        return polar(r, radians)

    @staticmethod
    def metric(z1: Complex, z2: Complex) -> float:
        return distance(z1, z2)

    @staticmethod
    def origin_metric(z: Complex) -> float:
        return origin_distance(z)

    def attach(self, surface: Surface) -> Surface:
        """Use ``surface`` for subsequent redraws and schedule one."""

        self.surface = surface
        self.post_redraw()
        return surface

    def post_redraw(self) -> None:
        """Request a redraw; at most one is pending at a time."""

        if self.pending_redraw:
            return
        self.pending_redraw = True
        if self.scheduler is not None:
            self.scheduler(self.draw)

    def clear(self) -> None:
        self._draw_funcs = []
        self.post_redraw()

    def reset(self) -> None:
        self.view = IDENTITY
        self.world_frame = IDENTITY
        self.clear()

    def add_draw_func(self, func: DrawCallback) -> None:
        self._draw_funcs.append(func)
        self.post_redraw()

    def set_map(self, world: WorldMap, anchor_id: str) -> None:
        """Render ``world`` focused on ``anchor_id`` from now on."""

        if anchor_id not in world:
            raise KeyError(f"unknown anchor {anchor_id!r}")
        self.world = world
        self.anchor_id = anchor_id
        self.view = IDENTITY
        self.world_frame = IDENTITY
        self.post_redraw()

    def xy_to_complex(self, xy: ScreenXY) -> Complex:
        return self._projection.from_screen(xy)

    def complex_to_xy(self, z: Complex) -> ScreenXY:
        return self._projection.to_screen(z)

    def screen_move(self, screen_start: ScreenXY, screen_end: ScreenXY) -> bool:
        """Pan so the disk point under ``screen_start`` moves under ``screen_end``.

        A gesture whose transform cannot be computed is discarded and the view
        left as it was.  Returns whether the view changed.
        """

        try:
            new_view = pan_view(
                self.view,
                self.xy_to_complex(screen_start),
                self.xy_to_complex(screen_end),
                self.pan_config.radius_limit,
            )
        except HypCanvasError as exc:
            logger.warning("Discarding pan gesture %s -> %s: %s", screen_start, screen_end, exc)
            return False
        self.view = new_view
        self.post_redraw()
        return True

    def mouse_move(self, client: ScreenXY, movement: ScreenXY, buttons: int) -> bool:
        if buttons == 0:
            return False
        start = ScreenXY(client.x - movement.x, client.y - movement.y)
        return self.screen_move(start, client)

    def touch_start(self, touch_id: int, client: ScreenXY) -> None:
        if self._touch is None:
            self._touch = (touch_id, client)

    def touch_move(self, touch_id: int, client: ScreenXY) -> bool:
        if self._touch is None or self._touch[0] != touch_id:
            return False
        moved = self.screen_move(self._touch[1], client)
        self._touch = (touch_id, client)
        return moved

    def touch_end(self, touch_id: int) -> None:
        if self._touch is not None and self._touch[0] == touch_id:
            self._touch = None

    def draw(self, surface: Optional[Surface] = None) -> Optional[TraversalResult]:
        """Render one full frame onto ``surface`` (or the attached one).

        With a world map set, the view is re-based onto the drawn anchor nearest
        the disk origin once the frame is complete.  Draw functions are rendered
        through ``view . world_frame^-1`` so re-basing never moves them.
        """

        target = surface if surface is not None else self.surface
        if target is None:
            self.pending_redraw = False
            return None
        result: Optional[TraversalResult] = None
        self.frame_status.start_frame()
        try:
            context = DiskRenderingContext(target, self.view, self.render_config)
            context.clear()
            drawer = Drawer(context)
            func_drawer = drawer.with_frame(self.world_frame.invert())
            for func in self._draw_funcs:
                func(func_drawer)
            if self.world is not None and self.anchor_id is not None:
                result = traverse(
                    self.world,
                    self.anchor_id,
                    self.view,
                    drawer=drawer,
                    config=self.traversal_config,
                )
        finally:
            self.frame_status.end_frame()
            self.pending_redraw = False
        if result is not None:
            if result.anchor_id != self.anchor_id:
                logger.debug("Focus moved from anchor %r to %r", self.anchor_id, result.anchor_id)
            self.world_frame = self.world_frame.compose(result.turtle.xform)
            self.view = result.view
            self.anchor_id = result.anchor_id
        return result


__all__ = ["HypCanvas", "pan_view"]
