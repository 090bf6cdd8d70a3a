"""Disk-to-screen renderer turning hyperbolic geodesics into screen arcs."""

from __future__ import annotations

import math
from typing import Any, Optional, Sequence

from .affine import AffineTransform, ScreenXY
from .complex import ZERO, Complex
from .config import RenderConfig, get_render_config
from .mobius import IDENTITY, MobiusTransform
from .surfaces.base import Surface

SEGMENT_IDEAL = "ideal"
SEGMENT_LINE = "line"
SEGMENT_ARC = "arc"


def classify_segment(a: Complex, b: Complex, config: Optional[RenderConfig] = None) -> str:
    """Decide how the geodesic from ``a`` to ``b`` (disk coordinates) is drawn.

    Returns ``"ideal"`` when both ends sit on the boundary circle, ``"line"``
    when the geodesic passes (numerically) through the origin, else ``"arc"``.
    """

    cfg = config or get_render_config()
    if a.magnitude_squared() > cfg.ideal_boundary_magsq and b.magnitude_squared() > cfg.ideal_boundary_magsq:
        return SEGMENT_IDEAL
    det = b.a * a.b - a.a * b.b
    if abs(det) < cfg.collinear_epsilon:
        return SEGMENT_LINE
    return SEGMENT_ARC


def orthogonal_circle_center(a: Complex, b: Complex) -> Complex:
    """Center of the circle through ``a`` and ``b`` that meets the unit circle at right angles.

    With ``|c|^2 = 1 + r^2`` and ``|c - a| = |c - b| = r`` the center satisfies
    ``2 <a, c> = 1 + |a|^2`` and ``2 <b, c> = 1 + |b|^2``; solved by Cramer's rule.
    """

    det = b.a * a.b - a.a * b.b
    g = (1.0 + b.magnitude_squared()) / 2.0
    h = (1.0 + a.magnitude_squared()) / 2.0
    return Complex((g * a.b - b.b * h) / det, (b.a * h - a.a * g) / det)


class DiskRenderingContext:
    """Immediate-mode path API over disk points, projected onto a :class:`Surface`.

    Points passed to :meth:`move_to` / :meth:`line_to` are mapped through
    ``view`` first, then through the disk-to-screen projection.
    """

    def __init__(
        self,
        surface: Surface,
        view: MobiusTransform = IDENTITY,
        config: Optional[RenderConfig] = None,
    ) -> None:
        self.config = config or get_render_config()
        self.surface = surface
        width = surface.width or self.config.default_size
        height = surface.height or self.config.default_size
        self.width = width
        self.height = height
        self.x_offset = width / 2.0
        self.y_offset = height / 2.0
        self.scale = min(self.x_offset, self.y_offset)
        self.projection = AffineTransform.disk_to_screen(width, height)
        self.view = view
        self.first_path_point = self.viewed(ZERO)
        self.last_path_point = self.first_path_point

    @property
    def stroke_style(self) -> str:
        return self.surface.stroke_style

    @stroke_style.setter
    def stroke_style(self, value: str) -> None:
        self.surface.stroke_style = value

    @property
    def fill_style(self) -> str:
        return self.surface.fill_style

    @fill_style.setter
    def fill_style(self, value: str) -> None:
        self.surface.fill_style = value

    def viewed(self, p: Complex) -> Complex:
        return self.view.xform(p)

    def to_screen(self, p: Complex) -> ScreenXY:
        return self.projection.to_screen(p)

    def from_screen(self, xy: ScreenXY) -> Complex:
        return self.projection.from_screen(xy)

    def clear(self) -> None:
        """Clear the surface and paint the disk as background."""

        s = self.surface
        s.clear_rect(0, 0, self.width, self.height)
        s.stroke_style = self.config.background_stroke
        s.fill_style = self.config.background_fill
        s.begin_path()
        s.arc(self.x_offset, self.y_offset, self.scale, 0.0, 2.0 * math.pi, False)
        s.close_path()
        s.stroke()
        s.fill()
        s.fill_style = self.config.default_fill

    def draw_image(self, p: Complex, image: Any) -> None:
        """Place a fixed-size marker centered on disk point ``p``."""

        if image is None:
            return
        size = self.config.marker_size
        sp = self.to_screen(self.viewed(p))
        self.surface.draw_image(image, sp.x - size / 2.0, sp.y - size / 2.0, size, size)

    def begin_path(self) -> None:
        self.surface.begin_path()
        self.first_path_point = self.last_path_point

    def move_to(self, p: Complex) -> None:
        xp = self.viewed(p)
        sp = self.to_screen(xp)
        self.surface.move_to(sp.x, sp.y)
        self.first_path_point = xp
        self.last_path_point = xp

    def line_to(self, p: Complex) -> str:
        """Extend the path along the geodesic to ``p``; returns the segment kind drawn."""

        return self._segment_to(self.viewed(p))

    def close_path(self) -> None:
        self._segment_to(self.first_path_point)
        self.surface.close_path()

    def _segment_to(self, b: Complex) -> str:
        a = self.last_path_point
        self.last_path_point = b
        kind = classify_segment(a, b, self.config)
        if kind == SEGMENT_IDEAL:
            self._draw_ideal_arc(a, b)
        elif kind == SEGMENT_LINE:
            self._draw_screen_line(b)
        else:
            self._draw_screen_arc(orthogonal_circle_center(a, b), a, b)
        return kind

    def stroke(self) -> None:
        self.surface.stroke()

    def fill(self) -> None:
        self.surface.fill()

    def _draw_screen_line(self, b: Complex) -> None:
        sb = self.to_screen(b)
        self.surface.line_to(sb.x, sb.y)

    def _draw_screen_arc(self, center: Complex, p1: Complex, p2: Complex) -> None:
        v1 = p1.sub(center)
        v2 = p2.sub(center)
        cross = v1.a * v2.b - v1.b * v2.a
        counterclockwise = cross > 0
        radius = v1.magnitude() * self.scale
        sc = self.to_screen(center)
        # disk angles grow counterclockwise, screen angles grow clockwise
        start = -math.atan2(v1.b, v1.a)
        end = -math.atan2(v2.b, v2.a)
        self.surface.arc(sc.x, sc.y, radius, start, end, counterclockwise)

    def _draw_ideal_arc(self, p1: Complex, p2: Complex) -> None:
        sc = self.to_screen(ZERO)
        start = -math.atan2(p1.b, p1.a)
        end = -math.atan2(p2.b, p2.a)
        self.surface.arc(sc.x, sc.y, self.scale, start, end, True)


class Drawer:
    """Drawing capability handed to anchor callbacks.

    Points are given in the drawer's frame; ``frame`` maps them into the
    rendering context's view-relative coordinates.
    """

    def __init__(self, context: DiskRenderingContext, frame: MobiusTransform = IDENTITY) -> None:
        self.context = context
        self.frame = frame

    def with_frame(self, frame: MobiusTransform) -> "Drawer":
        return Drawer(self.context, self.frame.compose(frame))

    def draw_line(self, a: Complex, b: Complex, stroke_style: Optional[str] = None) -> None:
        ctx = self.context
        ctx.begin_path()
        ctx.move_to(self.frame.xform(a))
        ctx.line_to(self.frame.xform(b))
        ctx.stroke_style = stroke_style or ctx.config.default_stroke
        ctx.stroke()

    def draw_poly(
        self,
        points: Sequence[Complex],
        fill_style: Optional[str] = None,
        stroke_style: Optional[str] = None,
    ) -> None:
        if not points:
            return
        ctx = self.context
        mapped = self.frame.xform_all(points)
        ctx.begin_path()
        ctx.move_to(mapped[0])
        for p in mapped[1:]:
            ctx.line_to(p)
        ctx.line_to(mapped[0])
        if fill_style:
            ctx.fill_style = fill_style
            ctx.fill()
        if stroke_style:
            ctx.stroke_style = stroke_style
            ctx.stroke()

    def draw_image(self, point: Complex, image: Any) -> None:
        self.context.draw_image(self.frame.xform(point), image)


__all__ = [
    "DiskRenderingContext",
    "Drawer",
    "classify_segment",
    "orthogonal_circle_center",
    "SEGMENT_IDEAL",
    "SEGMENT_LINE",
    "SEGMENT_ARC",
]
