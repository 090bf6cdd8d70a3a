"""Drawing surface protocol shared by all output backends.

The protocol is the immediate-mode path subset of an HTML canvas 2D context:
pixel coordinates with ``y`` growing downwards, and arc angles measured
clockwise from +x as seen on screen.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Protocol, Tuple

TAU = 2.0 * math.pi


class Surface(Protocol):
    width: int
    height: int
    stroke_style: str
    fill_style: str

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None: ...

    def close_path(self) -> None: ...

    def stroke(self) -> None: ...

    def fill(self) -> None: ...

    def draw_image(self, image: Any, x: float, y: float, w: float, h: float) -> None: ...


def arc_sweep(start_angle: float, end_angle: float, counterclockwise: bool) -> float:
    """Signed sweep of a canvas-style arc, in screen angle units.

    Mirrors the canvas rules: a clockwise arc sweeps ``(end - start) mod 2*pi``
    and a counterclockwise one ``-((start - end) mod 2*pi)``; a difference of a
    full turn or more draws the whole circle.
    """

    if counterclockwise:
        if start_angle - end_angle >= TAU:
            return -TAU
        return -math.fmod(math.fmod(start_angle - end_angle, TAU) + TAU, TAU)
    if end_angle - start_angle >= TAU:
        return TAU
    return math.fmod(math.fmod(end_angle - start_angle, TAU) + TAU, TAU)


def arc_point(cx: float, cy: float, radius: float, angle: float) -> Tuple[float, float]:
    return cx + radius * math.cos(angle), cy + radius * math.sin(angle)


def parse_color(style: Optional[str]) -> Optional[Tuple[int, int, int]]:
    """Parse ``#rgb`` / ``#rrggbb`` into an RGB triple; ``None`` for anything else."""

    if not style or not style.startswith("#"):
        return None
    digits = style[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        return None
    try:
        return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))  # type: ignore[return-value]
    except ValueError:
        return None


__all__ = ["Surface", "TAU", "arc_sweep", "arc_point", "parse_color"]
