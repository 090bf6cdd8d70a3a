"""Surface backed by a matplotlib figure."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import PathPatch
from matplotlib.path import Path as MplPath

from .base import arc_sweep, parse_color

# arc flattening resolution, in segments per full turn
ARC_SEGMENTS_PER_TURN = 128


def _mpl_color(style: Optional[str]) -> Any:
    rgb = parse_color(style)
    if rgb is not None:
        return tuple(channel / 255.0 for channel in rgb)
    return style or "none"


class MatplotlibSurface:
    """Renders canvas path calls as ``PathPatch`` artists on a fresh figure.

    The axes span the pixel rectangle with ``y`` inverted, so the figure looks
    like the canvas would.
    """

    def __init__(self, width: int = 500, height: int = 500, *, dpi: int = 100) -> None:
        self.width = width
        self.height = height
        self.stroke_style = "#000"
        self.fill_style = "#000"
        self.figure = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.axes = self.figure.add_axes((0.0, 0.0, 1.0, 1.0))
        self._reset_axes()
        self._vertices: List[Tuple[float, float]] = []
        self._codes: List[int] = []
        self._subpath_start: Optional[Tuple[float, float]] = None

    def _reset_axes(self) -> None:
        self.axes.set_xlim(0, self.width)
        self.axes.set_ylim(self.height, 0)
        self.axes.set_aspect("equal")
        self.axes.axis("off")

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        if x <= 0 and y <= 0 and x + w >= self.width and y + h >= self.height:
            self.axes.clear()
            self._reset_axes()

    def begin_path(self) -> None:
        self._vertices = []
        self._codes = []
        self._subpath_start = None

    def move_to(self, x: float, y: float) -> None:
        self._vertices.append((x, y))
        self._codes.append(MplPath.MOVETO)
        self._subpath_start = (x, y)

    def line_to(self, x: float, y: float) -> None:
        if not self._vertices:
            self.move_to(x, y)
            return
        self._vertices.append((x, y))
        self._codes.append(MplPath.LINETO)

    def arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None:
        sweep = arc_sweep(start_angle, end_angle, counterclockwise)
        steps = max(2, int(np.ceil(abs(sweep) / (2.0 * np.pi) * ARC_SEGMENTS_PER_TURN)) + 1)
        angles = start_angle + np.linspace(0.0, sweep, steps)
        xs = cx + radius * np.cos(angles)
        ys = cy + radius * np.sin(angles)
        for x, y in zip(xs, ys):
            self.line_to(float(x), float(y))

    def close_path(self) -> None:
        if self._subpath_start is None:
            return
        self._vertices.append(self._subpath_start)
        self._codes.append(MplPath.CLOSEPOLY)

    def _current_path(self) -> Optional[MplPath]:
        if len(self._vertices) < 2:
            return None
        return MplPath(np.asarray(self._vertices, dtype=float), list(self._codes))

    def stroke(self) -> None:
        path = self._current_path()
        if path is None:
            return
        self.axes.add_patch(
            PathPatch(path, facecolor="none", edgecolor=_mpl_color(self.stroke_style), linewidth=0.8)
        )

    def fill(self) -> None:
        path = self._current_path()
        if path is None:
            return
        self.axes.add_patch(
            PathPatch(path, facecolor=_mpl_color(self.fill_style), edgecolor="none", linewidth=0.0)
        )

    def draw_image(self, image: Any, x: float, y: float, w: float, h: float) -> None:
        self.axes.imshow(np.asarray(image), extent=(x, x + w, y + h, y))
        # imshow resets limits to the image extent
        self._reset_axes()

    def save(self, path: Union[str, Path], **kwargs: Any) -> Path:
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self.figure.savefig(output_path, **kwargs)
        return output_path


__all__ = ["MatplotlibSurface", "ARC_SEGMENTS_PER_TURN"]
