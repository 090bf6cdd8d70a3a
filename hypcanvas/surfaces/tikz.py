"""Surface that emits a TikZ picture."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from .base import arc_point, arc_sweep, parse_color

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage{graphicx}
\usepackage{tikz}
\tikzset{
  hc/line width/.store in=\hcLW,  hc/line width=0.4pt,
  geodesic/.style={line width=\hcLW, line join=round},
  tile/.style={line width=\hcLW, line join=round},
}
\begin{document}
%s
\end{document}
"""


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def _color_option(key: str, style: Optional[str]) -> str:
    rgb = parse_color(style)
    if rgb is not None:
        red, green, blue = rgb
        return f"{key}={{rgb,255:red,{red};green,{green};blue,{blue}}}"
    if style:
        return f"{key}={style}"
    return key


class TikzSurface:
    """Accumulates canvas path calls as ``\\draw`` / ``\\fill`` commands.

    Pixel coordinates are flipped to TikZ's y-up convention and scaled by
    ``unit_cm`` centimetres per pixel.
    """

    def __init__(self, width: int = 500, height: int = 500, *, unit_cm: float = 0.02) -> None:
        self.width = width
        self.height = height
        self.unit_cm = unit_cm
        self.stroke_style = "#000"
        self.fill_style = "#000"
        self.lines: List[str] = []
        self._segments: List[str] = []
        self._current: Optional[Tuple[float, float]] = None
        self._subpath_start: Optional[Tuple[float, float]] = None

    def _coord(self, x: float, y: float) -> str:
        return f"({_format_float(x)},{_format_float(self.height - y)})"

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        if x <= 0 and y <= 0 and x + w >= self.width and y + h >= self.height:
            self.lines.clear()

    def begin_path(self) -> None:
        self._segments = []
        self._current = None
        self._subpath_start = None

    def move_to(self, x: float, y: float) -> None:
        self._segments.append(self._coord(x, y))
        self._current = (x, y)
        self._subpath_start = (x, y)

    def line_to(self, x: float, y: float) -> None:
        if self._current is None:
            self.move_to(x, y)
            return
        self._segments.append("-- " + self._coord(x, y))
        self._current = (x, y)

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
        sx, sy = arc_point(cx, cy, radius, start_angle)
        if self._current is None:
            self.move_to(sx, sy)
        else:
            self.line_to(sx, sy)
        # screen angles run clockwise; negate them for TikZ's y-up frame
        self._segments.append(
            "arc[start angle={start}, delta angle={delta}, radius={radius}]".format(
                start=_format_float(math.degrees(-start_angle)),
                delta=_format_float(math.degrees(-sweep)),
                radius=_format_float(radius),
            )
        )
        self._current = arc_point(cx, cy, radius, start_angle + sweep)

    def close_path(self) -> None:
        if self._current is None:
            return
        self._segments.append("-- cycle")
        self._current = self._subpath_start

    def _emit(self, command: str, option: str) -> None:
        if not self._segments:
            return
        self.lines.append(f"  \\{command}[{option}] {' '.join(self._segments)};")

    def stroke(self) -> None:
        self._emit("draw", "geodesic, " + _color_option("draw", self.stroke_style))

    def fill(self) -> None:
        self._emit("fill", "tile, " + _color_option("fill", self.fill_style))

    def draw_image(self, image: Any, x: float, y: float, w: float, h: float) -> None:
        center = self._coord(x + w / 2.0, y + h / 2.0)
        width = _format_float(w * self.unit_cm)
        if isinstance(image, (str, Path)):
            self.lines.append(
                f"  \\node[inner sep=0pt] at {center} {{\\includegraphics[width={width}cm]{{{image}}}}};"
            )
        else:
            self.lines.append(
                f"  \\node[draw, inner sep=0pt, minimum size={width}cm] at {center} {{}};"
            )

    def to_tikz(self) -> str:
        unit = _format_float(self.unit_cm)
        lines = [f"\\begin{{tikzpicture}}[x={unit}cm, y={unit}cm]"]
        lines.extend(self.lines)
        lines.append("\\end{tikzpicture}")
        return "\n".join(lines)

    def to_document(self) -> str:
        return standalone_tpl % self.to_tikz()

    def save(self, path: Union[str, Path]) -> Path:
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_document(), encoding="utf-8")
        return output_path


__all__ = ["TikzSurface", "standalone_tpl"]
