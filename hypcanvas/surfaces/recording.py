from __future__ import annotations

from typing import Any, List, Tuple

Operation = Tuple[Any, ...]


class RecordingSurface:
    """Surface that records every call as an operation tuple.

    Style assignments are recorded too, as ``("stroke_style", value)`` and
    ``("fill_style", value)``, so a recording can be replayed onto another
    surface with :meth:`replay`.
    """

    def __init__(self, width: int = 500, height: int = 500) -> None:
        self.width = width
        self.height = height
        self.ops: List[Operation] = []
        self._stroke_style = "#000"
        self._fill_style = "#000"

    @property
    def stroke_style(self) -> str:
        return self._stroke_style

    @stroke_style.setter
    def stroke_style(self, value: str) -> None:
        self._stroke_style = value
        self.ops.append(("stroke_style", value))

    @property
    def fill_style(self) -> str:
        return self._fill_style

    @fill_style.setter
    def fill_style(self, value: str) -> None:
        self._fill_style = value
        self.ops.append(("fill_style", value))

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.ops.append(("clear_rect", x, y, w, h))

    def begin_path(self) -> None:
        self.ops.append(("begin_path",))

    def move_to(self, x: float, y: float) -> None:
        self.ops.append(("move_to", x, y))

    def line_to(self, x: float, y: float) -> None:
        self.ops.append(("line_to", x, y))

    def arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None:
        self.ops.append(("arc", cx, cy, radius, start_angle, end_angle, counterclockwise))

    def close_path(self) -> None:
        self.ops.append(("close_path",))

    def stroke(self) -> None:
        self.ops.append(("stroke",))

    def fill(self) -> None:
        self.ops.append(("fill",))

    def draw_image(self, image: Any, x: float, y: float, w: float, h: float) -> None:
        self.ops.append(("draw_image", image, x, y, w, h))

    def kinds(self) -> List[str]:
        return [op[0] for op in self.ops]

    def reset(self) -> None:
        self.ops.clear()

    def replay(self, surface: Any) -> None:
        for name, *args in self.ops:
            if name in ("stroke_style", "fill_style"):
                setattr(surface, name, args[0])
            else:
                getattr(surface, name)(*args)


__all__ = ["RecordingSurface", "Operation"]
