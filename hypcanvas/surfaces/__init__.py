"""Drawing surfaces the disk renderer can target."""

from .base import Surface, arc_sweep
from .mpl import MatplotlibSurface
from .recording import RecordingSurface
from .tikz import TikzSurface

__all__ = [
    "Surface",
    "arc_sweep",
    "RecordingSurface",
    "TikzSurface",
    "MatplotlibSurface",
]
