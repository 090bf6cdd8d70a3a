from .errors import (
    HypCanvasError,
    InvalidNumber,
    DivisionBySingularity,
    SingularTransform,
    InvalidTiling,
    InvalidTriangle,
    TargetTooClose,
)
from .complex import Complex, ZERO, ONE, I
from .mobius import MobiusTransform, IDENTITY
from .affine import AffineTransform, ScreenXY
from .metric import polar, distance, origin_distance
from .turtle import DiskTurtle, FrameTransition
from .fifo import Fifo
from .point_bag import PointBag
from .rendering import DiskRenderingContext, Drawer, classify_segment, orthogonal_circle_center
from .tiling import Anchor, Neighbor, WorldMap, TraversalResult, traverse
from .polygon import PolygonGeometry, triangle_side_length, regular_tiling_map
from .frame_status import FrameStatus
from .canvas import HypCanvas, pan_view
from .config import (
    RenderConfig,
    TraversalConfig,
    PanConfig,
    get_render_config,
    set_render_config,
    get_traversal_config,
    set_traversal_config,
    get_pan_config,
    set_pan_config,
)
from .surfaces import Surface, RecordingSurface, TikzSurface, MatplotlibSurface

__all__ = [
    'HypCanvasError',
    'InvalidNumber',
    'DivisionBySingularity',
    'SingularTransform',
    'InvalidTiling',
    'InvalidTriangle',
    'TargetTooClose',
    'Complex',
    'ZERO',
    'ONE',
    'I',
    'MobiusTransform',
    'IDENTITY',
    'AffineTransform',
    'ScreenXY',
    'polar',
    'distance',
    'origin_distance',
    'DiskTurtle',
    'FrameTransition',
    'Fifo',
    'PointBag',
    'DiskRenderingContext',
    'Drawer',
    'classify_segment',
    'orthogonal_circle_center',
    'Anchor',
    'Neighbor',
    'WorldMap',
    'TraversalResult',
    'traverse',
    'PolygonGeometry',
    'triangle_side_length',
    'regular_tiling_map',
    'FrameStatus',
    'HypCanvas',
    'pan_view',
    'RenderConfig',
    'TraversalConfig',
    'PanConfig',
    'get_render_config',
    'set_render_config',
    'get_traversal_config',
    'set_traversal_config',
    'get_pan_config',
    'set_pan_config',
    'Surface',
    'RecordingSurface',
    'TikzSurface',
    'MatplotlibSurface',
]
