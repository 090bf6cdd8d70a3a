"""Tunable constants and configuration helpers for rendering and traversal."""

from __future__ import annotations

import copy
from dataclasses import dataclass

# Squared magnitude below which a complex divisor is treated as zero.
DIVISION_EPSILON = 1e-7

# Squared magnitude of the turtle's relative target below which aim_at refuses.
AIM_EPSILON = 1e-9

# Squared magnitude of a frame difference treated as a pure rotation by rfr.
RFR_TRANSLATION_EPSILON = 1e-6

# Absolute tolerance used by isclose() helpers on complex values and transforms.
GEOMETRY_TOLERANCE = 1e-9


@dataclass
class RenderConfig:
    """Parameters of the disk-to-screen renderer."""

    # everything with squared magnitude bigger than this is an ideal point
    ideal_boundary_magsq: float = 0.999999
    collinear_epsilon: float = 1e-5
    marker_size: float = 30.0
    background_fill: str = "#888"
    background_stroke: str = "#000"
    default_fill: str = "#000"
    default_stroke: str = "black"
    default_size: int = 500


@dataclass
class TraversalConfig:
    """Pruning radii for the tiling traversal.

    ``visibility_radius`` is a Euclidean radius in the disk; anchors whose
    viewed position lies outside it are neither drawn nor expanded.
    ``search_radius`` is a hyperbolic distance; an anchor closer than this to an
    already drawn anchor is treated as a duplicate.
    """

    visibility_radius: float = 0.95
    search_radius: float = 0.2


@dataclass
class PanConfig:
    """Pointer panning parameters."""

    radius_limit: float = 0.9


_RENDER_CONFIG = RenderConfig()
_TRAVERSAL_CONFIG = TraversalConfig()
_PAN_CONFIG = PanConfig()


def get_render_config() -> RenderConfig:
    return copy.deepcopy(_RENDER_CONFIG)


def set_render_config(config: RenderConfig) -> None:
    global _RENDER_CONFIG
    _RENDER_CONFIG = copy.deepcopy(config)


def get_traversal_config() -> TraversalConfig:
    return copy.deepcopy(_TRAVERSAL_CONFIG)


def set_traversal_config(config: TraversalConfig) -> None:
    global _TRAVERSAL_CONFIG
    _TRAVERSAL_CONFIG = copy.deepcopy(config)


def get_pan_config() -> PanConfig:
    return copy.deepcopy(_PAN_CONFIG)


def set_pan_config(config: PanConfig) -> None:
    global _PAN_CONFIG
    _PAN_CONFIG = copy.deepcopy(config)


__all__ = [
    "DIVISION_EPSILON",
    "AIM_EPSILON",
    "RFR_TRANSLATION_EPSILON",
    "GEOMETRY_TOLERANCE",
    "RenderConfig",
    "TraversalConfig",
    "PanConfig",
    "get_render_config",
    "set_render_config",
    "get_traversal_config",
    "set_traversal_config",
    "get_pan_config",
    "set_pan_config",
]
