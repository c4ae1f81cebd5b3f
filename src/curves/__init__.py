"""Catmull-Rom path curves sampled by normalized arc length."""

from .catmull_rom import CatmullRomSpline
from .curve import (
    DEFAULT_MAX_BANK_ANGLE,
    Curve,
    CurveError,
    CurvePoint,
    Evaluation,
    InvalidConfiguration,
    bank_angle,
)
from .factory import CURVE_TYPES, build_curve
from .follower import CurveFollower, FollowerConfig, FollowerPose
from .path_export import export_samples
from .path_loader import (
    LoadedPath,
    PathDefinition,
    PathLoadError,
    discover_paths,
    load_curve,
    load_path,
)
from .sampling import polyline_segments, sample_points, sample_positions, tessellation_array

__all__ = [
    "CatmullRomSpline",
    "Curve",
    "CurveError",
    "CurvePoint",
    "Evaluation",
    "InvalidConfiguration",
    "DEFAULT_MAX_BANK_ANGLE",
    "bank_angle",
    "CURVE_TYPES",
    "build_curve",
    "CurveFollower",
    "FollowerConfig",
    "FollowerPose",
    "export_samples",
    "LoadedPath",
    "PathDefinition",
    "PathLoadError",
    "discover_paths",
    "load_curve",
    "load_path",
    "polyline_segments",
    "sample_points",
    "sample_positions",
    "tessellation_array",
]
