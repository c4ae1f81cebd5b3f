"""Batch sampling helpers returning numpy arrays for drawing and movement."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from .curve import Curve, CurvePoint
from .vector import Vec3


def _sample_parameters(count: int) -> np.ndarray:
    if count < 2:
        raise ValueError("count must be >= 2")
    return np.linspace(0.0, 1.0, count)


def sample_positions(curve: Curve, count: int) -> np.ndarray:
    """Return ``count`` positions evenly spaced by arc length, shape ``(count, 3)``."""
    return np.array(
        [curve.evaluate(float(t)).position for t in _sample_parameters(count)],
        dtype=np.float64,
    )


def sample_points(curve: Curve, count: int) -> List[CurvePoint]:
    return [curve.point_at(float(t)) for t in _sample_parameters(count)]


def tessellation_array(curve: Curve) -> np.ndarray:
    """Return the cached polyline of ``curve`` as an ``(n, 3)`` array."""
    return np.array(curve.positions(), dtype=np.float64).reshape(-1, 3)


def polyline_segments(curve: Curve) -> List[Tuple[Vec3, Vec3]]:
    """Consecutive sample pairs, ready to be drawn as line segments."""
    positions = curve.positions()
    return list(zip(positions[:-1], positions[1:]))


__all__ = ["sample_positions", "sample_points", "tessellation_array", "polyline_segments"]
