"""Small 3D vector helpers operating on plain tuples."""

from __future__ import annotations

import math
from typing import Tuple

Vec3 = Tuple[float, float, float]

ZERO: Vec3 = (0.0, 0.0, 0.0)


def to_vec3(value) -> Vec3:
    """Convert a vector-like object (tuple, array, or x/y/z object) into a tuple."""
    if hasattr(value, "x") and hasattr(value, "y"):
        return float(value.x), float(value.y), float(getattr(value, "z", 0.0))
    if len(value) == 2:
        return float(value[0]), float(value[1]), 0.0
    if len(value) != 3:
        raise ValueError(f"Expected a 3-component vector, got {len(value)} components")
    return float(value[0]), float(value[1]), float(value[2])


def sub(a: Vec3, b: Vec3) -> Vec3:
    return a[0] - b[0], a[1] - b[1], a[2] - b[2]


def scale(v: Vec3, factor: float) -> Vec3:
    return v[0] * factor, v[1] * factor, v[2] * factor


def dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def length(v: Vec3) -> float:
    return math.sqrt(dot(v, v))


def distance(a: Vec3, b: Vec3) -> float:
    return length(sub(a, b))


def normalize(v: Vec3) -> Vec3:
    """Return ``v`` scaled to unit length; the zero vector stays zero."""
    norm = length(v)
    if norm == 0:
        return ZERO
    return v[0] / norm, v[1] / norm, v[2] / norm


def combine(*terms: Tuple[float, Vec3]) -> Vec3:
    """Weighted sum of vectors given as ``(weight, vector)`` pairs."""
    x = y = z = 0.0
    for weight, vec in terms:
        x += weight * vec[0]
        y += weight * vec[1]
        z += weight * vec[2]
    return x, y, z


__all__ = [
    "Vec3",
    "ZERO",
    "to_vec3",
    "sub",
    "scale",
    "dot",
    "cross",
    "length",
    "distance",
    "normalize",
    "combine",
]
