"""Shared curve types and the abstract sampling contract."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from numbers import Integral
from typing import List, NamedTuple, Sequence, Tuple

from .vector import ZERO, Vec3, cross, dot, length, normalize, to_vec3

DEFAULT_MAX_BANK_ANGLE = 45.0
UP: Vec3 = (0.0, 1.0, 0.0)


class CurveError(RuntimeError):
    """Base class for curve construction and evaluation failures."""


class InvalidConfiguration(CurveError, ValueError):
    """Raised when a curve is built from unusable parameters."""


@dataclass(frozen=True)
class CurvePoint:
    """One sample of a tessellated curve."""

    position: Vec3
    tangent: Vec3 = ZERO
    curvature: Vec3 = ZERO
    normal: Vec3 = ZERO
    bank: float = 0.0
    distance_on_curve: float = 0.0


class Evaluation(NamedTuple):
    """Position, tangent and curvature at one point of a curve."""

    position: Vec3
    tangent: Vec3
    curvature: Vec3


def bank_angle(
    tangent: Vec3,
    curvature: Vec3,
    max_bank_angle: float,
    up: Vec3 = UP,
) -> float:
    """Return the roll angle in degrees for an object moving along the curve.

    The signed curvature about ``up`` is squashed with ``tanh`` so the result
    never exceeds ``max_bank_angle`` in magnitude. Curvature jumps at the
    knots of a piecewise cubic, so curves blend these values across knots.
    """
    speed = length(tangent)
    if speed == 0:
        return 0.0
    signed_curvature = dot(cross(tangent, curvature), up) / speed**3
    return -max_bank_angle * math.tanh(signed_curvature)


class Curve(ABC):
    """A curve through control points sampled by normalized arc length."""

    def __init__(
        self,
        resolution: int,
        control_points: Sequence,
        *,
        max_bank_angle: float = DEFAULT_MAX_BANK_ANGLE,
    ) -> None:
        if isinstance(resolution, bool) or not isinstance(resolution, Integral):
            raise InvalidConfiguration("resolution must be an integer")
        if resolution < 1:
            raise InvalidConfiguration("resolution must be >= 1")
        if control_points is None or len(control_points) < 2:
            raise InvalidConfiguration("A curve requires at least two control points")
        if max_bank_angle < 0:
            raise InvalidConfiguration("max_bank_angle must not be negative")

        self.resolution = int(resolution)
        self.control_points = control_points
        self.max_bank_angle = float(max_bank_angle)
        self.length = 0.0

    @property
    @abstractmethod
    def segment_count(self) -> int:
        """Number of spans between control points."""

    @abstractmethod
    def measure_curve(self) -> None:
        """Tessellate the curve and cache its length."""

    @abstractmethod
    def curve_points(self) -> Tuple[CurvePoint, ...]:
        """Return the cached tessellation."""

    @abstractmethod
    def evaluate(self, t: float) -> Evaluation:
        """Return position, tangent and curvature at normalized distance ``t``."""

    def rebuild(self, control_points: Sequence | None = None) -> None:
        """Drop cached samples and measure again.

        Control points mutated in place are only picked up by a rebuild.
        """
        source = self.control_points if control_points is None else control_points
        if len(source) < 2:
            raise InvalidConfiguration("A curve requires at least two control points")
        # validate before touching any cached state
        self._snapshot_points(source)
        self.control_points = source
        self._clear_cache()
        self.measure_curve()

    def positions(self) -> List[Vec3]:
        return [point.position for point in self.curve_points()]

    def point_at(self, t: float) -> CurvePoint:
        """Evaluate ``t`` and derive the normal and bank angle for that sample."""
        t = clamp_unit(t)
        position, tangent, curvature = self.evaluate(t)
        return CurvePoint(
            position=position,
            tangent=tangent,
            curvature=curvature,
            normal=normalize(cross(curvature, tangent)),
            bank=self.bank_at(t),
            distance_on_curve=t * self.length,
        )

    def bank_at(self, t: float) -> float:
        """Bank angle in degrees at normalized distance ``t``."""
        _, tangent, curvature = self.evaluate(t)
        return bank_angle(tangent, curvature, self.max_bank_angle)

    def _snapshot_points(self, control_points: Sequence | None = None) -> Tuple[Vec3, ...]:
        source = self.control_points if control_points is None else control_points
        try:
            return tuple(to_vec3(point) for point in source)
        except (TypeError, ValueError) as exc:
            raise InvalidConfiguration(f"Invalid control point: {exc}") from exc

    def _clear_cache(self) -> None:
        pass


def clamp_unit(t: float) -> float:
    """Clamp a normalized distance into ``[0, 1]``."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return float(t)


__all__ = [
    "DEFAULT_MAX_BANK_ANGLE",
    "UP",
    "CurveError",
    "InvalidConfiguration",
    "CurvePoint",
    "Evaluation",
    "Curve",
    "bank_angle",
    "clamp_unit",
]
