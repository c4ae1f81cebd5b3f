"""Catmull-Rom spline interpolation with arc-length parameterized sampling."""

from __future__ import annotations

from bisect import bisect_right
from typing import List, Sequence, Tuple

from .curve import (
    DEFAULT_MAX_BANK_ANGLE,
    Curve,
    CurvePoint,
    Evaluation,
    bank_angle,
    clamp_unit,
)
from .vector import Vec3, combine, cross, distance, dot, normalize, scale, sub

Segment = Tuple[Vec3, Vec3, Vec3, Vec3]


class CatmullRomSpline(Curve):
    """Curve passing through every control point with automatic tangents.

    The spline is tessellated once on construction into ``resolution``
    samples per segment. Queries go through the cached cumulative distances,
    so ``evaluate(0.5)`` lands halfway along the path rather than halfway
    through the segment list.
    """

    def __init__(
        self,
        resolution: int,
        control_points: Sequence,
        close_loop: bool = False,
        *,
        max_bank_angle: float = DEFAULT_MAX_BANK_ANGLE,
    ) -> None:
        super().__init__(resolution, control_points, max_bank_angle=max_bank_angle)
        self.close_loop = bool(close_loop)
        self._points: Tuple[Vec3, ...] = ()
        self._curve_points: Tuple[CurvePoint, ...] | None = None
        self._control_point_distances: Tuple[float, ...] = ()
        self._knot_banks: Tuple[float, ...] = ()
        self.measure_curve()

    @property
    def segment_count(self) -> int:
        count = len(self._points) if self._points else len(self.control_points)
        return count if self.close_loop else count - 1

    @property
    def control_point_distances(self) -> Tuple[float, ...]:
        """Cumulative distance at each segment boundary, ``segment_count + 1`` values."""
        return self._control_point_distances

    def measure_curve(self) -> None:
        points = self.curve_points()
        self._control_point_distances = tuple(
            points[i].distance_on_curve for i in range(0, len(points), self.resolution)
        )
        self.length = points[-1].distance_on_curve

    def curve_points(self) -> Tuple[CurvePoint, ...]:
        if self._curve_points is not None:
            return self._curve_points

        self._points = self._snapshot_points()
        self._knot_banks = self._measure_knot_banks()
        segments = self.segment_count
        samples: List[CurvePoint] = []
        previous = CurvePoint(position=self._points[0])
        for index in range(segments):
            for step in range(self.resolution):
                previous = self._sample(index, step / self.resolution, previous)
                samples.append(previous)

        # closing sample at the end of the last segment
        samples.append(self._sample(segments - 1, 1.0, previous))
        self._curve_points = tuple(samples)
        return self._curve_points

    def evaluate(self, t: float) -> Evaluation:
        index, local_t = self._locate(t)
        return _hermite(self._segment(index), local_t)

    def bank_at(self, t: float) -> float:
        """Bank angle at ``t``, blended linearly between the knot banks.

        Each knot takes the mean of the curvature-based bank on either side of
        it, which keeps the roll continuous where the second derivative jumps.
        """
        index, local_t = self._locate(t)
        return self._blended_bank(index, local_t)

    def _locate(self, t: float) -> Tuple[int, float]:
        """Segment index and local parameter at normalized distance ``t``."""
        dists = self._control_point_distances
        target = clamp_unit(t) * self.length
        i = bisect_right(dists, target, 0, len(dists) - 1)

        span = dists[i] - dists[i - 1]
        # coincident boundaries resolve to the segment start
        local_t = (target - dists[i - 1]) / span if span > 0 else 0.0
        return i - 1, local_t

    def clamped_index(self, index: int) -> int:
        """Map a neighbour index onto the control points, wrapping when looped."""
        count = len(self._points)
        if index < 0:
            return index % count if self.close_loop else 0
        if index >= count:
            return index % count if self.close_loop else count - 1
        return index

    def _segment(self, index: int) -> Segment:
        points = self._points
        p0 = points[self.clamped_index(index)]
        p1 = points[self.clamped_index(index + 1)]
        m0 = scale(sub(p1, points[self.clamped_index(index - 1)]), 0.5)
        m1 = scale(sub(points[self.clamped_index(index + 2)], p0), 0.5)
        return p0, p1, m0, m1

    def _measure_knot_banks(self) -> Tuple[float, ...]:
        segments = self.segment_count
        entering = [self._curvature_bank(i, 0.0) for i in range(segments)]
        leaving = [self._curvature_bank(i, 1.0) for i in range(segments)]

        banks = []
        for knot in range(segments + 1):
            sides = []
            if knot > 0:
                sides.append(leaving[knot - 1])
            elif self.close_loop:
                sides.append(leaving[-1])
            if knot < segments:
                sides.append(entering[knot])
            elif self.close_loop:
                sides.append(entering[0])
            banks.append(sum(sides) / len(sides))
        return tuple(banks)

    def _curvature_bank(self, index: int, t: float) -> float:
        _, tangent, curvature = _hermite(self._segment(index), t)
        return bank_angle(tangent, curvature, self.max_bank_angle)

    def _blended_bank(self, index: int, t: float) -> float:
        start = self._knot_banks[index]
        return start + (self._knot_banks[index + 1] - start) * t

    def _sample(self, index: int, t: float, previous: CurvePoint) -> CurvePoint:
        position, tangent, curvature = _hermite(self._segment(index), t)

        # Breaks down when curvature vanishes or runs parallel to the tangent.
        normal = normalize(cross(curvature, tangent))
        if dot(normal, previous.normal) < 0:
            normal = scale(normal, -1.0)

        return CurvePoint(
            position=position,
            tangent=tangent,
            curvature=curvature,
            normal=normal,
            bank=self._blended_bank(index, t),
            distance_on_curve=previous.distance_on_curve + distance(position, previous.position),
        )

    def _clear_cache(self) -> None:
        self._points = ()
        self._curve_points = None
        self._control_point_distances = ()
        self._knot_banks = ()

    @staticmethod
    def get_curve_points(
        resolution: int,
        control_points: Sequence,
        close_loop: bool = False,
    ) -> Tuple[CurvePoint, ...]:
        return CatmullRomSpline(resolution, control_points, close_loop).curve_points()

    @staticmethod
    def get_curve_positions(
        resolution: int,
        control_points: Sequence,
        close_loop: bool = False,
    ) -> List[Vec3]:
        return CatmullRomSpline(resolution, control_points, close_loop).positions()


def hermite_position(p0: Vec3, p1: Vec3, m0: Vec3, m1: Vec3, t: float) -> Vec3:
    t2 = t * t
    t3 = t2 * t
    return combine(
        (2 * t3 - 3 * t2 + 1, p0),
        (t3 - 2 * t2 + t, m0),
        (-2 * t3 + 3 * t2, p1),
        (t3 - t2, m1),
    )


def hermite_tangent(p0: Vec3, p1: Vec3, m0: Vec3, m1: Vec3, t: float) -> Vec3:
    t2 = t * t
    return combine(
        (6 * t2 - 6 * t, p0),
        (3 * t2 - 4 * t + 1, m0),
        (-6 * t2 + 6 * t, p1),
        (3 * t2 - 2 * t, m1),
    )


def hermite_curvature(p0: Vec3, p1: Vec3, m0: Vec3, m1: Vec3, t: float) -> Vec3:
    return combine(
        (12 * t - 6, p0),
        (6 * t - 4, m0),
        (-12 * t + 6, p1),
        (6 * t - 2, m1),
    )


def _hermite(segment: Segment, t: float) -> Evaluation:
    return Evaluation(
        position=hermite_position(*segment, t),
        tangent=hermite_tangent(*segment, t),
        curvature=hermite_curvature(*segment, t),
    )


__all__ = [
    "CatmullRomSpline",
    "hermite_position",
    "hermite_tangent",
    "hermite_curvature",
]
