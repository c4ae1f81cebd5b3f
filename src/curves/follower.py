"""Moves a point along a curve at constant speed."""

from __future__ import annotations

from dataclasses import dataclass

from .curve import Curve
from .vector import Vec3, normalize


@dataclass(frozen=True)
class FollowerConfig:
    """Parameters controlling traversal speed and wrap-around."""

    speed: float = 1.0
    loop: bool | None = None
    start_distance: float = 0.0


@dataclass(frozen=True)
class FollowerPose:
    """Where the follower is and how it should be oriented."""

    position: Vec3
    forward: Vec3
    normal: Vec3
    bank: float
    distance: float
    finished: bool


class CurveFollower:
    """Advances a travelled distance along a curve and reports the pose there.

    Looping defaults to the curve's own ``close_loop`` flag when the config
    leaves it unset.
    """

    def __init__(self, curve: Curve, config: FollowerConfig | None = None) -> None:
        self._config = config or FollowerConfig()
        if self._config.speed < 0:
            raise ValueError("speed must not be negative")
        self._curve = curve
        loop = self._config.loop
        self._loop = bool(getattr(curve, "close_loop", False)) if loop is None else loop
        self._distance = 0.0
        self._finished = False
        self.reset()

    @property
    def config(self) -> FollowerConfig:
        return self._config

    @property
    def curve(self) -> Curve:
        return self._curve

    @property
    def distance(self) -> float:
        return self._distance

    @property
    def loop(self) -> bool:
        return self._loop

    def reset(self) -> FollowerPose:
        self._distance = 0.0
        self._finished = False
        self._move_to(self._config.start_distance)
        return self.pose()

    def advance(self, dt: float) -> FollowerPose:
        if dt < 0:
            raise ValueError("dt must not be negative")
        if not self._finished:
            self._move_to(self._distance + self._config.speed * dt)
        return self.pose()

    def pose(self) -> FollowerPose:
        length = self._curve.length
        t = self._distance / length if length > 0 else 0.0
        point = self._curve.point_at(t)
        return FollowerPose(
            position=point.position,
            forward=normalize(point.tangent),
            normal=point.normal,
            bank=point.bank,
            distance=self._distance,
            finished=self._finished,
        )

    def _move_to(self, distance: float) -> None:
        length = self._curve.length
        if length <= 0:
            self._distance = 0.0
            return
        if self._loop:
            self._distance = distance % length
        elif distance >= length:
            self._distance = length
            self._finished = True
        else:
            self._distance = max(distance, 0.0)


__all__ = ["CurveFollower", "FollowerConfig", "FollowerPose"]
