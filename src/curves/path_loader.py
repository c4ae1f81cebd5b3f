"""Utilities for loading path definitions from JSON files."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from .curve import DEFAULT_MAX_BANK_ANGLE, Curve, CurveError
from .factory import CURVE_TYPES, build_curve
from .vector import Vec3

DEFAULT_RESOLUTION = 10


@dataclass(frozen=True)
class PathDefinition:
    """Everything needed to construct a curve."""

    control_points: Sequence[Vec3]
    kind: str = "catmull_rom"
    resolution: int = DEFAULT_RESOLUTION
    close_loop: bool = False
    max_bank_angle: float = DEFAULT_MAX_BANK_ANGLE

    def build(self) -> Curve:
        return build_curve(
            self.kind,
            list(self.control_points),
            self.resolution,
            close_loop=self.close_loop,
            max_bank_angle=self.max_bank_angle,
        )

    def with_overrides(
        self,
        *,
        resolution: int | None = None,
        close_loop: bool | None = None,
    ) -> "PathDefinition":
        changes = {}
        if resolution is not None:
            changes["resolution"] = resolution
        if close_loop is not None:
            changes["close_loop"] = close_loop
        return replace(self, **changes)


@dataclass(frozen=True)
class LoadedPath:
    """Container bundling a path definition with its source file."""

    name: str
    path: Path
    definition: PathDefinition


class PathLoadError(RuntimeError):
    """Raised when a path file cannot be parsed."""


def load_path(path: Path) -> PathDefinition:
    """Load a path definition from a JSON file."""
    try:
        raw = json.loads(path.read_text())
    except OSError as exc:  # pragma: no cover - simple file error pass-through
        raise PathLoadError(f"Failed to read path file {path!s}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise PathLoadError(f"Invalid JSON in path file {path!s}: {exc}") from exc

    try:
        if not isinstance(raw, dict):
            raise ValueError("Top-level value must be an object")
        kind = str(raw.get("kind", "catmull_rom"))
        if kind not in CURVE_TYPES:
            raise ValueError(f"Unknown curve kind '{kind}'")
        definition = PathDefinition(
            control_points=_parse_points(raw.get("control_points"), "control_points"),
            kind=kind,
            resolution=_parse_resolution(raw.get("resolution", DEFAULT_RESOLUTION)),
            close_loop=bool(raw.get("close_loop", False)),
            max_bank_angle=float(raw.get("max_bank_angle", DEFAULT_MAX_BANK_ANGLE)),
        )
        if definition.max_bank_angle < 0:
            raise ValueError("max_bank_angle must not be negative")
        return definition
    except (KeyError, TypeError, ValueError) as exc:
        raise PathLoadError(f"Malformed path data in {path!s}: {exc}") from exc


def load_curve(path: Path) -> Curve:
    """Load a path file and build its curve."""
    definition = load_path(path)
    try:
        return definition.build()
    except CurveError as exc:
        raise PathLoadError(f"Cannot build curve from {path!s}: {exc}") from exc


def discover_paths(directory: Path) -> Dict[str, LoadedPath]:
    """Return a mapping of path names to loaded definitions from a directory."""
    paths: Dict[str, LoadedPath] = {}
    if not directory.exists():
        return paths
    for file in sorted(directory.glob("*.json")):
        try:
            definition = load_path(file)
        except PathLoadError:
            continue
        name = file.stem
        paths[name] = LoadedPath(name=name, path=file, definition=definition)
    return paths


def _parse_points(raw_points: Iterable[Iterable[float]] | None, label: str) -> Sequence[Vec3]:
    if raw_points is None:
        raise ValueError(f"Missing points for {label}")
    points: List[Vec3] = []
    for point in raw_points:
        if len(point) == 2:
            points.append((float(point[0]), float(point[1]), 0.0))
        elif len(point) == 3:
            points.append((float(point[0]), float(point[1]), float(point[2])))
        else:
            raise ValueError(f"Each point in {label} must have two or three coordinates")
    if len(points) < 2:
        raise ValueError(f"{label} requires at least two points")
    return tuple(points)


def _parse_resolution(raw_value) -> int:
    if isinstance(raw_value, bool):
        raise ValueError("resolution must be an integer")
    resolution = int(raw_value)
    if resolution != raw_value:
        raise ValueError("resolution must be an integer")
    if resolution < 1:
        raise ValueError("resolution must be >= 1")
    return resolution


__all__ = [
    "DEFAULT_RESOLUTION",
    "LoadedPath",
    "PathDefinition",
    "PathLoadError",
    "discover_paths",
    "load_curve",
    "load_path",
]
