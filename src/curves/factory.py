"""Selects a curve implementation by name."""

from __future__ import annotations

from typing import Any, Dict, Sequence, Type

from .catmull_rom import CatmullRomSpline
from .curve import Curve, InvalidConfiguration

CURVE_TYPES: Dict[str, Type[Curve]] = {
    "catmull_rom": CatmullRomSpline,
}


def build_curve(
    kind: str,
    control_points: Sequence,
    resolution: int,
    **options: Any,
) -> Curve:
    """Construct the curve registered under ``kind``."""
    try:
        curve_type = CURVE_TYPES[kind]
    except KeyError:
        known = ", ".join(sorted(CURVE_TYPES))
        raise InvalidConfiguration(f"Unknown curve kind '{kind}' (expected one of: {known})") from None
    return curve_type(resolution, control_points, **options)


__all__ = ["CURVE_TYPES", "build_curve"]
