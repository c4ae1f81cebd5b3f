"""Utilities for persisting sampled curves to JSON files."""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np

from .curve import Curve
from .sampling import sample_points


def export_samples(path: Path, curve: Curve, count: int) -> None:
    """Write ``count`` arc-length spaced samples of ``curve`` to ``path``."""
    samples = []
    for t, point in zip(np.linspace(0.0, 1.0, count), sample_points(curve, count)):
        samples.append(
            {
                "t": float(t),
                "position": list(point.position),
                "tangent": list(point.tangent),
                "normal": list(point.normal),
                "bank": point.bank,
                "distance": point.distance_on_curve,
            }
        )
    raw = {
        "length": curve.length,
        "close_loop": bool(getattr(curve, "close_loop", False)),
        "resolution": curve.resolution,
        "samples": samples,
    }

    temporary = path.with_suffix(path.suffix + ".tmp")
    temporary.write_text(json.dumps(raw, indent=2))
    temporary.replace(path)


__all__ = ["export_samples"]
