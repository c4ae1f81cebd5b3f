import numpy as np
import pytest

from src.curves.catmull_rom import CatmullRomSpline
from src.curves.sampling import (
    polyline_segments,
    sample_points,
    sample_positions,
    tessellation_array,
)

S_CURVE = [
    (0.0, 0.0, 0.0),
    (1.0, 0.0, 0.0),
    (2.0, 1.0, 0.0),
    (3.0, 1.0, 0.0),
]


def test_sample_positions_shape_and_endpoints() -> None:
    spline = CatmullRomSpline(10, S_CURVE)
    positions = sample_positions(spline, 5)

    assert isinstance(positions, np.ndarray)
    assert positions.shape == (5, 3)
    np.testing.assert_allclose(positions[0], (0.0, 0.0, 0.0), atol=1e-9)
    np.testing.assert_allclose(positions[-1], (3.0, 1.0, 0.0), atol=1e-9)


def test_sample_points_distances_are_evenly_spaced() -> None:
    spline = CatmullRomSpline(10, S_CURVE, close_loop=True)
    points = sample_points(spline, 9)

    distances = [point.distance_on_curve for point in points]
    assert distances == pytest.approx(list(np.linspace(0.0, spline.length, 9)))


def test_tessellation_array_matches_cached_points() -> None:
    spline = CatmullRomSpline(10, S_CURVE)
    array = tessellation_array(spline)

    assert array.shape == (31, 3)
    np.testing.assert_allclose(array[-1], spline.curve_points()[-1].position)


def test_polyline_segments_connect_consecutive_samples() -> None:
    spline = CatmullRomSpline(6, S_CURVE)
    segments = polyline_segments(spline)

    assert len(segments) == 18
    assert all(a[1] == b[0] for a, b in zip(segments, segments[1:]))


def test_sampling_requires_two_samples() -> None:
    spline = CatmullRomSpline(6, S_CURVE)
    with pytest.raises(ValueError):
        sample_positions(spline, 1)
