import math

import pytest

from src.curves.catmull_rom import CatmullRomSpline
from src.curves.curve import InvalidConfiguration, bank_angle, clamp_unit
from src.curves.factory import CURVE_TYPES, build_curve


def test_bank_angle_rolls_into_turns() -> None:
    right = bank_angle((1.0, 0.0, 0.0), (0.0, 0.0, 1.0), 45.0)
    left = bank_angle((1.0, 0.0, 0.0), (0.0, 0.0, -1.0), 45.0)

    assert right == pytest.approx(45.0 * math.tanh(1.0))
    assert left == pytest.approx(-right)


def test_bank_angle_is_bounded_and_zero_when_straight() -> None:
    assert bank_angle((1.0, 0.0, 0.0), (0.0, 0.0, 1e6), 30.0) <= 30.0
    assert bank_angle((1.0, 0.0, 0.0), (0.0, 0.0, -1e6), 30.0) >= -30.0
    assert bank_angle((1.0, 0.0, 0.0), (5.0, 0.0, 0.0), 30.0) == pytest.approx(0.0)
    assert bank_angle((0.0, 0.0, 0.0), (0.0, 0.0, 1.0), 30.0) == 0.0


def test_bank_stays_within_limit_along_curve() -> None:
    control_points = [
        (0.0, 0.0, 0.0),
        (10.0, 0.0, 2.0),
        (12.0, 0.0, 12.0),
        (0.0, 0.0, 10.0),
    ]
    spline = CatmullRomSpline(20, control_points, close_loop=True, max_bank_angle=25.0)
    banks = [point.bank for point in spline.curve_points()]

    assert all(abs(bank) <= 25.0 for bank in banks)
    assert any(abs(bank) > 1.0 for bank in banks)


def test_point_at_reports_distance_and_frame() -> None:
    spline = CatmullRomSpline(10, [(0.0, 0.0, 0.0), (4.0, 0.0, 0.0), (4.0, 0.0, 4.0)])
    point = spline.point_at(0.25)

    assert point.distance_on_curve == pytest.approx(0.25 * spline.length)
    assert point.position == pytest.approx(spline.evaluate(0.25).position)
    assert math.isclose(sum(c * c for c in point.normal), 1.0, rel_tol=1e-9)


def test_clamp_unit() -> None:
    assert clamp_unit(-1.0) == 0.0
    assert clamp_unit(0.25) == 0.25
    assert clamp_unit(3.0) == 1.0


def test_build_curve_selects_registered_kind() -> None:
    curve = build_curve("catmull_rom", [(0.0, 0.0, 0.0), (1.0, 1.0, 0.0)], 4, close_loop=True)

    assert isinstance(curve, CURVE_TYPES["catmull_rom"])
    assert curve.close_loop
    assert curve.segment_count == 2


def test_build_curve_rejects_unknown_kind() -> None:
    with pytest.raises(InvalidConfiguration):
        build_curve("bezier", [(0.0, 0.0, 0.0), (1.0, 1.0, 0.0)], 4)
