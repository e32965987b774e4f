import math

import pytest

from dcspec.maptexture import (
    UpsProjection,
    UtmProjection,
    trajectory_angle,
    ups_unit_xy,
)
from dcspec.values import Constant
from dcspec.variables import VariableRegistry


def test_ups_pole_maps_to_origin():
    x, y = ups_unit_xy(90, 30)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(0.0, abs=1e-12)


def test_ups_symmetric_in_hemisphere():
    assert ups_unit_xy(-60, 20) == pytest.approx(ups_unit_xy(60, 20))


def test_ups_radius_shrinks_towards_pole():
    radii = [math.hypot(*ups_unit_xy(lat, 10)) for lat in (50, 60, 70, 80)]
    assert radii == sorted(radii, reverse=True)


def test_ups_axes():
    x, y = ups_unit_xy(70, 90)
    assert x > 0
    assert y == pytest.approx(0.0, abs=1e-12)
    x, y = ups_unit_xy(70, 0)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y > 0


def test_trajectory_from_yaw():
    assert trajectory_angle((0, 0), (1, 1), Constant("30"), 5) == 35.0


def test_trajectory_unchanged_position():
    assert trajectory_angle((0.3, 0.4), (0.3, 0.4)) is None


def test_trajectory_diagonal():
    assert trajectory_angle((0, 0), (1, 1)) == pytest.approx(45.0)


def test_trajectory_reverse_differs_by_half_turn():
    forward = trajectory_angle((0, 0), (0.2, 0.1))
    backward = trajectory_angle((0.2, 0.1), (0, 0))
    assert abs(forward - backward) == pytest.approx(180)


def _ups(inverse=""):
    proj = UpsProjection(VariableRegistry())
    proj.set_params("-70", "-45", "-80", "45", inverse)
    return proj


def test_ups_corners():
    proj = _ups()
    assert proj.ratios(-70, -45) == pytest.approx((0.0, 1.0))
    assert proj.ratios(-80, 45) == pytest.approx((1.0, 0.0))


def test_ups_inverse_theta_mirrors_longitude():
    plain = _ups()
    inverted = _ups("1")
    assert inverted.theta_factor == -1
    assert inverted.ratios(-75, 10) == pytest.approx(plain.ratios(-75, -10))


def test_ups_false_inverse_keeps_theta():
    assert _ups("0").theta_factor == 1


def test_ups_missing_params():
    proj = UpsProjection(VariableRegistry())
    with pytest.raises(ValueError):
        proj.set_params("-70", "", "-80", "45", "")


def test_ups_unconfigured_ratios():
    with pytest.raises(ValueError):
        UpsProjection(VariableRegistry()).ratios(0, 0)


def test_ups_params_from_variables():
    registry = VariableRegistry()
    registry.register("@tllat", "Decimal", "-70")
    proj = UpsProjection(registry)
    proj.set_params("@tllat", "-45", "-80", "45", "")
    assert proj.ratios(-70, -45) == pytest.approx(_ups().ratios(-70, -45))


def _utm(lon_min="-100", lon_max="-80", lat_min="30", lat_max="40"):
    proj = UtmProjection(VariableRegistry())
    proj.set_params(lon_min, lon_max, lat_min, lat_max)
    return proj


def test_utm_corners_and_middle():
    proj = _utm()
    assert proj.ratios(30, -100) == pytest.approx((0.0, 0.0))
    assert proj.ratios(40, -80) == pytest.approx((1.0, 1.0))
    assert proj.ratios(35, -90) == pytest.approx((0.5, 0.5))


def test_utm_ratio_increases_with_longitude():
    proj = _utm()
    values = [proj.lon_to_h_ratio(lon) for lon in (-99, -95, -90, -81)]
    assert values == sorted(values)


def test_utm_wraparound_range():
    proj = _utm(lon_min="170", lon_max="-170")
    assert proj.lon_to_h_ratio(-170) == pytest.approx(18.0)


def test_utm_missing_params():
    with pytest.raises(ValueError):
        UtmProjection(VariableRegistry()).set_params("-100", "-80", None, "40")


def test_utm_unconfigured_ratios():
    with pytest.raises(ValueError):
        UtmProjection(VariableRegistry()).lon_to_h_ratio(0)