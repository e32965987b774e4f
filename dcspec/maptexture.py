"""Projections of latitude/longitude onto map texture ratios."""

from __future__ import annotations

import math

from dcspec.values import Value
from dcspec.variables import VariableRegistry, default_registry

__all__ = ["UpsProjection", "UtmProjection", "ups_unit_xy", "trajectory_angle"]


def ups_unit_xy(lat: float, lon: float) -> tuple[float, float]:
    """Polar stereographic unit coordinates of a latitude/longitude in degrees."""
    radius = 2 * math.tan(math.pi / 4 - abs(lat) * (math.pi / 2) / 180)
    angle = (-1 * lon + 90) * math.pi / 180
    return (radius * math.cos(angle), radius * math.sin(angle))


def trajectory_angle(
    previous: tuple[float, float],
    current: tuple[float, float],
    yaw: Value | None = None,
    yaw_offset: float = 0.0,
) -> float | None:
    """Heading in degrees from a yaw value, or from the move between two ratio pairs.

    Returns None when there is no yaw and the position did not change, meaning
    the previous heading stays in effect.
    """
    if yaw is not None:
        return yaw.get_decimal() + yaw_offset
    prev_h, prev_v = previous
    h, v = current
    if prev_v != v or prev_h != h:
        return math.atan2(v - prev_v, h - prev_h) * 180 / math.pi
    return None


def _all_given(*specs: str | None) -> bool:
    return all(specs)


class UpsProjection:
    """Maps positions onto a texture in a polar stereographic projection."""

    def __init__(self, registry: VariableRegistry | None = None) -> None:
        self.registry = registry if registry is not None else default_registry
        self.top_left: tuple[float, float] | None = None
        self.bottom_right: tuple[float, float] | None = None
        self.theta_factor = 1

    def set_params(
        self,
        top_left_lat: str | None,
        top_left_lon: str | None,
        bottom_right_lat: str | None,
        bottom_right_lon: str | None,
        inverse_theta: str | None = None,
    ) -> None:
        """Set the texture's corner coordinates; all four must be given."""
        if not _all_given(top_left_lat, top_left_lon, bottom_right_lat, bottom_right_lon):
            raise ValueError("UPS map texture: missing latitude/longitude values")
        get = self.registry.get_value
        self.top_left = ups_unit_xy(
            get(top_left_lat).get_decimal(), get(top_left_lon).get_decimal()
        )
        self.bottom_right = ups_unit_xy(
            get(bottom_right_lat).get_decimal(), get(bottom_right_lon).get_decimal()
        )
        if inverse_theta and get(inverse_theta).get_boolean():
            self.theta_factor = -1

    def ratios(self, lat: float, lon: float) -> tuple[float, float]:
        """Horizontal and vertical position of a point as fractions of the texture."""
        if self.top_left is None or self.bottom_right is None:
            raise ValueError("UPS map texture has no corner coordinates")
        ux, uy = ups_unit_xy(lat, self.theta_factor * lon)
        tl_x, tl_y = self.top_left
        br_x, br_y = self.bottom_right
        return ((ux - tl_x) / (br_x - tl_x), (uy - br_y) / (tl_y - br_y))


class UtmProjection:
    """Maps positions onto a texture spanning a longitude/latitude box."""

    def __init__(self, registry: VariableRegistry | None = None) -> None:
        self.registry = registry if registry is not None else default_registry
        self.lon_min: float | None = None
        self.lon_max: float | None = None
        self.lat_min: float | None = None
        self.lat_max: float | None = None

    def set_params(
        self,
        lon_min: str | None,
        lon_max: str | None,
        lat_min: str | None,
        lat_max: str | None,
    ) -> None:
        """Set the longitude and latitude bounds; all four must be given."""
        if not _all_given(lon_min, lon_max, lat_min, lat_max):
            raise ValueError("UTM map texture: missing longitude/latitude range values")
        get = self.registry.get_value
        self.lon_min = get(lon_min).get_decimal()
        self.lon_max = get(lon_max).get_decimal()
        self.lat_min = get(lat_min).get_decimal()
        self.lat_max = get(lat_max).get_decimal()

    def _require(self) -> tuple[float, float, float, float]:
        if None in (self.lon_min, self.lon_max, self.lat_min, self.lat_max):
            raise ValueError("UTM map texture has no coordinate range")
        return self.lon_min, self.lon_max, self.lat_min, self.lat_max  # type: ignore[return-value]

    def lon_to_h_ratio(self, lon: float) -> float:
        """Horizontal fraction of a longitude, allowing a range across 180 degrees."""
        lon_min, lon_max, _, _ = self._require()
        if lon_min < lon_max:
            return (lon - lon_min) / (lon_max - lon_min)
        unit_lon = lon - lon_max
        if lon < lon_min:
            unit_lon += 360
        return unit_lon / (lon_max - lon_min + 360)

    def ratios(self, lat: float, lon: float) -> tuple[float, float]:
        """Horizontal and vertical position of a point as fractions of the texture."""
        _, _, lat_min, lat_max = self._require()
        return (self.lon_to_h_ratio(lon), (lat - lat_min) / (lat_max - lat_min))