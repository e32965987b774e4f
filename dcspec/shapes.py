"""Hit-testing and styling shared by polygons and rectangles."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

from dcspec.kolor import Kolor
from dcspec.values import string_to_decimal, string_to_integer
from dcspec.variables import VariableRegistry, default_registry

__all__ = [
    "ShapeStyle",
    "point_in_polygon",
    "point_in_rectangle",
    "rectangle_outline",
]

_DEG_TO_RAD = 0.01745329252
_DEFAULT_PATTERN = 0xFFFF
_HEX_RE = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


def _hex_to_integer(text: str, default: int) -> int:
    match = _HEX_RE.match(text or "")
    if match is None:
        return default
    sign, digits = match.groups()
    value = int(digits, 16)
    return -value if sign == "-" else value


def point_in_polygon(vertices: Iterable[tuple[float, float]], x: float, y: float) -> bool:
    """Ray-casting test of whether (x, y) lies inside the polygon."""
    points = list(vertices)
    if not points:
        return False
    inside = False
    previous = [points[-1], *points[:-1]]
    for (xi, yi), (xj, yj) in zip(points, previous):
        if (yi >= y) != (yj >= y) and x <= (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
    return inside


def point_in_rectangle(
    x: float,
    y: float,
    ref_x: float,
    ref_y: float,
    del_x: float,
    del_y: float,
    width: float,
    height: float,
    rotation: float,
) -> bool:
    """Whether (x, y) lies strictly inside a rectangle placed at a reference point.

    ``del_x``/``del_y`` give the offset of the reference point within the
    rectangle and ``rotation`` is in degrees about that point.
    """
    if rotation:
        ang = rotation * _DEG_TO_RAD
        origin_x = ref_x - (del_x * math.cos(-ang) + del_y * math.sin(-ang))
        origin_y = ref_y - (del_y * math.cos(-ang) - del_x * math.sin(-ang))
        tmp_x = x - origin_x
        tmp_y = y - origin_y
        final_x = tmp_x * math.cos(ang) + tmp_y * math.sin(ang)
        final_y = tmp_y * math.cos(ang) - tmp_x * math.sin(ang)
    else:
        final_x = x + del_x - ref_x
        final_y = y + del_y - ref_y
    return 0 < final_x < width and 0 < final_y < height


def rectangle_outline(width: float, height: float) -> list[tuple[float, float]]:
    """The closed outline of a rectangle anchored at its lower-left corner."""
    return [(0, 0), (0, height), (width, height), (width, 0), (0, 0)]


class ShapeStyle:
    """Fill and outline settings of a filled shape."""

    def __init__(self, registry: VariableRegistry | None = None) -> None:
        self.registry = registry if registry is not None else default_registry
        self.fill_color = Kolor(self.registry)
        self.fill_color.set(0.5, 0.5, 0.5)
        self.line_color = Kolor(self.registry)
        self.line_color.set(1, 1, 1)
        self.line_width = 1.0
        self.fill = False
        self.outline = False
        self.line_pattern = _DEFAULT_PATTERN
        self.line_factor = 1

    def __repr__(self) -> str:
        return (
            f"ShapeStyle(fill={self.fill}, outline={self.outline}, "
            f"line_width={self.line_width}, line_pattern={self.line_pattern:#06x}, "
            f"line_factor={self.line_factor})"
        )

    def set_fill_color(self, spec: str | None) -> None:
        """Set the fill colour and turn filling on."""
        if spec:
            self.fill_color.set_from_string(spec)
            self.fill = True

    def set_line_color(self, spec: str | None) -> None:
        """Set the outline colour and turn the outline on."""
        if spec:
            self.line_color.set_from_string(spec)
            self.outline = True

    def set_line_width(self, spec: str | None) -> None:
        """Set the outline width (1 if unreadable) and turn the outline on."""
        if spec:
            self.line_width = string_to_decimal(spec, 1.0)
            self.outline = True

    def set_line_pattern(self, spec: str | None) -> None:
        """Set the 16-bit stipple pattern from hexadecimal text."""
        if spec:
            self.line_pattern = _hex_to_integer(spec, _DEFAULT_PATTERN) & 0xFFFF

    def set_line_factor(self, spec: str | None) -> None:
        """Set the stipple repeat factor (1 if unreadable)."""
        if spec:
            self.line_factor = string_to_integer(spec, 1)