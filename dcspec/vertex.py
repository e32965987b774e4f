"""A polygon or line vertex positioned inside its container."""

from __future__ import annotations

import enum

from dcspec.values import Constant, Value
from dcspec.variables import VariableRegistry, default_registry

__all__ = ["HorizontalOrigin", "VerticalOrigin", "Vertex"]


class HorizontalOrigin(enum.Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalOrigin(enum.Enum):
    BOTTOM = "bottom"
    MIDDLE = "middle"
    TOP = "top"


def _as_value(size: Value | float) -> Value:
    return size if isinstance(size, Value) else Constant(str(size))


class Vertex:
    """A point whose coordinates are measured from a chosen container edge."""

    def __init__(
        self,
        registry: VariableRegistry | None = None,
        container_width: Value | float = 0.0,
        container_height: Value | float = 0.0,
    ) -> None:
        self.registry = registry if registry is not None else default_registry
        self.container_width = _as_value(container_width)
        self.container_height = _as_value(container_height)
        self.x: Value | None = None
        self.y: Value | None = None
        self.origin_x = HorizontalOrigin.LEFT
        self.origin_y = VerticalOrigin.BOTTOM

    def __repr__(self) -> str:
        return f"Vertex{self.position()}"

    def set_position(self, x: str | None, y: str | None) -> None:
        """Set the coordinates; empty specs leave a coordinate unchanged."""
        if x:
            self.x = self.registry.get_value(x)
        if y:
            self.y = self.registry.get_value(y)

    def set_origin(self, x: str | None, y: str | None) -> None:
        """Choose the reference edges by name, ignoring case; unknown names are ignored."""
        if x:
            try:
                self.origin_x = HorizontalOrigin(x.lower())
            except ValueError:
                pass
        if y:
            try:
                self.origin_y = VerticalOrigin(y.lower())
            except ValueError:
                pass

    def position(self) -> tuple[float, float]:
        """The point in container coordinates."""
        if self.x is None:
            x = 0.0
        elif self.origin_x is HorizontalOrigin.RIGHT:
            x = self.container_width.get_decimal() - self.x.get_decimal()
        else:
            x = self.x.get_decimal()

        if self.y is None:
            y = 0.0
        elif self.origin_y is VerticalOrigin.TOP:
            y = self.container_height.get_decimal() - self.y.get_decimal()
        else:
            y = self.y.get_decimal()
        return (x, y)