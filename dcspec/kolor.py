"""RGBA colours whose components may be constants or variables."""

from __future__ import annotations

from dcspec.values import Constant, Value
from dcspec.variables import VariableRegistry, default_registry

__all__ = ["Kolor"]

_DEFAULTS = ("0.0", "0.0", "0.0", "1.0")


class Kolor:
    """A colour of four values; alpha defaults to fully opaque."""

    def __init__(self, registry: VariableRegistry | None = None) -> None:
        self._registry = registry if registry is not None else default_registry
        self.r: Value
        self.g: Value
        self.b: Value
        self.a: Value
        self.set(0.0, 0.0, 0.0)

    def __repr__(self) -> str:
        return f"Kolor{self.rgba()}"

    def set(self, r: float, g: float, b: float, a: float = 1.0) -> None:
        """Set all four components to fixed numbers."""
        self.r, self.g, self.b, self.a = (Constant(str(float(c))) for c in (r, g, b, a))

    def set_from_string(self, text: str) -> None:
        """Set components from whitespace-separated specs; ``@name`` reads a variable."""
        parts = text.split()[:4]
        values = [self._registry.get_value(part) for part in parts]
        values.extend(Constant(d) for d in _DEFAULTS[len(values):])
        self.r, self.g, self.b, self.a = values

    def rgba(self) -> tuple[float, float, float, float]:
        """Current component values as decimals."""
        return (
            self.r.get_decimal(),
            self.g.get_decimal(),
            self.b.get_decimal(),
            self.a.get_decimal(),
        )