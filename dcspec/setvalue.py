"""Assignment of a value to a variable, with an operator and optional bounds."""

from __future__ import annotations

import enum

from dcspec.values import Value, ValueKind
from dcspec.variables import Variable, VariableRegistry, default_registry

__all__ = ["SetOperator", "SetValue"]


class SetOperator(enum.Enum):
    """How the new value is combined with the variable's current one."""

    EQUALS = "="
    PLUS_EQUALS = "+="
    MINUS_EQUALS = "-="


class SetValue:
    """Sets a variable to, or adjusts it by, a value, then clamps it to a range.

    If either the variable or the value is not given, or the variable is not
    registered, the assignment is unbound: ``variable`` is None.
    """

    def __init__(
        self,
        registry: VariableRegistry | None,
        var_spec: str | None,
        val_spec: str | None,
    ) -> None:
        self.registry = registry if registry is not None else default_registry
        self.operator = SetOperator.EQUALS
        self.variable: Variable | None = None
        self.value: Value | None = None
        self.minimum: Value | None = None
        self.maximum: Value | None = None

        if var_spec is None or val_spec is None:
            return
        self.variable = self.registry.get(var_spec)
        if self.variable is None:
            return
        self.value = self.registry.get_value(val_spec)

    def __repr__(self) -> str:
        return (
            f"SetValue({self.variable!r} {self.operator.value} {self.value!r}, "
            f"min={self.minimum!r}, max={self.maximum!r})"
        )

    def set_operator(self, spec: str | None) -> None:
        """Select ``+=`` or ``-=``; anything else leaves the operator unchanged."""
        if not spec:
            return
        if spec == SetOperator.PLUS_EQUALS.value:
            self.operator = SetOperator.PLUS_EQUALS
        elif spec == SetOperator.MINUS_EQUALS.value:
            self.operator = SetOperator.MINUS_EQUALS

    def set_range(self, minimum: str | None, maximum: str | None) -> None:
        """Set the lower and upper bounds; empty specs leave a bound unset."""
        if minimum:
            self.minimum = self.registry.get_value(minimum)
        if maximum:
            self.maximum = self.registry.get_value(maximum)

    def calculate(self, target: Variable) -> None:
        """Apply the operator and bounds to ``target``."""
        if self.value is None:
            raise ValueError("Assignment has no value to apply")
        if self.operator is SetOperator.PLUS_EQUALS:
            target.increment_by(self.value)
        elif self.operator is SetOperator.MINUS_EQUALS:
            target.decrement_by(self.value)
        else:
            target.set_to_value(self.value)
        if self.minimum is not None:
            target.apply_minimum(self.minimum)
        if self.maximum is not None:
            target.apply_maximum(self.maximum)

    def _bound_variable(self) -> Variable:
        if self.variable is None:
            raise ValueError("Assignment is not bound to a variable")
        return self.variable

    def update_data(self) -> None:
        """Perform the assignment on the bound variable."""
        self.calculate(self._bound_variable())

    def end_value(self) -> float:
        """The decimal the variable would reach, leaving the variable unchanged."""
        variable = self._bound_variable()
        end = Variable(ValueKind.DECIMAL)
        end.set_to_decimal(variable.get_decimal())
        self.calculate(end)
        return end.get_decimal()