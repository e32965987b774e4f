"""Typed variables and the registry that holds them by name."""

from __future__ import annotations

import logging
import math

from dcspec.values import (
    Comparison,
    Constant,
    Value,
    ValueKind,
    check_dynamic_element,
    format_printf,
    number_to_string,
    string_to_boolean,
    string_to_decimal,
    string_to_integer,
)

__all__ = [
    "Variable",
    "VariableRegistry",
    "default_registry",
    "register_variable",
    "get_variable",
    "create_virtual_variable",
    "get_value",
]

logger = logging.getLogger(__name__)

_TYPE_NAMES = {
    "Decimal": ValueKind.DECIMAL,
    "Float": ValueKind.DECIMAL,
    "Integer": ValueKind.INTEGER,
    "String": ValueKind.STRING,
}


def _truncate(value: float) -> int:
    return int(value) if math.isfinite(value) else 0


class Variable(Value):
    """A named, typed, mutable value."""

    is_variable = True

    def __init__(self, kind: ValueKind = ValueKind.UNDEFINED) -> None:
        self.kind = kind
        self.decimal = 0.0
        self.integer = 0
        self.string = ""

    def __repr__(self) -> str:
        return f"Variable({self.kind.name}, {self.get_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Variable):
            return NotImplemented
        if self.kind is ValueKind.DECIMAL:
            return self.decimal == other.decimal
        if self.kind is ValueKind.INTEGER:
            return self.integer == other.integer
        if self.kind is ValueKind.STRING:
            return self.string == other.string
        return False

    __hash__ = None  # mutable

    def set_type(self, spec: ValueKind | str) -> None:
        """Set the kind from a ValueKind or a type name such as "Integer"."""
        if isinstance(spec, ValueKind):
            self.kind = spec
            return
        kind = _TYPE_NAMES.get(spec)
        if kind is None:
            logger.warning(
                'Attempting to create variable with unknown type (%s) - assuming "String"',
                spec,
            )
            kind = ValueKind.STRING
        self.kind = kind

    def set_to_string(self, text: str) -> None:
        if self.kind is ValueKind.DECIMAL:
            self.decimal = string_to_decimal(text)
        elif self.kind is ValueKind.INTEGER:
            self.integer = string_to_integer(text)
        elif self.kind is ValueKind.STRING:
            self.string = text

    def set_to_decimal(self, value: float) -> None:
        self.decimal = float(value)

    def set_to_integer(self, value: int) -> None:
        self.integer = int(value)

    def set_to_boolean(self, flag: bool) -> None:
        if self.kind is ValueKind.DECIMAL:
            self.decimal = 1.0 if flag else 0.0
        elif self.kind is ValueKind.INTEGER:
            self.integer = 1 if flag else 0
        elif self.kind is ValueKind.STRING:
            self.string = "true" if flag else "false"

    def set_to_value(self, other: Value) -> None:
        if self.kind is ValueKind.DECIMAL:
            self.decimal = other.get_decimal()
        elif self.kind is ValueKind.INTEGER:
            self.integer = other.get_integer()
        elif self.kind is ValueKind.STRING:
            self.string = other.get_string()

    def increment_by(self, other: Value) -> None:
        if self.kind is ValueKind.DECIMAL:
            self.decimal += other.get_decimal()
        elif self.kind is ValueKind.INTEGER:
            self.integer += other.get_integer()
        elif self.kind is ValueKind.STRING:
            self.string += other.get_string()

    def decrement_by(self, other: Value) -> None:
        # Strings have no sensible decrement and are left unchanged.
        if self.kind is ValueKind.DECIMAL:
            self.decimal -= other.get_decimal()
        elif self.kind is ValueKind.INTEGER:
            self.integer -= other.get_integer()

    def apply_minimum(self, other: Value) -> None:
        if self.kind is ValueKind.DECIMAL:
            self.decimal = max(self.decimal, other.get_decimal())
        elif self.kind is ValueKind.INTEGER:
            self.integer = max(self.integer, other.get_integer())

    def apply_maximum(self, other: Value) -> None:
        if self.kind is ValueKind.DECIMAL:
            self.decimal = min(self.decimal, other.get_decimal())
        elif self.kind is ValueKind.INTEGER:
            self.integer = min(self.integer, other.get_integer())

    def compare(self, other: Value) -> Comparison:
        if self.kind is ValueKind.DECIMAL:
            mine, theirs = self.decimal, other.get_decimal()
        elif self.kind is ValueKind.INTEGER:
            mine, theirs = self.integer, other.get_integer()
        elif self.kind is ValueKind.STRING:
            mine, theirs = self.string, other.get_string()
        else:
            return Comparison.EQUAL
        if mine > theirs:
            return Comparison.GREATER
        if mine < theirs:
            return Comparison.LESS
        return Comparison.EQUAL

    def get_decimal(self) -> float:
        if self.kind is ValueKind.DECIMAL:
            return self.decimal
        if self.kind is ValueKind.INTEGER:
            return float(self.integer)
        if self.kind is ValueKind.STRING:
            return string_to_decimal(self.string)
        return 0.0

    def get_integer(self) -> int:
        if self.kind is ValueKind.DECIMAL:
            return _truncate(self.decimal)
        if self.kind is ValueKind.INTEGER:
            return self.integer
        if self.kind is ValueKind.STRING:
            return string_to_integer(self.string)
        return 0

    def get_string(self, fmt: str = "", zero_trim: float = 0.0) -> str:
        if zero_trim and abs(self.decimal) < abs(zero_trim):
            dval = 0.0
        else:
            dval = self.decimal

        if self.kind is ValueKind.DECIMAL:
            payload: object = dval
        elif self.kind is ValueKind.INTEGER:
            payload = self.integer
        elif self.kind is ValueKind.STRING:
            payload = self.string
        else:
            return ""

        if fmt:
            return format_printf(fmt, payload)
        if isinstance(payload, str):
            return payload
        return number_to_string(payload)

    def get_boolean(self) -> bool:
        if self.kind is ValueKind.DECIMAL:
            return bool(self.decimal)
        if self.kind is ValueKind.INTEGER:
            return bool(self.integer)
        if self.kind is ValueKind.STRING:
            return string_to_boolean(self.string)
        return False


class VariableRegistry:
    """Variables by label; a leading ``@`` on a label is optional."""

    def __init__(self) -> None:
        self._variables: dict[str, Variable] = {}
        self._virtual_count = 0

    def __contains__(self, label: str) -> bool:
        return self._strip(label) in self._variables

    def __len__(self) -> int:
        return len(self._variables)

    @staticmethod
    def _strip(label: str) -> str:
        return label[1:] if label.startswith("@") else label

    def register(self, name: str, type_spec: str, initial: str = "") -> Variable:
        """Create (or replace) a variable and return it."""
        if not name:
            raise ValueError("Attempting to create a variable without a name")
        if not type_spec:
            raise ValueError(
                f'Attempting to create the variable "{name}" without a specified type'
            )
        variable = Variable()
        variable.set_type(type_spec)
        variable.set_to_string(initial or "")
        self._variables[self._strip(name)] = variable
        return variable

    def get(self, label: str) -> Variable | None:
        """Look up a variable; unknown labels are logged and give None."""
        if not label:
            return None
        variable = self._variables.get(self._strip(label))
        if variable is None:
            logger.warning("Invalid variable label: %s", label)
        return variable

    def create_virtual(self, type_spec: str, initial: str = "") -> str:
        """Register an anonymous variable and return its ``@`` label."""
        name = f"@dcappVirtualVariable{self._virtual_count}"
        self.register(name, type_spec, initial)
        self._virtual_count += 1
        return name

    def get_value(self, text: str) -> Value:
        """Resolve ``text`` to a variable if it names one, else a constant."""
        if check_dynamic_element(text):
            variable = self.get(text)
            if variable is not None:
                return variable
        return Constant(text)


default_registry = VariableRegistry()


def register_variable(name: str, type_spec: str, initial: str = "") -> Variable:
    return default_registry.register(name, type_spec, initial)


def get_variable(label: str) -> Variable | None:
    return default_registry.get(label)


def create_virtual_variable(type_spec: str, initial: str = "") -> str:
    return default_registry.create_virtual(type_spec, initial)


def get_value(text: str) -> Value:
    return default_registry.get_value(text)