"""Value kinds, constant values and the string conversions they rely on."""

from __future__ import annotations

import enum
import math
import re

__all__ = [
    "ValueKind",
    "Comparison",
    "Value",
    "Constant",
    "string_to_decimal",
    "string_to_integer",
    "string_to_boolean",
    "check_dynamic_element",
    "format_printf",
    "number_to_string",
]


class ValueKind(enum.Enum):
    """The storage type of a value."""

    UNDEFINED = 0
    STRING = 1
    DECIMAL = 2
    INTEGER = 3


class Comparison(enum.Enum):
    """Result of comparing one value with another."""

    EQUAL = 0
    GREATER = 1
    LESS = 2


_DECIMAL_RE = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_RE = re.compile(r"\s*[+-]?\d+")
_TRUE_WORDS = frozenset({"true", "yes", "on"})

_SPEC_RE = re.compile(
    r"%(?P<flags>[-+ #0]*)(?P<width>\d+)?(?:\.(?P<prec>\d*))?"
    r"(?:hh|h|ll|l|L|q|j|z|t)?(?P<conv>[diouxXeEfFgGcs%])?"
)


def string_to_decimal(text: str, default: float = 0.0) -> float:
    """Parse the leading decimal number of ``text``, or return ``default``."""
    match = _DECIMAL_RE.match(text or "")
    if match is None:
        return default
    return float(match.group())


def string_to_integer(text: str, default: int = 0) -> int:
    """Parse the leading integer of ``text``, or return ``default``."""
    match = _INTEGER_RE.match(text or "")
    if match is None:
        return default
    return int(match.group())


def string_to_boolean(text: str) -> bool:
    """Interpret ``text`` as a flag: true/yes/on or any non-zero number."""
    word = (text or "").strip().lower()
    if word in _TRUE_WORDS:
        return True
    return string_to_decimal(word, 0.0) != 0.0


def check_dynamic_element(spec: str) -> bool:
    """Return True if ``spec`` names a variable (starts with ``@``)."""
    return bool(spec) and spec[0] == "@"


def number_to_string(value: float | int) -> str:
    """Render a number the way the display shows it without a format."""
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


def format_printf(fmt: str, value: object) -> str:
    """Format ``value`` with a printf-style ``fmt``; return "" if they do not fit."""
    count = 0

    def rewrite(match: re.Match) -> str:
        nonlocal count
        conv = match["conv"]
        if conv is None:
            return "%%" + match.group()[1:]
        if conv == "%":
            return "%%"
        count += 1
        if conv in "iu":
            conv = "d"
        prec = match["prec"]
        prec_part = "" if prec is None else "." + prec
        return f"%{match['flags']}{match['width'] or ''}{prec_part}{conv}"

    pattern = _SPEC_RE.sub(rewrite, fmt)
    try:
        return pattern % ((value,) * count)
    except (TypeError, ValueError, OverflowError):
        return ""


class Value:
    """Common interface of everything that can be read as a value."""

    is_constant = False
    is_variable = False

    def compare(self, other: Value) -> Comparison:
        return Comparison.EQUAL

    def get_decimal(self) -> float:
        return 0.0

    def get_integer(self) -> int:
        return 0

    def get_string(self, fmt: str = "", zero_trim: float = 0.0) -> str:
        return ""

    def get_boolean(self) -> bool:
        return False


class Constant(Value):
    """A fixed value given by its text."""

    is_constant = True

    def __init__(self, text: str) -> None:
        self.text = str(text)
        self.decimal = string_to_decimal(self.text)
        self.integer = string_to_integer(self.text)
        self._numeric = bool(_DECIMAL_RE.fullmatch(self.text))

    def __repr__(self) -> str:
        return f"Constant({self.text!r})"

    def compare(self, other: Value) -> Comparison:
        theirs = other.get_decimal()
        if self.decimal > theirs:
            return Comparison.GREATER
        if self.decimal < theirs:
            return Comparison.LESS
        return Comparison.EQUAL

    def get_decimal(self) -> float:
        return self.decimal

    def get_integer(self) -> int:
        return self.integer

    def get_string(self, fmt: str = "", zero_trim: float = 0.0) -> str:
        if not fmt:
            return self.text
        if self._numeric and math.isfinite(self.decimal):
            return format_printf(fmt, self.decimal)
        return format_printf(fmt, self.text)

    def get_boolean(self) -> bool:
        return string_to_boolean(self.text)