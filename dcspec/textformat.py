"""Display text with embedded ``@variable`` references and printf formats."""

from __future__ import annotations

from dataclasses import dataclass

from dcspec.values import Value, format_printf
from dcspec.variables import Variable, VariableRegistry, default_registry

__all__ = ["VarString", "FormattedString", "c_format", "split_lines"]

_LINE_BREAK = "\\n"


def c_format(fmt: str, value: object) -> str:
    """Format ``value`` with a printf-style format; "" if they do not fit."""
    return format_printf(fmt, value)


def split_lines(text: str) -> list[str]:
    """Split at the two-character sequence backslash-n."""
    return text.split(_LINE_BREAK)


@dataclass
class VarString:
    """A variable shown with an optional printf format."""

    variable: Variable
    fmt: str = ""

    def get(self, zero_trim: Value | float | None = None) -> str:
        """The variable as text; magnitudes below ``zero_trim`` show as zero."""
        if zero_trim is None:
            return self.variable.get_string(self.fmt)
        trim = zero_trim.get_decimal() if isinstance(zero_trim, Value) else float(zero_trim)
        return self.variable.get_string(self.fmt, trim)


class FormattedString:
    """Text split into literal fillers and variable references.

    A reference is ``@name`` ended by a space, ``@{name}``, or either with a
    format in parentheses such as ``@{name(%.2f)}``.
    """

    def __init__(self, registry: VariableRegistry | None = None) -> None:
        self.registry = registry if registry is not None else default_registry
        self.fillers: list[str] = []
        self.var_strings: list[VarString] = []

    def set_string(self, text: str) -> None:
        """Parse ``text`` and append its fillers and references."""
        pos = 0
        while True:
            start = text.find("@", pos)
            if start < 0:
                self.fillers.append(text[pos:])
                return
            self.fillers.append(text[pos:start])
            consumed = self._parse_var(text[start:])
            if consumed is None:
                self.fillers.append("")
                return
            pos = start + consumed
            if pos >= len(text):
                break
        self.fillers.append("")

    def _parse_var(self, spec: str) -> int | None:
        """Record the reference at the start of ``spec``; return its length, None if it runs to the end."""
        fmt_start = spec.find("(")
        fmt_end = spec.find(")")
        braced = len(spec) > 1 and spec[1] == "{"
        var_start = 2 if braced else 1

        if fmt_start >= 0:
            var_end = fmt_start
        elif braced:
            var_end = spec.find("}")
        else:
            var_end = spec.find(" ")

        name = "@" + (spec[var_start:] if var_end < 0 else spec[var_start:var_end])

        variable = self.registry.get(name)
        if variable is not None:
            if fmt_start >= 0 and fmt_end >= 0:
                if fmt_end > fmt_start:
                    fmt = spec[fmt_start + 1:fmt_end]
                else:
                    fmt = spec[fmt_start + 1:]
            else:
                fmt = ""
            self.var_strings.append(VarString(variable, fmt))

        if braced:
            close = spec.find("}")
            return None if close < 0 else close + 1
        if fmt_end >= 0:
            return fmt_end + 1
        space = spec.find(" ")
        return None if space < 0 else space

    def render(self, zero_trim: Value | float | None = None) -> str:
        """The text with every reference replaced by its current value."""
        if not self.fillers:
            return ""
        body = "".join(
            filler + var_string.get(zero_trim)
            for filler, var_string in zip(self.fillers, self.var_strings)
        )
        return body + self.fillers[len(self.var_strings)]

    def lines(self, zero_trim: Value | float | None = None) -> list[str]:
        """The rendered text split into display lines."""
        return split_lines(self.render(zero_trim))