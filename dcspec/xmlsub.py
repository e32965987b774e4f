"""Text substitution of arguments, constants and environment variables, plus styles and defaults."""

from __future__ import annotations

import copy
import os
import xml.etree.ElementTree as ET
from collections.abc import Mapping

from dcspec.xmlutils import get_attribute, get_content, node_check, node_type, node_valid

__all__ = ["Substitutions"]

_MARKERS = "#$"


def _is_name_char(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalnum())


class Substitutions:
    """Expands ``#name`` and ``$name`` references and resolves element attributes.

    ``#name`` reads a command-line argument, or failing that a Constant from
    the specification; ``$name`` reads the environment. ``#{...}`` and
    ``${...}`` allow nested references, and ``\\#``/``\\$`` are literal.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ
        self._arguments: dict[str, str] = {}
        self._constants: dict[str, str] = {}
        self._defaults: list[ET.Element] = []
        self._styles: list[tuple[str, ET.Element]] = []

    def add_argument(self, key: str, value: str) -> None:
        self._arguments[key] = value

    def _lookup(self, marker: str, name: str) -> str:
        if marker == "#":
            if name in self._arguments:
                return self._arguments[name]
            return self._constants.get(name, "")
        return self._environ.get(name, "")

    def replace(self, text: str) -> str:
        """Return ``text`` with all references expanded."""
        if not any(marker in text for marker in _MARKERS):
            return text

        out: list[str] = []
        length = len(text)
        i = 0
        while i < length:
            ch = text[i]
            nxt = text[i + 1] if i + 1 < length else ""
            if ch == "\\" and nxt and nxt in _MARKERS:
                out.append(nxt)
                i += 2
                continue
            if ch not in _MARKERS:
                out.append(ch)
                i += 1
                continue

            if nxt == "{":
                brackets = 2
                depth = 1
                chars: list[str] = []
                for inner in text[i + 2:]:
                    if inner == "{":
                        depth += 1
                    elif inner == "}":
                        depth -= 1
                    if depth == 0:
                        break
                    chars.append(inner)
                expr = "".join(chars)
            else:
                brackets = 0
                end = i + 1
                while end < length and _is_name_char(text[end]):
                    end += 1
                expr = text[i + 1:end]

            out.append(self._lookup(ch, self.replace(expr)))
            i += len(expr) + brackets + 1
        return "".join(out)

    def node_content(self, node: ET.Element) -> str | None:
        """The element's text with references expanded, or None if it has none."""
        content = get_content(node)
        return None if content is None else self.replace(content)

    def element_data(self, node: ET.Element, key: str) -> str | None:
        """An attribute from the element, else its Style, else the Defaults, else None."""
        value = get_attribute(node, key)
        if value is not None:
            return self.replace(value)

        kind = node_type(node)

        style = get_attribute(node, "Style")
        if style is not None:
            wanted = self.replace(style)
            for name, style_node in self._styles:
                if name == wanted and node_check(style_node, kind):
                    value = get_attribute(style_node, key)
                    if value is not None:
                        return self.replace(value)

        for default in self._defaults:
            if node_check(default, kind):
                value = get_attribute(default, key)
                if value is not None:
                    return self.replace(value)

        return None

    def process_constant(self, node: ET.Element) -> None:
        """Record a Constant element: its Name attribute maps to its content."""
        name = self.element_data(node, "Name") or ""
        self._constants[name] = self.node_content(node) or ""

    def process_style(self, node: ET.Element) -> None:
        """Record every child of a Style element under the Style's Name."""
        for child in node:
            if node_valid(child):
                name = self.element_data(node, "Name") or ""
                self._styles.insert(0, (name, copy.deepcopy(child)))

    def process_defaults(self, node: ET.Element) -> None:
        """Record every child of a Defaults element; later ones take precedence."""
        for child in node:
            if node_valid(child):
                self._defaults.insert(0, copy.deepcopy(child))