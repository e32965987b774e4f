"""An XML summary log of the communication and display elements that were loaded."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import TextIO

from dcspec.xmlsub import Substitutions
from dcspec.xmlutils import node_check, node_type

__all__ = ["ReportLog", "escape_xml"]

_ESCAPES = str.maketrans(
    {"&": "&amp;", "'": "&apos;", '"': "&quot;", ">": "&gt;", "<": "&lt;"}
)

# Elements whose start tag opens a nested block, with the attributes to report.
_BLOCK_ELEMENTS: dict[str, tuple[str, ...]] = {
    "TrickIo": ("Host", "Port", "DataRate", "ConnectedVariable", "DisconnectAction"),
    "FromTrick": (),
    "ToTrick": (),
    "EdgeIo": ("Host", "Port", "DataRate", "ConnectedVariable"),
    "FromEdge": (),
    "ToEdge": (),
    "Window": ("X", "Y", "Width", "Height", "FullScreen", "ForceUpdate", "ActiveDisplay"),
    "Panel": ("DisplayIndex", "BackgroundColor", "VirtualWidth", "VirtualHeight"),
}

# Elements reported on one line together with their content.
_DATA_ELEMENTS: dict[str, tuple[str, ...]] = {
    "Variable": ("Type", "InitialValue"),
    "Function": (),
    "TrickVariable": ("Name", "Units", "InitializationOnly"),
    "TrickMethod": ("Name",),
    "EdgeVariable": ("RcsCommand",),
    "String": (
        "X", "Y", "Rotate", "HorizontalAlign", "VerticalAlign", "OriginX", "OriginY",
        "Color", "BackgroundColor", "Font", "Face", "Size", "ForceMono", "ShadowOffset",
    ),
}

_INDENT = "    "


def escape_xml(text: str) -> str:
    """Replace the five XML-reserved characters with their entities."""
    return text.translate(_ESCAPES)


class ReportLog:
    """Writes a ``<DCAPP>`` document describing elements as they are processed."""

    def __init__(self, stream: TextIO, substitutions: Substitutions | None = None) -> None:
        self._stream = stream
        self._subs = substitutions if substitutions is not None else Substitutions()
        self._indent = 0
        self._open = True
        self._start_tag("DCAPP")

    def __enter__(self) -> ReportLog:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return not self._open

    def close(self) -> None:
        """Write the closing ``</DCAPP>``; later logging calls do nothing."""
        if not self._open:
            return
        self._end_tag("DCAPP")
        self._stream.flush()
        self._open = False

    def _write(self, text: str) -> None:
        self._stream.write(text)

    def _start_tag(self, tag: str) -> None:
        self._write(f"{_INDENT * self._indent}<{tag}>\n")
        self._indent += 1

    def _open_tag(self, node: ET.Element, tag: str, attributes: tuple[str, ...]) -> None:
        self._write(f"{_INDENT * self._indent}<{tag}")
        for label in attributes:
            value = self._subs.element_data(node, label)
            if value:
                self._write(f' {label}="{escape_xml(value)}"')
        self._write(">")

    def _end_tag(self, tag: str) -> None:
        self._indent -= 1
        self._write(f"{_INDENT * self._indent}</{tag}>\n")

    def log_node_start(self, node: ET.Element) -> None:
        """Open a block for communication, window and panel elements."""
        if not self._open:
            return
        for tag, attributes in _BLOCK_ELEMENTS.items():
            if not node_check(node, tag):
                continue
            if attributes:
                self._open_tag(node, tag, attributes)
                self._write("\n")
                self._indent += 1
            else:
                self._start_tag(tag)

    def log_node_data(self, node: ET.Element) -> None:
        """Write a one-line entry for variables, functions and strings."""
        if not self._open:
            return
        for tag, attributes in _DATA_ELEMENTS.items():
            if node_check(node, tag):
                self._open_tag(node, tag, attributes)
                self._write(escape_xml(self._subs.node_content(node) or ""))
                self._write(f"</{tag}>\n")

    def log_node_end(self, node: ET.Element) -> None:
        """Close the block opened for ``node``."""
        if self._open:
            self._end_tag(node_type(node) or "")