"""Loading XML specification files and reading elements from them."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from xml.etree import ElementInclude

__all__ = [
    "XmlFileError",
    "open_xml_file",
    "get_attribute",
    "get_content",
    "node_type",
    "node_valid",
    "node_check",
]

logger = logging.getLogger(__name__)


class XmlFileError(OSError):
    """An XML file could not be read or has no usable root element."""


def open_xml_file(filename: str | os.PathLike) -> ET.Element:
    """Parse ``filename``, expand XIncludes and return its root element."""
    path = os.fspath(filename)
    if not os.path.isfile(path):
        raise XmlFileError(f"Couldn't process XML file: {path}")
    try:
        tree = ET.parse(path)
    except (ET.ParseError, OSError) as exc:
        raise XmlFileError(f"Couldn't process XML file: {path}") from exc

    root = tree.getroot()
    if root is None:
        raise XmlFileError(f"Couldn't find root element in XML file: {path}")

    try:
        ElementInclude.include(root, base_url=path)
    except (ElementInclude.FatalIncludeError, ET.ParseError, OSError) as exc:
        # A failed XInclude is reported but does not stop the file being used.
        logger.error("XInclude processing failed in XML file: %s (%s)", path, exc)
    return root


def node_valid(node: ET.Element) -> bool:
    """True for element nodes; comments and processing instructions are not."""
    return isinstance(node.tag, str)


def node_type(node: ET.Element) -> str | None:
    """The element name, or None for nodes that are not elements."""
    return node.tag if node_valid(node) else None


def node_check(node: ET.Element, name: str | None) -> bool:
    """True if ``node`` is an element called ``name``."""
    return name is not None and node_valid(node) and node.tag == name


def get_attribute(node: ET.Element, key: str) -> str | None:
    """The attribute's text, or None if it is missing or empty."""
    # An empty attribute carries no text and counts as not given.
    value = node.get(key)
    return value if value else None


def get_content(node: ET.Element) -> str | None:
    """The text that opens the element's content, or None if there is none."""
    return node.text