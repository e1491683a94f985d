"""Helper functions to work with XML namespaces and parsing."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict
from xml.etree import ElementTree as ET


@dataclass(frozen=True)
class Namespaces:
    """Common OpenXML namespace prefixes used across parsers."""

    PRESENTATION: Dict[str, str] = None  # type: ignore[assignment]
    RELS: Dict[str, str] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:  # pragma: no cover
        raise RuntimeError("Namespaces should not be instantiated")


Namespaces.PRESENTATION = {  # type: ignore[attr-defined]
    "p": "http://schemas.openxmlformats.org/presentationml/2006/main",
    "a": "http://schemas.openxmlformats.org/drawingml/2006/main",
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
}
Namespaces.RELS = {  # type: ignore[attr-defined]
    "rel": "http://schemas.openxmlformats.org/package/2006/relationships",
}


def parse_xml(data: bytes) -> ET.ElementTree:
    """Parse XML from raw bytes with sane defaults."""
    return ET.ElementTree(ET.fromstring(data))


def qualify(prefixed: str, namespaces: Dict[str, str]) -> str:
    """Expand ``prefix:name`` into Clark notation using the given map."""
    prefix, _, local = prefixed.partition(":")
    return f"{{{namespaces[prefix]}}}{local}"


def local_name(tag: str) -> str:
    """Return the tag name without its namespace."""
    return tag.split("}", 1)[-1]

