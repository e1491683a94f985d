"""Flatten document property parts into a comparable metadata string."""
from __future__ import annotations

from typing import List, Optional
from xml.etree import ElementTree as ET

from pptx_differ.utils.xml_utils import local_name


class MetadataParser:
    """Collects simple property fields from core.xml and app.xml."""

    def __init__(self, core_xml: Optional[ET.ElementTree], app_xml: Optional[ET.ElementTree]) -> None:
        self._core_xml = core_xml
        self._app_xml = app_xml

    def parse(self) -> str:
        """Return ``Field = value`` lines, core properties first."""
        lines = self._simple_fields(self._core_xml) + self._simple_fields(self._app_xml)
        return "\n".join(lines)

    @staticmethod
    def _simple_fields(tree: Optional[ET.ElementTree]) -> List[str]:
        if tree is None:
            return []
        lines = []
        for child in tree.getroot():
            # skip structured values such as HeadingPairs and TitlesOfParts
            if len(child):
                continue
            value = (child.text or "").strip()
            if value:
                name = local_name(child.tag)
                lines.append(f"{name[:1].upper()}{name[1:]} = {value}")
        return lines
