"""PPTX package loader responsible for unpacking XML parts."""
from __future__ import annotations

import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union
from xml.etree import ElementTree as ET

from pptx_differ.parser.rels_parser import (
    MAIN_PRESENTATION_PART,
    RELTYPE_NOTES_SLIDE,
    RELTYPE_OFFICE_DOCUMENT,
    RELTYPE_SLIDE,
    Relationships,
)
from pptx_differ.utils.logger import get_logger
from pptx_differ.utils.xml_utils import Namespaces, parse_xml, qualify

LOGGER = get_logger(__name__)

CONTENT_TYPES_PATH = "[Content_Types].xml"
CORE_PROPS_PATH = "docProps/core.xml"
APP_PROPS_PATH = "docProps/app.xml"

PPTX_SUFFIX = ".pptx"

ERROR_FILE_NULL = "File cannot be null:"
ERROR_FILE_NOT_EXIST = "File does not exist:"
ERROR_FILE_NOT_PPTX = "File is not a .pptx file:"


def validate_input_files(file_a: Optional[Union[str, Path]], file_b: Optional[Union[str, Path]]) -> None:
    """Check that both inputs are given, exist and carry the .pptx suffix."""
    missing_args = [label for label, value in (("file A", file_a), ("file B", file_b)) if value is None]
    if missing_args:
        raise ValueError(f"{ERROR_FILE_NULL} {' '.join(missing_args)}")

    paths = [Path(file_a), Path(file_b)]  # type: ignore[arg-type]

    not_found = [path.name for path in paths if not path.exists()]
    if not_found:
        raise FileNotFoundError(f"{ERROR_FILE_NOT_EXIST} {' '.join(not_found)}")

    not_pptx = [path.name for path in paths if not path.name.lower().endswith(PPTX_SUFFIX)]
    if not_pptx:
        raise ValueError(f"{ERROR_FILE_NOT_PPTX} {' '.join(not_pptx)}")


@dataclass(slots=True)
class PptxPackage:
    """Container for the XML parts extracted from a PPTX archive."""

    raw_parts: Mapping[str, bytes]
    name: str = ""
    xml_cache: Dict[str, ET.ElementTree] = field(default_factory=dict)

    content_types_xml: ET.ElementTree | None = None
    presentation_xml: ET.ElementTree | None = None
    presentation_part: str = MAIN_PRESENTATION_PART

    core_properties_xml: Optional[ET.ElementTree] = None
    app_properties_xml: Optional[ET.ElementTree] = None

    relationships: Relationships = field(init=False)

    @classmethod
    def load(cls, pptx_path: Union[str, Path]) -> "PptxPackage":
        """Open a PPTX archive and populate XML trees."""
        pptx_path = Path(pptx_path)
        try:
            with zipfile.ZipFile(pptx_path) as pptx_zip:
                parts = {name: pptx_zip.read(name) for name in pptx_zip.namelist()}
        except zipfile.BadZipFile as exc:
            raise ValueError(f"File is not a valid PowerPoint package: {pptx_path.name}") from exc

        LOGGER.debug("Loaded %d parts from %s", len(parts), pptx_path.name)

        package = cls(raw_parts=parts, name=pptx_path.name)
        package._initialize_caches()
        return package

    # ------------------------------------------------------------------
    # Public helpers
    def require_presentation_xml(self) -> ET.ElementTree:
        if self.presentation_xml is None:
            raise ValueError("Presentation part missing from package")
        return self.presentation_xml

    def get_xml_part(self, name: str) -> Optional[ET.ElementTree]:
        return self._parse_optional(name)

    def slide_parts(self) -> List[str]:
        """Return slide part names in presentation order."""
        root = self.require_presentation_xml().getroot()
        id_list = root.find("p:sldIdLst", Namespaces.PRESENTATION)
        if id_list is None:
            return []

        rel_attr = qualify("r:id", Namespaces.PRESENTATION)
        slide_parts: List[str] = []
        for slide_id in id_list.findall("p:sldId", Namespaces.PRESENTATION):
            r_id = slide_id.attrib.get(rel_attr)
            rel = self.relationships.find(self.presentation_part, r_id) if r_id else None
            if rel is None or rel.rel_type != RELTYPE_SLIDE or rel.resolved_target is None:
                raise KeyError(f"Slide relationship {r_id!r} missing from {self.presentation_part}")
            if rel.resolved_target not in self.raw_parts:
                raise KeyError(f"Slide part missing from package: {rel.resolved_target}")
            slide_parts.append(rel.resolved_target)
        return slide_parts

    def notes_part_for(self, slide_part: str) -> Optional[str]:
        """Return the notes slide part linked from a slide, if any."""
        target = self.relationships.first_target_of_type(slide_part, RELTYPE_NOTES_SLIDE)
        if target is None or target not in self.raw_parts:
            return None
        return target

    # ------------------------------------------------------------------
    # Internal bootstrap
    def _initialize_caches(self) -> None:
        self.content_types_xml = self._parse_required(CONTENT_TYPES_PATH)
        try:
            self.relationships = Relationships.from_package(self.raw_parts)
        except ValueError as exc:
            raise ValueError(f"{exc} in {self.name}") from exc

        office_document = self.relationships.first_target_of_type("", RELTYPE_OFFICE_DOCUMENT)
        if office_document:
            self.presentation_part = office_document
        self.presentation_xml = self._parse_required(self.presentation_part)

        self.core_properties_xml = self._parse_optional(CORE_PROPS_PATH)
        self.app_properties_xml = self._parse_optional(APP_PROPS_PATH)

    def _parse_required(self, name: str) -> ET.ElementTree:
        tree = self._parse_optional(name)
        if tree is None:
            raise KeyError(f"Required PPTX part missing: {name}")
        return tree

    def _parse_optional(self, name: str) -> Optional[ET.ElementTree]:
        if name in self.xml_cache:
            return self.xml_cache[name]
        data = self.raw_parts.get(name)
        if data is None:
            return None
        try:
            tree = parse_xml(data)
        except ET.ParseError as exc:
            raise ValueError(f"Malformed XML part {name} in {self.name}") from exc
        self.xml_cache[name] = tree
        return tree
