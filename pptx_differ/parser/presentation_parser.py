"""Build a DocumentModel from a loaded PPTX package."""
from __future__ import annotations

from typing import List

from pptx_differ.model.document_model import DocumentModel, Slide
from pptx_differ.parser.metadata_parser import MetadataParser
from pptx_differ.parser.pptx_loader import PptxPackage
from pptx_differ.parser.slide_parser import SlideParser
from pptx_differ.utils.logger import get_logger

LOGGER = get_logger(__name__)


class PresentationParser:
    """Walks the slides of a package in presentation order."""

    def __init__(self, package: PptxPackage, slide_parser: SlideParser | None = None) -> None:
        self._package = package
        self._slide_parser = slide_parser or SlideParser()

    def parse(self) -> DocumentModel:
        slides: List[Slide] = []
        text_parts: List[str] = []

        for number, part_name in enumerate(self._package.slide_parts(), start=1):
            slide_tree = self._package.get_xml_part(part_name)
            if slide_tree is None:
                raise KeyError(f"Slide part missing from package: {part_name}")
            slides.append(self._slide_parser.parse(slide_tree, number))
            text_parts.append(self._slide_parser.raw_text(slide_tree))

            notes_part = self._package.notes_part_for(part_name)
            if notes_part is not None:
                notes_tree = self._package.get_xml_part(notes_part)
                if notes_tree is not None:
                    text_parts.append(self._slide_parser.notes_text(notes_tree))

        metadata = MetadataParser(self._package.core_properties_xml, self._package.app_properties_xml).parse()
        LOGGER.debug("Parsed %d slides from %s", len(slides), self._package.name)
        return DocumentModel(
            name=self._package.name,
            slides=tuple(slides),
            metadata=metadata,
            whole_text="".join(text_parts),
        )
