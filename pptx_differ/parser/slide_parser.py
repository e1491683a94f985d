"""Parse slide XML parts into Slide models."""
from __future__ import annotations

from typing import List, Optional
from xml.etree import ElementTree as ET

from pptx_differ.model.document_model import Slide
from pptx_differ.utils.logger import get_logger
from pptx_differ.utils.text_normalizer import TextNormalizer
from pptx_differ.utils.xml_utils import Namespaces, local_name

LOGGER = get_logger(__name__)

# Elements of p:spTree that count as shapes
SHAPE_TAGS = frozenset({"sp", "grpSp", "graphicFrame", "cxnSp", "pic", "contentPart"})

NOTES_BODY_PLACEHOLDER = "body"


class SlideParser:
    """Extracts name, shape count and text from a slide part."""

    def __init__(self, normalizer: Optional[TextNormalizer] = None) -> None:
        self._normalizer = normalizer or TextNormalizer()

    def parse(self, slide_tree: ET.ElementTree, number: int) -> Slide:
        """Build the Slide model for a slide part at the given 1-based position."""
        shapes = self.top_level_shapes(slide_tree)
        pieces = [self.shape_text(shape) for shape in shapes]
        slide = Slide(
            name=self.slide_name(slide_tree, number),
            number=number,
            shape_count=len(shapes),
            text=self._normalizer.join_pieces(pieces),
        )
        LOGGER.debug("Parsed slide %d (%s): %d shapes", number, slide.name, slide.shape_count)
        return slide

    def raw_text(self, slide_tree: ET.ElementTree) -> str:
        """Return the slide text with line structure preserved, one line per paragraph."""
        pieces = (self.shape_text(shape) for shape in self.top_level_shapes(slide_tree))
        return "".join(f"{piece}\n" for piece in pieces if piece)

    def notes_text(self, notes_tree: ET.ElementTree) -> str:
        """Return the text of the body placeholders on a notes slide."""
        pieces = []
        for shape in self.top_level_shapes(notes_tree):
            if local_name(shape.tag) != "sp" or self._placeholder_type(shape) != NOTES_BODY_PLACEHOLDER:
                continue
            text = self.shape_text(shape)
            if text:
                pieces.append(f"{text}\n")
        return "".join(pieces)

    @staticmethod
    def slide_name(slide_tree: ET.ElementTree, number: int) -> str:
        common = slide_tree.getroot().find("p:cSld", Namespaces.PRESENTATION)
        name = common.attrib.get("name", "") if common is not None else ""
        return name if name.strip() else f"Slide{number}"

    @staticmethod
    def top_level_shapes(slide_tree: ET.ElementTree) -> List[ET.Element]:
        sp_tree = slide_tree.getroot().find("p:cSld/p:spTree", Namespaces.PRESENTATION)
        if sp_tree is None:
            LOGGER.warning("Slide part has no shape tree")
            return []
        return [child for child in sp_tree if local_name(child.tag) in SHAPE_TAGS]

    # ------------------------------------------------------------------
    # Shape text
    def shape_text(self, shape: ET.Element) -> str:
        """Return the raw text of a shape; empty for shapes without text."""
        tag = local_name(shape.tag)
        if tag == "sp":
            body = shape.find("p:txBody", Namespaces.PRESENTATION)
            return self._text_body(body) if body is not None else ""
        if tag == "graphicFrame":
            table = shape.find("a:graphic/a:graphicData/a:tbl", Namespaces.PRESENTATION)
            return self._table_text(table) if table is not None else ""
        if tag == "grpSp":
            children = [child for child in shape if local_name(child.tag) in SHAPE_TAGS]
            return "\n".join(text for text in (self.shape_text(child) for child in children) if text)
        return ""

    def _table_text(self, table: ET.Element) -> str:
        """Row-major cell text; cells separated by single spaces after normalization."""
        cells = []
        for row in table.findall("a:tr", Namespaces.PRESENTATION):
            for cell in row.findall("a:tc", Namespaces.PRESENTATION):
                body = cell.find("a:txBody", Namespaces.PRESENTATION)
                cells.append(self._normalizer.normalize_text(self._text_body(body)) if body is not None else "")
        return " ".join(text for text in cells if text)

    @staticmethod
    def _text_body(body: ET.Element) -> str:
        paragraphs = []
        for paragraph in body.findall("a:p", Namespaces.PRESENTATION):
            parts = []
            for child in paragraph:
                tag = local_name(child.tag)
                if tag in ("r", "fld"):
                    text_el = child.find("a:t", Namespaces.PRESENTATION)
                    if text_el is not None and text_el.text:
                        parts.append(text_el.text)
                elif tag == "br":
                    parts.append("\n")
            paragraphs.append("".join(parts))
        return "\n".join(paragraphs).strip()

    @staticmethod
    def _placeholder_type(shape: ET.Element) -> Optional[str]:
        placeholder = shape.find("p:nvSpPr/p:nvPr/p:ph", Namespaces.PRESENTATION)
        if placeholder is None:
            return None
        return placeholder.attrib.get("type", "body")
