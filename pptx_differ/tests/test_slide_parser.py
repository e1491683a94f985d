"""Tests for slide XML parsing."""
import unittest
from xml.etree import ElementTree as ET

from pptx_differ.parser.slide_parser import SlideParser
from pptx_differ.tests.pptx_builder import (
    group_shape,
    picture_shape,
    placeholder_shape,
    slide_xml,
    table_shape,
    text_shape,
)


def parse_tree(xml: str) -> ET.ElementTree:
    return ET.ElementTree(ET.fromstring(xml.encode("utf-8")))


class SlideParserTest(unittest.TestCase):
    """Validate name, shape count and text extraction."""

    def setUp(self) -> None:
        self.parser = SlideParser()

    def test_text_shapes_joined_with_single_space(self) -> None:
        tree = parse_tree(slide_xml([text_shape("Title   text"), text_shape("  Body\ttext  ")]))
        slide = self.parser.parse(tree, 1)

        self.assertEqual(slide.text, "Title text Body text")
        self.assertEqual(slide.shape_count, 2)
        self.assertEqual(slide.number, 1)

    def test_paragraphs_and_line_breaks_collapse_to_spaces(self) -> None:
        xml = slide_xml(
            [
                "<p:sp><p:txBody><a:p><a:r><a:t>first</a:t></a:r><a:br/><a:r><a:t>line</a:t></a:r></a:p>"
                "<a:p><a:fld type=\"slidenum\"><a:t>7</a:t></a:fld></a:p></p:txBody></p:sp>"
            ]
        )
        slide = self.parser.parse(parse_tree(xml), 1)
        self.assertEqual(slide.text, "first line 7")

    def test_table_cells_row_major(self) -> None:
        tree = parse_tree(slide_xml([table_shape([["a1", "b  1"], ["a2", ""]])]))
        slide = self.parser.parse(tree, 1)
        self.assertEqual(slide.text, "a1 b 1 a2")
        self.assertEqual(slide.shape_count, 1)

    def test_shapes_without_text_counted_but_skipped(self) -> None:
        tree = parse_tree(slide_xml([picture_shape(), text_shape("caption"), text_shape("")]))
        slide = self.parser.parse(tree, 2)

        self.assertEqual(slide.shape_count, 3)
        self.assertEqual(slide.text, "caption")

    def test_group_shape_counts_once_and_contributes_text(self) -> None:
        tree = parse_tree(slide_xml([group_shape(text_shape("inside"), text_shape("group")), text_shape("after")]))
        slide = self.parser.parse(tree, 1)

        self.assertEqual(slide.shape_count, 2)
        self.assertEqual(slide.text, "inside group after")

    def test_slide_name_from_common_data(self) -> None:
        tree = parse_tree(slide_xml([], name="Agenda"))
        self.assertEqual(self.parser.parse(tree, 4).name, "Agenda")

    def test_slide_name_falls_back_to_number(self) -> None:
        tree = parse_tree(slide_xml([]))
        slide = self.parser.parse(tree, 4)

        self.assertEqual(slide.name, "Slide4")
        self.assertEqual(slide.text, "")
        self.assertEqual(slide.shape_count, 0)

    def test_raw_text_keeps_paragraph_lines(self) -> None:
        tree = parse_tree(slide_xml([text_shape("one", "two"), picture_shape(), text_shape("three")]))
        self.assertEqual(self.parser.raw_text(tree), "one\ntwo\nthree\n")

    def test_notes_text_reads_body_placeholders_only(self) -> None:
        xml = (
            '<p:notes xmlns:p="http://schemas.openxmlformats.org/presentationml/2006/main" '
            'xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main"><p:cSld><p:spTree>'
            f'{placeholder_shape("sldNum", "3")}{placeholder_shape("body", "Speaker notes")}'
            "</p:spTree></p:cSld></p:notes>"
        )
        self.assertEqual(self.parser.notes_text(parse_tree(xml)), "Speaker notes\n")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
