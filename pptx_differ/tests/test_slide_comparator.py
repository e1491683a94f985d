"""Tests for positional slide-show comparison."""
import unittest

from pptx_differ.differ.slide_comparator import SlideShowComparator
from pptx_differ.model.comparison import Diverged, ExtraTrailing, Identical, Side
from pptx_differ.model.document_model import DocumentModel, Slide


def make_document(name, texts, metadata="Creator = Tester", whole_text=None, shape_counts=None, names=None):
    slides = tuple(
        Slide(
            name=(names[i] if names else f"Slide{i + 1}"),
            number=i + 1,
            shape_count=(shape_counts[i] if shape_counts else 1),
            text=text,
        )
        for i, text in enumerate(texts)
    )
    return DocumentModel(
        name=name,
        slides=slides,
        metadata=metadata,
        whole_text=whole_text if whole_text is not None else "\n".join(texts),
    )


class SlideShowComparatorTest(unittest.TestCase):
    """Validate whole-document and per-slide comparisons."""

    def setUp(self) -> None:
        self.comparator = SlideShowComparator()

    def test_identical_documents(self) -> None:
        doc_a = make_document("a.pptx", ["Hello world", "Second slide"])
        doc_b = make_document("b.pptx", ["Hello world", "Second slide"])

        outcome = self.comparator.compare(doc_a, doc_b)

        self.assertTrue(outcome.same_slide_count)
        self.assertTrue(outcome.same_metadata)
        self.assertTrue(outcome.same_whole_text)
        self.assertEqual(len(outcome.slides), 2)
        for slide in outcome.slides:
            self.assertIsInstance(slide.text_result, Identical)
            self.assertFalse(slide.name_differs)

    def test_slide_count_mismatch(self) -> None:
        doc_a = make_document("a.pptx", ["one", "two", "three"])
        doc_b = make_document("b.pptx", ["one", "two", "three", "four"])

        outcome = self.comparator.compare(doc_a, doc_b)

        self.assertFalse(outcome.same_slide_count)
        self.assertEqual(outcome.slide_count_a, 3)
        self.assertEqual(outcome.slide_count_b, 4)

    def test_per_slide_comparison_bounded_by_shorter_document(self) -> None:
        doc_a = make_document("a.pptx", ["one", "two", "three"])
        doc_b = make_document("b.pptx", ["one", "two", "three", "four", "five"])

        outcome = self.comparator.compare(doc_a, doc_b)

        self.assertEqual([slide.index for slide in outcome.slides], [0, 1, 2])

    def test_slide_names_compared_after_trimming(self) -> None:
        doc_a = make_document("a.pptx", ["x", "y"], names=["  Intro ", "Agenda"])
        doc_b = make_document("b.pptx", ["x", "y"], names=["Intro", "Summary"])

        outcome = self.comparator.compare(doc_a, doc_b)

        self.assertFalse(outcome.slides[0].name_differs)
        self.assertTrue(outcome.slides[1].name_differs)
        self.assertEqual(outcome.slides[1].name_a, "Agenda")
        self.assertEqual(outcome.slides[1].name_b, "Summary")

    def test_text_divergence_and_extra_text(self) -> None:
        doc_a = make_document("a.pptx", ["the lazy Order", "short"])
        doc_b = make_document("b.pptx", ["the lazy Go", "short plus more"])

        outcome = self.comparator.compare(doc_a, doc_b)

        self.assertEqual(outcome.slides[0].text_result, Diverged(index=2, expected="Order", actual="Go"))
        self.assertEqual(outcome.slides[1].text_result, ExtraTrailing(side=Side.B, extra_words=("plus", "more")))
        self.assertFalse(outcome.same_whole_text)

    def test_shape_counts_recorded(self) -> None:
        doc_a = make_document("a.pptx", ["x"], shape_counts=[3])
        doc_b = make_document("b.pptx", ["x"], shape_counts=[1])

        slide = self.comparator.compare(doc_a, doc_b).slides[0]

        self.assertEqual((slide.shape_count_a, slide.shape_count_b), (3, 1))

    def test_metadata_difference(self) -> None:
        doc_a = make_document("a.pptx", ["x"], metadata="Creator = Alice")
        doc_b = make_document("b.pptx", ["x"], metadata="Creator = Bob")
        self.assertFalse(self.comparator.compare(doc_a, doc_b).same_metadata)

    def test_empty_documents(self) -> None:
        outcome = self.comparator.compare(make_document("a.pptx", []), make_document("b.pptx", []))
        self.assertTrue(outcome.same_slide_count)
        self.assertEqual(outcome.slides, ())

    def test_none_model_rejected(self) -> None:
        doc = make_document("a.pptx", ["x"])
        with self.assertRaisesRegex(ValueError, "file B"):
            self.comparator.compare(doc, None)
        with self.assertRaisesRegex(ValueError, "file A file B"):
            self.comparator.compare(None, None)

    def test_none_slide_list_rejected(self) -> None:
        broken = DocumentModel(name="broken.pptx", slides=None)
        with self.assertRaisesRegex(ValueError, "broken.pptx"):
            self.comparator.compare(make_document("a.pptx", []), broken)

    def test_inconsistent_slides_rejected(self) -> None:
        duplicate = DocumentModel(
            name="dup.pptx",
            slides=(Slide(name="a", number=1, shape_count=0), Slide(name="b", number=1, shape_count=0)),
        )
        with self.assertRaisesRegex(ValueError, "Duplicate slide number"):
            self.comparator.compare(duplicate, duplicate)

        negative = DocumentModel(name="neg.pptx", slides=(Slide(name="a", number=1, shape_count=-1),))
        with self.assertRaisesRegex(ValueError, "Negative shape count"):
            self.comparator.compare(negative, negative)

    def test_malformed_slide_entries_rejected(self) -> None:
        holes = DocumentModel(name="holes.pptx", slides=(Slide(name="a", number=1, shape_count=0), None))
        with self.assertRaisesRegex(ValueError, "Invalid slide entry None at slide index 1 in holes.pptx"):
            self.comparator.compare(holes, make_document("b.pptx", ["x", "y"]))

        uncounted = DocumentModel(name="uncounted.pptx", slides=(Slide(name="a", number=1, shape_count=None),))
        with self.assertRaisesRegex(ValueError, "Invalid shape count None at slide index 0 in uncounted.pptx"):
            self.comparator.compare(make_document("a.pptx", ["x"]), uncounted)


class SingleSlideAccessorTest(unittest.TestCase):
    """Validate bounds behaviour of single-slide lookups."""

    def setUp(self) -> None:
        self.comparator = SlideShowComparator()
        self.doc_a = make_document("a.pptx", ["alpha", "beta", "gamma"], shape_counts=[1, 2, 3])
        self.doc_b = make_document("b.pptx", ["alpha", "delta"])

    def test_lookups_within_range(self) -> None:
        self.assertEqual(self.comparator.slide_text(self.doc_a, 1), "beta")
        self.assertEqual(self.comparator.slide_name(self.doc_a, 2), "Slide3")
        self.assertEqual(self.comparator.shape_count(self.doc_a, 2), 3)

    def test_out_of_range_returns_none(self) -> None:
        self.assertIsNone(self.comparator.slide_text(self.doc_a, 3))
        self.assertIsNone(self.comparator.slide_name(self.doc_b, 2))
        self.assertIsNone(self.comparator.shape_count(self.doc_b, 10))

    def test_compare_slide_past_shorter_document(self) -> None:
        self.assertIsNone(self.comparator.compare_slide(self.doc_a, self.doc_b, 2))
        result = self.comparator.compare_slide(self.doc_a, self.doc_b, 1)
        self.assertIsNotNone(result)
        self.assertEqual(result.text_result, Diverged(index=0, expected="beta", actual="delta"))

    def test_negative_index_is_an_error(self) -> None:
        with self.assertRaisesRegex(ValueError, "negative"):
            self.comparator.slide_text(self.doc_a, -1)
        with self.assertRaises(ValueError):
            self.comparator.compare_slide(self.doc_a, self.doc_b, -1)

    def test_none_document_is_an_error(self) -> None:
        with self.assertRaises(ValueError):
            self.comparator.slide_text(None, 0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
