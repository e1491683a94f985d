"""Positional comparison of two presentation models."""
from __future__ import annotations

from typing import List, Optional

from pptx_differ.differ.word_diff import locate, split_words
from pptx_differ.model.comparison import ComparisonOutcome, SlideComparison
from pptx_differ.model.document_model import DocumentModel, Slide
from pptx_differ.utils.logger import get_logger

LOGGER = get_logger(__name__)

ERROR_NULL_MODEL = "DocumentModel must not be None:"
ERROR_NULL_SLIDES = "DocumentModel slide list must not be None:"
ERROR_NEGATIVE_INDEX = "Index cannot be a negative number:"


class SlideShowComparator:
    """Compares slide count, names, text and shape counts index by index."""

    def compare(self, doc_a: DocumentModel, doc_b: DocumentModel) -> ComparisonOutcome:
        """Compare two documents; slides past the shorter document are skipped."""
        self._validate_pair(doc_a, doc_b)

        overlap = min(len(doc_a.slides), len(doc_b.slides))
        LOGGER.debug(
            "Comparing %s (%d slides) with %s (%d slides)",
            doc_a.name,
            len(doc_a.slides),
            doc_b.name,
            len(doc_b.slides),
        )
        slides: List[SlideComparison] = [
            self._compare_slides(index, doc_a.slides[index], doc_b.slides[index]) for index in range(overlap)
        ]

        return ComparisonOutcome(
            name_a=doc_a.name,
            name_b=doc_b.name,
            slide_count_a=len(doc_a.slides),
            slide_count_b=len(doc_b.slides),
            same_metadata=doc_a.metadata == doc_b.metadata,
            same_whole_text=doc_a.whole_text == doc_b.whole_text,
            slides=tuple(slides),
        )

    def compare_slide(self, doc_a: DocumentModel, doc_b: DocumentModel, index: int) -> Optional[SlideComparison]:
        """Compare a single index; ``None`` when either document has no slide there."""
        self._validate_pair(doc_a, doc_b)
        self._check_index(index)
        if index >= min(len(doc_a.slides), len(doc_b.slides)):
            return None
        return self._compare_slides(index, doc_a.slides[index], doc_b.slides[index])

    # ------------------------------------------------------------------
    # Single-slide accessors
    def slide_name(self, doc: DocumentModel, index: int) -> Optional[str]:
        slide = self._slide_at(doc, index, "document")
        return None if slide is None else slide.name

    def slide_text(self, doc: DocumentModel, index: int) -> Optional[str]:
        slide = self._slide_at(doc, index, "document")
        return None if slide is None else slide.text

    def shape_count(self, doc: DocumentModel, index: int) -> Optional[int]:
        slide = self._slide_at(doc, index, "document")
        return None if slide is None else slide.shape_count

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _compare_slides(index: int, slide_a: Slide, slide_b: Slide) -> SlideComparison:
        return SlideComparison(
            index=index,
            name_a=(slide_a.name or "").strip(),
            name_b=(slide_b.name or "").strip(),
            text_result=locate(split_words(slide_a.text or ""), split_words(slide_b.text or "")),
            shape_count_a=slide_a.shape_count,
            shape_count_b=slide_b.shape_count,
        )

    def _slide_at(self, doc: DocumentModel, index: int, label: str) -> Optional[Slide]:
        self._validate(doc, label)
        self._check_index(index)
        if index >= len(doc.slides):
            return None
        return doc.slides[index]

    @staticmethod
    def _check_index(index: int) -> None:
        if index < 0:
            raise ValueError(f"{ERROR_NEGATIVE_INDEX} {index}")

    def _validate_pair(self, doc_a: DocumentModel, doc_b: DocumentModel) -> None:
        missing = [label for label, doc in (("file A", doc_a), ("file B", doc_b)) if doc is None]
        if missing:
            raise ValueError(f"{ERROR_NULL_MODEL} {' '.join(missing)}")
        self._validate(doc_a, "file A")
        self._validate(doc_b, "file B")

    @staticmethod
    def _validate(doc: DocumentModel, label: str) -> None:
        if doc is None:
            raise ValueError(f"{ERROR_NULL_MODEL} {label}")
        if doc.slides is None:
            raise ValueError(f"{ERROR_NULL_SLIDES} {doc.name or label}")

        seen_numbers = set()
        for position, slide in enumerate(doc.slides):
            if not isinstance(slide, Slide):
                raise ValueError(f"Invalid slide entry {slide!r} at slide index {position} in {doc.name or label}")
            if not isinstance(slide.shape_count, int):
                raise ValueError(
                    f"Invalid shape count {slide.shape_count!r} at slide index {position} in {doc.name or label}"
                )
            if slide.shape_count < 0:
                raise ValueError(
                    f"Negative shape count {slide.shape_count} at slide index {position} in {doc.name or label}"
                )
            if slide.number in seen_numbers:
                raise ValueError(f"Duplicate slide number {slide.number} at slide index {position} in {doc.name or label}")
            seen_numbers.add(slide.number)
