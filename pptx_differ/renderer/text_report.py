"""Render a comparison outcome into the plain-text difference report."""
from __future__ import annotations

from typing import List

from pptx_differ.model.comparison import (
    ComparisonOutcome,
    Diverged,
    ExtraTrailing,
    Identical,
    Side,
    SlideComparison,
)
from pptx_differ.utils.logger import get_logger

LOGGER = get_logger(__name__)

EOL = "\n"
SECTION_SEPARATOR = "-" * 64

OVERVIEW_LABEL = "OVERVIEW"
SLIDE_LABEL = "SLIDE: "

EXACT_CHECK_DESCRIPTION = "Exact file check: Checks if the two files are exactly the same file or not."
EXACT_CHECK_SAME = "The two files appear to be the same exact file."
EXACT_CHECK_DIFFERENT = "In reading the data in the two files, it was found that the two files are not the same file."

WHOLE_TEXT_SAME = "Both files seem to contain the exact same text."
WHOLE_TEXT_DIFFERENT = "There are differences in the text in the two files."

METADATA_SAME = "The metadata in File A and File B appear to be the same."
METADATA_DIFFERENT = "The metadata in File A and File B contain different information."

SLIDE_COUNT_DESCRIPTION = "Slide Count: Compares the number of slides in the two files."
SLIDE_COUNT_SAME = "Both files contain "
SLIDE_COUNT_DIFFERENT = "The slide counts are not the same."

SLIDE_NAME_DIFFERENT = "Slides for Files A and B are different at (zero-based) index: "

SLIDE_TEXT_SAME = "Slide text for Files A and B are the same at (zero-based) index: "
SLIDE_TEXT_DIFFERENT = "Slide text for Files A and B are different at (zero-based) index: "

SLIDE_TEXT_EXPECTED = ' expected (File A) "'
SLIDE_TEXT_ACTUAL = '" but actually found (File B) "'
SLIDE_TEXT_CLOSE = '".'

EXTRA_TEXT = "Extra Text: "
EXTRA_TEXT_FILE = {
    Side.A: "Extra Text found in File A.",
    Side.B: "Extra Text found in File B.",
}


def pluralize(count: int, noun: str) -> str:
    """Return ``"1 slide."`` or ``"3 slides."`` style wording."""
    return f"{count} {noun}." if count == 1 else f"{count} {noun}s."


class ReportBuilder:
    """Compose the fixed-order sections of the difference report."""

    def build(self, identical: bool, outcome: ComparisonOutcome) -> str:
        if outcome is None:
            raise ValueError("ComparisonOutcome must not be None")

        lines: List[str] = []
        self._overview(lines)
        self._exact_file(lines, identical)
        self._whole_text(lines, outcome)
        self._metadata(lines, outcome)
        self._slide_counts(lines, outcome)
        for slide in outcome.slides:
            self._slide_block(lines, slide)

        LOGGER.debug("Built report with %d per-slide blocks", len(outcome.slides))
        return EOL.join(lines) + EOL

    @staticmethod
    def _overview(lines: List[str]) -> None:
        lines.extend([OVERVIEW_LABEL, SECTION_SEPARATOR])

    @staticmethod
    def _exact_file(lines: List[str], identical: bool) -> None:
        lines.append(EXACT_CHECK_DESCRIPTION)
        lines.append("Result: " + (EXACT_CHECK_SAME if identical else EXACT_CHECK_DIFFERENT))
        lines.append("")

    @staticmethod
    def _whole_text(lines: List[str], outcome: ComparisonOutcome) -> None:
        lines.append(WHOLE_TEXT_SAME if outcome.same_whole_text else WHOLE_TEXT_DIFFERENT)
        lines.append("")

    @staticmethod
    def _metadata(lines: List[str], outcome: ComparisonOutcome) -> None:
        lines.append(METADATA_SAME if outcome.same_metadata else METADATA_DIFFERENT)
        lines.append("")

    @staticmethod
    def _slide_counts(lines: List[str], outcome: ComparisonOutcome) -> None:
        lines.append(SLIDE_COUNT_DESCRIPTION)
        if outcome.same_slide_count:
            lines.append(SLIDE_COUNT_SAME + pluralize(outcome.slide_count_a, "slide"))
        else:
            lines.append(SLIDE_COUNT_DIFFERENT)
            lines.append(f"File {outcome.name_a} contains {pluralize(outcome.slide_count_a, 'slide')}")
            lines.append(f"File {outcome.name_b} contains {pluralize(outcome.slide_count_b, 'slide')}")
        lines.append("")

    def _slide_block(self, lines: List[str], slide: SlideComparison) -> None:
        index = slide.index
        lines.append(f"{SLIDE_LABEL}{index + 1}")
        lines.append(SECTION_SEPARATOR)

        if slide.name_differs:
            lines.append(f"{SLIDE_NAME_DIFFERENT}{index}")
            lines.append(f"File A: slide name: {slide.name_a}")
            lines.append(f"File B: slide name: {slide.name_b}")
            lines.append("")

        if slide.same_text:
            lines.append(f"{SLIDE_TEXT_SAME}{index}")
        else:
            lines.append(f"{SLIDE_TEXT_DIFFERENT}{index}")
            lines.extend(self._text_difference(index, slide))

        lines.append(
            f"On slide index {index} File A contains {pluralize(slide.shape_count_a, 'shape')}"
            f" File B contains {pluralize(slide.shape_count_b, 'shape')}"
        )
        lines.append("")

    @staticmethod
    def _text_difference(index: int, slide: SlideComparison) -> List[str]:
        result = slide.text_result
        if isinstance(result, Diverged):
            return [
                f"On slide index {index}{SLIDE_TEXT_EXPECTED}{result.expected}"
                f"{SLIDE_TEXT_ACTUAL}{result.actual_or_empty}{SLIDE_TEXT_CLOSE}"
            ]
        if isinstance(result, ExtraTrailing):
            return [EXTRA_TEXT_FILE[result.side], EXTRA_TEXT + " ".join(result.extra_words), ""]
        if isinstance(result, Identical):
            return []
        raise TypeError(f"Unknown text comparison result: {result!r}")
