"""Entry-point for the PPTX comparison pipeline."""
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from pptx_differ.differ.byte_identity import is_identical
from pptx_differ.differ.slide_comparator import SlideShowComparator
from pptx_differ.model.comparison import ComparisonOutcome
from pptx_differ.model.document_model import DocumentModel
from pptx_differ.parser.pptx_loader import PptxPackage, validate_input_files
from pptx_differ.parser.presentation_parser import PresentationParser
from pptx_differ.renderer.report_writer import ReportWriter
from pptx_differ.renderer.text_report import ReportBuilder
from pptx_differ.utils.debug import DebugDumper
from pptx_differ.utils.logger import get_logger, set_verbose

LOGGER = get_logger(__name__)

EXACT_SAME_FILE_MESSAGE = "The two PowerPoint files are exactly the same."
DIFFERENT_FILES_MESSAGE = "The two PowerPoint files contain differences."

EXIT_IDENTICAL = 0
EXIT_DIFFERENT = 1
EXIT_INVALID_INPUT = 2


@dataclass(frozen=True, slots=True)
class ComparisonRun:
    """Result of comparing two files end to end."""

    identical: bool
    document_a: DocumentModel
    document_b: DocumentModel
    outcome: ComparisonOutcome
    report: str

    @property
    def summary(self) -> str:
        return EXACT_SAME_FILE_MESSAGE if self.identical else DIFFERENT_FILES_MESSAGE


def build_document_model(pptx_path: Union[str, Path]) -> DocumentModel:
    """Load a PPTX package and extract the model the comparator consumes."""
    package = PptxPackage.load(pptx_path)
    return PresentationParser(package).parse()


def compare_files(file_a: Union[str, Path], file_b: Union[str, Path]) -> ComparisonRun:
    """Run the byte check, model extraction, comparison and report for two files."""
    validate_input_files(file_a, file_b)
    path_a = Path(file_a).resolve()
    path_b = Path(file_b).resolve()

    LOGGER.info("Comparing %s with %s", path_a.name, path_b.name)
    identical = is_identical(path_a, path_b)

    document_a = build_document_model(path_a)
    document_b = build_document_model(path_b)
    outcome = SlideShowComparator().compare(document_a, document_b)
    report = ReportBuilder().build(identical, outcome)

    run = ComparisonRun(
        identical=identical,
        document_a=document_a,
        document_b=document_b,
        outcome=outcome,
        report=report,
    )
    LOGGER.info(run.summary)
    return run


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare two PowerPoint (.pptx) files and report the differences")
    parser.add_argument("file_a", help="Path to the first .pptx file (File A)")
    parser.add_argument("file_b", help="Path to the second .pptx file (File B)")
    parser.add_argument("--output", help="Write the report to this file instead of standard output")
    parser.add_argument("--debug-dir", help="Directory to write the extracted models as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the comparison from the command line and return the exit status."""
    args = parse_args(argv)
    set_verbose(args.verbose)

    try:
        run = compare_files(args.file_a, args.file_b)
    except (ValueError, KeyError, OSError) as exc:
        LOGGER.error("Comparison failed: %s", exc)
        print(f"WARNING: Comparison operations failed: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.debug_dir:
        DebugDumper(Path(args.debug_dir)).dump(run.document_a, run.document_b, run.outcome)

    if args.output:
        ReportWriter(Path(args.output)).write(run.report, run.outcome.name_a, run.outcome.name_b)
    else:
        sys.stdout.write(run.report)

    return EXIT_IDENTICAL if run.identical else EXIT_DIFFERENT


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
