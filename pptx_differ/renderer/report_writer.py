"""Persist a rendered difference report as a text file."""
from __future__ import annotations

from pathlib import Path

from pptx_differ.utils.logger import get_logger

LOGGER = get_logger(__name__)

REPORT_TITLE = "PowerPoint File Comparison Report"


class ReportWriter:
    """Write the report, prefixed with a title and both file names."""

    def __init__(self, output_path: Path) -> None:
        if output_path is None:
            raise ValueError("The report file must not be None.")
        self._output_path = Path(output_path)

    def write(self, report: str, name_a: str, name_b: str) -> Path:
        header = f"{REPORT_TITLE}\n\nFile A: {name_a}\nFile B: {name_b}\n\n"
        self._output_path.parent.mkdir(parents=True, exist_ok=True)
        self._output_path.write_text(header + report, encoding="utf-8")
        LOGGER.info("Report written to %s", self._output_path)
        return self._output_path
