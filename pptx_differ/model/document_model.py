"""Structured representation of a parsed presentation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Slide:
    """Single slide with the data the comparator consumes."""

    name: str
    number: int
    shape_count: int
    text: str = ""


@dataclass(frozen=True, slots=True)
class DocumentModel:
    """Immutable presentation model produced once per comparison run."""

    name: str
    slides: Tuple[Slide, ...] = field(default_factory=tuple)
    metadata: str = ""
    whole_text: str = ""

    @property
    def slide_count(self) -> int:
        return len(self.slides)
