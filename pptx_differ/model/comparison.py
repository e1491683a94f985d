"""Result types produced by the comparison engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

EMPTY_WORD = "[EMPTY]"


class Side(str, Enum):
    """Which of the two compared documents a finding refers to."""

    A = "A"
    B = "B"


@dataclass(frozen=True, slots=True)
class Identical:
    """Both word sequences match over their full length."""

    kind: str = field(default="identical", init=False)


@dataclass(frozen=True, slots=True)
class Diverged:
    """First position where the two word sequences differ."""

    index: int
    expected: str
    actual: Optional[str]
    kind: str = field(default="diverged", init=False)

    @property
    def actual_or_empty(self) -> str:
        return self.actual if self.actual else EMPTY_WORD


@dataclass(frozen=True, slots=True)
class ExtraTrailing:
    """The longer sequence carries words beyond the end of the shorter one."""

    side: Side
    extra_words: Tuple[str, ...]
    kind: str = field(default="extra_trailing", init=False)


DiffResult = Union[Identical, Diverged, ExtraTrailing]


@dataclass(frozen=True, slots=True)
class SlideComparison:
    """Per-index comparison of two slides."""

    index: int
    name_a: str
    name_b: str
    text_result: DiffResult
    shape_count_a: int
    shape_count_b: int

    @property
    def name_differs(self) -> bool:
        return self.name_a != self.name_b

    @property
    def same_text(self) -> bool:
        return isinstance(self.text_result, Identical)


@dataclass(frozen=True, slots=True)
class ComparisonOutcome:
    """Everything the report builder needs from one comparison run."""

    name_a: str
    name_b: str
    slide_count_a: int
    slide_count_b: int
    same_metadata: bool
    same_whole_text: bool
    slides: Tuple[SlideComparison, ...] = field(default_factory=tuple)

    @property
    def same_slide_count(self) -> bool:
        return self.slide_count_a == self.slide_count_b
