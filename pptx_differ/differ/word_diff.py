"""Locate the first point two word sequences diverge."""
from __future__ import annotations

from typing import Sequence

from pptx_differ.model.comparison import DiffResult, Diverged, ExtraTrailing, Identical, Side


def locate(words_a: Sequence[str], words_b: Sequence[str]) -> DiffResult:
    """Compare two word sequences position by position.

    Returns ``Diverged`` for the first index where the words differ,
    ``ExtraTrailing`` when one sequence is a strict prefix of the other, and
    ``Identical`` otherwise. Never raises for finite sequences.
    """
    overlap = min(len(words_a), len(words_b))
    for index in range(overlap):
        if words_a[index] != words_b[index]:
            return Diverged(index=index, expected=words_a[index], actual=words_b[index])

    if len(words_a) == len(words_b):
        return Identical()
    if len(words_a) > len(words_b):
        return ExtraTrailing(side=Side.A, extra_words=tuple(words_a[overlap:]))
    return ExtraTrailing(side=Side.B, extra_words=tuple(words_b[overlap:]))


def split_words(text: str) -> list[str]:
    """Split normalized slide text into words."""
    return text.split()
