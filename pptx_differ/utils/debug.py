"""Helpers to persist intermediate representations for debugging."""
from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from pptx_differ.model.comparison import ComparisonOutcome
from pptx_differ.model.document_model import DocumentModel

DUMP_FILE_NAME = "comparison.json"


class DebugDumper:
    """Writes intermediate artifacts onto disk for inspection."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def dump(self, doc_a: DocumentModel, doc_b: DocumentModel, outcome: ComparisonOutcome) -> Path:
        """Persist both document models and the outcome as JSON."""
        self.directory.mkdir(parents=True, exist_ok=True)
        payload = {
            "document_a": self._serialize(doc_a),
            "document_b": self._serialize(doc_b),
            "outcome": self._serialize(outcome),
        }
        target = self.directory / DUMP_FILE_NAME
        target.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return target

    def _serialize(self, value: Any) -> Any:
        # slotted dataclasses: walk fields instead of relying on __dict__
        if is_dataclass(value) and not isinstance(value, type):
            result: Dict[str, Any] = {f.name: self._serialize(getattr(value, f.name)) for f in fields(value)}
            return result
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, dict):
            return {k: self._serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._serialize(v) for v in value]
        return value
