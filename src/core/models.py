# src/core/models.py — v1
"""Shared Pydantic domain models used across modules.

No module redefines these types; all imports come from core.models.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict


# === INSIGHTS ===


class Insight(BaseModel):
    """A single piece of knowledge derived from a document's text.

    Relevance is reported by the model and nominally lies in [0, 1]; the
    range is enforced only when a relevance policy other than ``keep`` is
    configured (see insights/parser.py).
    """

    model_config = ConfigDict(frozen=True)

    text: str
    relevance: float

    def __str__(self) -> str:
        return f"Insight: {self.text} (Relevance: {self.relevance:.2f})"


class InsightRecord(BaseModel):
    """Row handed to a persistence collaborator, one per insight."""

    document_path: str
    text: str
    relevance: float
    category: str = "analysis"


# === EXTRACTION ===


class ExtractionRequest(BaseModel):
    """A file path plus the extension that selects its extractor."""

    path: Path
    extension: str


class FileInfo(BaseModel):
    """Filesystem metadata about a candidate document."""

    path: str
    name: str
    extension: str | None = None
    size_bytes: int
    modified_at: datetime
    supported: bool
    family: str | None = None
    within_size_limit: bool = True

