# src/batch/models.py — v2
"""Batch processing models: FileOutcome, BatchResult."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from docinsight.core.models import Insight


class FileOutcome(BaseModel):
    """Result of one attempted file in a directory run."""

    path: str
    status: Literal["succeeded", "failed"]
    insights: list[Insight] = Field(default_factory=list)
    error_kind: str | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "succeeded"


class BatchResult(BaseModel):
    """Summary of a directory run.

    ``outcomes`` follows the sorted listing order regardless of which worker
    finished first. ``total`` counts files found; when the run is cancelled,
    files never attempted have no outcome.
    """

    scan_root: str
    outcomes: list[FileOutcome] = Field(default_factory=list)
    total: int = 0
    succeeded: int = 0
    failed: int = 0
    cancelled: bool = False
    duration_seconds: float = 0.0

    @property
    def failures(self) -> list[FileOutcome]:
        return [o for o in self.outcomes if not o.ok]
