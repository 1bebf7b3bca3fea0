# src/logging/context.py — v2
"""Contextual logging support: attach document path and batch id to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging, set per document / per batch.
_document_path: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "document_path", default=None
)
_batch_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "batch_id", default=None
)
_stage: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "stage", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    document_path: str | None = None
    batch_id: str | None = None
    stage: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        document_path=_document_path.get(),
        batch_id=_batch_id.get(),
        stage=_stage.get(),
    )


def set_document_context(document_path: str, stage: str | None = None) -> None:
    """Set document-level context (called once per processed document)."""
    _document_path.set(document_path)
    _stage.set(stage)


def set_stage(stage: str | None) -> None:
    """Mark the pipeline stage (extraction, insights, ...) for the current document."""
    _stage.set(stage)


def set_batch_context(batch_id: str) -> None:
    """Set batch-level context (called once per directory run)."""
    _batch_id.set(batch_id)


def clear_context() -> None:
    """Reset all context variables."""
    _document_path.set(None)
    _batch_id.set(None)
    _stage.set(None)
