# src/batch/progress.py — v1
"""Progress reporting for directory runs.

The orchestrator reports through any object with ``start``/``advance``/
``finish``; the CLI plugs in ``LoggingProgressSink``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from docinsight.batch.models import BatchResult, FileOutcome

logger = logging.getLogger(__name__)


@runtime_checkable
class ProgressSink(Protocol):
    """Receives one ``advance`` per attempted file."""

    def start(self, total: int) -> None: ...

    def advance(self, outcome: FileOutcome) -> None: ...

    def finish(self, result: BatchResult) -> None: ...


class LoggingProgressSink:
    """Logs a ``[done/total]`` line per file."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger
        self.total = 0
        self.done = 0

    def start(self, total: int) -> None:
        self.total = total
        self.done = 0
        self._log.info("Processing %d files", total)

    def advance(self, outcome: FileOutcome) -> None:
        self.done += 1
        if outcome.ok:
            self._log.info(
                "[%d/%d] %s: %d insights",
                self.done, self.total, outcome.path, len(outcome.insights),
            )
        else:
            self._log.warning(
                "[%d/%d] %s failed (%s): %s",
                self.done, self.total, outcome.path,
                outcome.error_kind, outcome.error_message,
            )

    def finish(self, result: BatchResult) -> None:
        self._log.info(
            "Batch done in %.2fs: %d succeeded, %d failed%s",
            result.duration_seconds, result.succeeded, result.failed,
            " (cancelled)" if result.cancelled else "",
        )
