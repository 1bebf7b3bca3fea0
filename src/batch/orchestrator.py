# src/batch/orchestrator.py — v1
"""Batch orchestrator: run every file of a directory through the processor.

A bounded pool of worker tasks drains a queue of (index, path) items; the
pool size caps in-flight documents. Per-file failures are captured as
outcomes and never abort the run.

Usage:
    orchestrator = BatchOrchestrator(processor, max_concurrency=4)
    result = await orchestrator.process_directory(Path("inbox"))
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from pathlib import Path
from typing import TYPE_CHECKING

from docinsight.batch.models import BatchResult, FileOutcome
from docinsight.batch.scanner import list_files
from docinsight.core.errors import DocumentError
from docinsight.logging.context import clear_context, set_batch_context

if TYPE_CHECKING:
    from docinsight.batch.progress import ProgressSink
    from docinsight.pipeline.document_processor import DocumentProcessor

logger = logging.getLogger(__name__)


class BatchOrchestrator:
    """Process a directory with at most ``max_concurrency`` documents in flight."""

    def __init__(
        self,
        processor: DocumentProcessor,
        max_concurrency: int | None = None,
    ) -> None:
        if max_concurrency is None:
            max_concurrency = processor.settings.batch_max_concurrency
        if max_concurrency <= 0:
            raise ValueError("max_concurrency must be > 0")
        self._processor = processor
        self._max_concurrency = max_concurrency

    @property
    def max_concurrency(self) -> int:
        return self._max_concurrency

    async def process_directory(
        self,
        scan_root: Path | str,
        progress: ProgressSink | None = None,
        recursive: bool = False,
        cancel_event: asyncio.Event | None = None,
    ) -> BatchResult:
        """Process every file under ``scan_root``.

        Args:
            scan_root: Directory to process.
            progress: Optional sink advanced once per attempted file.
            recursive: Descend into subdirectories.
            cancel_event: When set, workers stop taking new files; files
                already in flight still finish and are reported.

        Raises:
            ValueError: If ``scan_root`` is not a directory.
        """
        t0 = time.perf_counter()
        files = list_files(scan_root, recursive=recursive)
        batch_id = uuid.uuid4().hex[:12]
        set_batch_context(batch_id)
        logger.info(
            "Batch %s: %d files, concurrency=%d",
            batch_id, len(files), self._max_concurrency,
        )
        if progress is not None:
            progress.start(len(files))

        queue: asyncio.Queue[tuple[int, Path]] = asyncio.Queue()
        for item in enumerate(files):
            queue.put_nowait(item)
        # Workers report here; None marks a worker that has exited.
        done: asyncio.Queue[tuple[int, FileOutcome] | None] = asyncio.Queue()

        async def worker() -> None:
            try:
                while not (cancel_event is not None and cancel_event.is_set()):
                    try:
                        index, path = queue.get_nowait()
                    except asyncio.QueueEmpty:
                        return
                    done.put_nowait((index, await self.process_file(path)))
            finally:
                done.put_nowait(None)

        n_workers = min(self._max_concurrency, len(files))
        workers = [asyncio.create_task(worker()) for _ in range(n_workers)]
        slots: list[FileOutcome | None] = [None] * len(files)
        try:
            running = n_workers
            while running:
                item = await done.get()
                if item is None:
                    running -= 1
                    continue
                index, outcome = item
                slots[index] = outcome
                if progress is not None:
                    progress.advance(outcome)
        finally:
            for task in workers:
                task.cancel()
            clear_context()

        outcomes = [o for o in slots if o is not None]
        succeeded = sum(1 for o in outcomes if o.ok)
        result = BatchResult(
            scan_root=str(scan_root),
            outcomes=outcomes,
            total=len(files),
            succeeded=succeeded,
            failed=len(outcomes) - succeeded,
            cancelled=cancel_event is not None and cancel_event.is_set(),
            duration_seconds=round(time.perf_counter() - t0, 2),
        )
        if progress is not None:
            progress.finish(result)
        logger.info(
            "Batch %s finished: %d succeeded, %d failed, %d skipped",
            batch_id, result.succeeded, result.failed, len(files) - len(outcomes),
        )
        return result

    async def process_file(self, path: Path) -> FileOutcome:
        """Run one file through the processor, capturing any failure."""
        try:
            insights = await self._processor.process(path)
        except DocumentError as exc:
            logger.warning("Failed to process %s: %s", path.name, exc)
            return FileOutcome(
                path=str(path), status="failed",
                error_kind=exc.kind, error_message=str(exc),
            )
        except Exception as exc:
            logger.exception("Unexpected error processing %s", path.name)
            return FileOutcome(
                path=str(path), status="failed",
                error_kind="other", error_message=str(exc),
            )
        return FileOutcome(path=str(path), status="succeeded", insights=insights)
