# src/pipeline/document_processor.py — v1
"""Document processor: route a file to its extractor, then derive insights.

    path → extension → extractor (static table) → size check → cache lookup
         → extract text (worker thread) → InsightExtractor → cache store

Usage:
    processor = DocumentProcessor(settings, llm)
    insights = await processor.process("report.pdf")
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from docinsight.cache.cache_factory import create_cache_store
from docinsight.cache.fingerprint import compute_cache_key
from docinsight.config.settings import Settings
from docinsight.core.errors import (
    DocumentIOError,
    FileTooLargeError,
    InvalidExtensionError,
)
from docinsight.core.models import ExtractionRequest, FileInfo, Insight, InsightRecord
from docinsight.extraction.extractor_factory import create_extractor, family_for
from docinsight.insights.extractor import InsightExtractor
from docinsight.logging.context import set_document_context, set_stage

if TYPE_CHECKING:
    from docinsight.cache.base_cache_store import BaseCacheStore
    from docinsight.extraction.base_extractor import BaseExtractor
    from docinsight.llm.base_client import BaseLLMClient

logger = logging.getLogger(__name__)

_DEFAULT_CACHE = object()


class DocumentProcessor:
    """Turns a document path into insights, text, or a prose analysis."""

    def __init__(
        self,
        settings: Settings | None = None,
        llm: BaseLLMClient | None = None,
        cache: BaseCacheStore | None | object = _DEFAULT_CACHE,
        insight_extractor: InsightExtractor | None = None,
    ) -> None:
        self._settings = settings or Settings()
        if insight_extractor is None:
            if llm is None:
                from docinsight.llm.client_factory import create_client_from_settings

                llm = create_client_from_settings(self._settings)
            insight_extractor = InsightExtractor(llm, self._settings)
        self._insights = insight_extractor
        if cache is _DEFAULT_CACHE:
            cache = create_cache_store(self._settings)
        self._cache: BaseCacheStore | None = cache  # type: ignore[assignment]
        self._extractors: dict[str, BaseExtractor] = {}

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def cache(self) -> BaseCacheStore | None:
        return self._cache

    # --- Routing / validation ---

    @staticmethod
    def build_request(path: Path | str) -> ExtractionRequest:
        """Derive the extension that selects the extractor.

        Raises:
            InvalidExtensionError: If the path has no extension.
        """
        p = Path(path)
        extension = p.suffix.lower().lstrip(".")
        if not extension:
            raise InvalidExtensionError(str(path))
        return ExtractionRequest(path=p, extension=extension)

    def extractor_for(self, extension: str) -> BaseExtractor:
        """Return the (reused, stateless) extractor for ``extension``.

        Raises:
            UnsupportedFileTypeError: If no extractor handles the extension.
        """
        extractor = self._extractors.get(extension)
        if extractor is None:
            extractor = create_extractor(extension, self._settings)
            self._extractors[extension] = extractor
        return extractor

    def validate_file(self, path: Path | str) -> int:
        """Check the size ceiling; return the file size in bytes.

        Raises:
            FileTooLargeError: If the file exceeds ``max_file_size_bytes``.
            DocumentIOError: If the file cannot be stat'ed.
        """
        try:
            size = Path(path).stat().st_size
        except OSError as exc:
            raise DocumentIOError(f"Cannot access {path}: {exc}") from exc
        limit = self._settings.max_file_size_bytes
        if size > limit:
            raise FileTooLargeError(size, limit)
        return size

    # --- Operations ---

    async def extract_text(self, path: Path | str) -> str:
        """Route, validate and extract raw text, without calling the model."""
        try:
            request, extractor = self._prepare(path)
            return await self._run_extractor(request, extractor)
        finally:
            set_stage(None)

    async def process(self, path: Path | str) -> list[Insight]:
        """Extract a document and return its insights, memoized by cache key.

        A cache hit skips both extraction and the completion call.

        Raises:
            DocumentError: Any routing, validation, extraction or completion
                failure, unchanged.
        """
        try:
            request, extractor = self._prepare(path)

            key = self._cache_key(request.path)
            if key is not None:
                cached = self._cache.get(key)  # type: ignore[union-attr]
                if cached is not None:
                    logger.info(
                        "Cache hit for %s (%d insights)", request.path.name, len(cached),
                    )
                    return cached

            text = await self._run_extractor(request, extractor)

            set_stage("insights")
            insights = await self._insights.extract(text)

            if key is not None:
                self._cache.put(key, insights)  # type: ignore[union-attr]
            return insights
        finally:
            set_stage(None)

    async def quick_analyze(self, path: Path | str) -> str:
        """Extract a document and return the model's free-form analysis."""
        try:
            request, extractor = self._prepare(path)
            text = await self._run_extractor(request, extractor)
            set_stage("quick_analyze")
            return await self._insights.quick_analyze(text)
        finally:
            set_stage(None)

    def file_info(self, path: Path | str) -> FileInfo:
        """Filesystem metadata plus whether the pipeline would accept the file."""
        p = Path(path)
        try:
            stat = p.stat()
        except OSError as exc:
            raise DocumentIOError(f"Failed to get file info for {path}: {exc}") from exc
        extension = p.suffix.lower().lstrip(".") or None
        family = family_for(extension) if extension else None
        return FileInfo(
            path=str(p),
            name=p.name,
            extension=extension,
            size_bytes=stat.st_size,
            modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            supported=family is not None,
            family=family,
            within_size_limit=stat.st_size <= self._settings.max_file_size_bytes,
        )

    @staticmethod
    def to_records(
        path: Path | str, insights: list[Insight], category: str = "analysis",
    ) -> list[InsightRecord]:
        """Shape insights for a persistence collaborator."""
        return [
            InsightRecord(
                document_path=str(path),
                text=insight.text,
                relevance=insight.relevance,
                category=category,
            )
            for insight in insights
        ]

    # --- Internal helpers ---

    def _cache_key(self, path: Path) -> str | None:
        if self._cache is None:
            return None
        try:
            return compute_cache_key(path, self._settings.cache_key_strategy)
        except OSError as exc:
            raise DocumentIOError(f"Cannot read {path}: {exc}") from exc

    def _prepare(self, path: Path | str) -> tuple[ExtractionRequest, BaseExtractor]:
        """Extension check, extractor lookup, then size check, in that order."""
        request = self.build_request(path)
        set_document_context(str(request.path), stage="routing")
        extractor = self.extractor_for(request.extension)
        self.validate_file(request.path)
        return request, extractor

    async def _run_extractor(
        self, request: ExtractionRequest, extractor: BaseExtractor,
    ) -> str:
        set_stage("extraction")
        t0 = time.perf_counter()
        text = await extractor.extract(request.path)
        logger.info(
            "Extracted %d chars from %s via %s in %.2fs",
            len(text), request.path.name, type(extractor).__name__,
            time.perf_counter() - t0,
        )
        return text
