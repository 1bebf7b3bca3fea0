# src/extraction/base_extractor.py — v2
"""Abstract extractor interface for document formats.

Extractors are stateless: each call opens, reads and closes whatever it needs.
The parsing libraries are synchronous, so ``extract`` runs ``extract_text`` in
a worker thread and the event loop stays free for concurrent documents.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from docinsight.core.errors import DocumentError, OtherDocumentError

logger = logging.getLogger(__name__)


class BaseExtractor(ABC):
    """Unified interface for document format extractors."""

    #: Error type used to wrap library failures raised by ``extract_text``.
    error_cls: type[DocumentError] = OtherDocumentError

    #: Family name reported in FileInfo / logs ("text", "pdf", ...).
    family: str = "unknown"

    @property
    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """File extensions this extractor handles, without dot (e.g. ['pdf'])."""

    @abstractmethod
    def extract_text(self, path: Path) -> str:
        """Synchronously extract plain text from the file at ``path``."""

    def is_supported(self, extension: str) -> bool:
        """Pure allow-list lookup; callers may short-circuit before extracting."""
        return extension.lower().lstrip(".") in self.supported_extensions

    async def extract(self, path: Path) -> str:
        """Extract text off the event loop, wrapping failures in ``error_cls``."""
        try:
            return await asyncio.to_thread(self.extract_text, Path(path))
        except DocumentError:
            raise
        except Exception as exc:
            logger.debug("%s failed on %s: %s", type(self).__name__, path, exc)
            raise self.error_cls(str(exc)) from exc
