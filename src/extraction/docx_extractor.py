# src/extraction/docx_extractor.py — v2
"""Word-processor extractor: best-effort salvage of embedded text bytes.

This does not parse the OOXML / OLE container of .docx and .doc files. It
reads the raw bytes and decodes them, falling back to a lossy decode with
replacement characters, so the caller always gets *some* text to analyse.
"""

from __future__ import annotations

import logging
from pathlib import Path

from docinsight.core.errors import WordExtractionError
from docinsight.extraction.base_extractor import BaseExtractor

logger = logging.getLogger(__name__)


class WordExtractor(BaseExtractor):
    """Extractor for Word documents (.docx, .doc)."""

    error_cls = WordExtractionError
    family = "word"

    @property
    def supported_extensions(self) -> list[str]:
        return ["docx", "doc"]

    def extract_text(self, path: Path) -> str:
        return self.decode_bytes(path.read_bytes())

    @staticmethod
    def decode_bytes(raw: bytes) -> str:
        """Strict UTF-8 decode, lossy decode on failure."""
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Strict UTF-8 decode failed, using lossy decode")
            return raw.decode("utf-8", errors="replace")
