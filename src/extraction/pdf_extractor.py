# src/extraction/pdf_extractor.py — v2
"""PDF extractor using PyMuPDF (fitz).

Walks the page tree and returns the concatenated page text.
Requires the 'pymupdf' package.
"""

from __future__ import annotations

import logging
from pathlib import Path

from docinsight.core.errors import PdfExtractionError
from docinsight.extraction.base_extractor import BaseExtractor

logger = logging.getLogger(__name__)


class PdfExtractor(BaseExtractor):
    """Extractor for PDF files using PyMuPDF."""

    error_cls = PdfExtractionError
    family = "pdf"

    @property
    def supported_extensions(self) -> list[str]:
        return ["pdf"]

    def extract_text(self, path: Path) -> str:
        """Extract the text layer of every page, joined by newlines."""
        try:
            import fitz  # PyMuPDF
        except ImportError as e:
            raise ImportError(
                "pymupdf package required for PDF extraction: pip install pymupdf"
            ) from e

        parts: list[str] = []
        with fitz.open(str(path)) as doc:
            for page in doc:
                parts.append(page.get_text("text"))
            logger.debug("Extracted %d pages from %s", len(parts), path.name)

        return "\n".join(parts)
