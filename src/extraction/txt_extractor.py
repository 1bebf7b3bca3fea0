# src/extraction/txt_extractor.py — v3
"""Plain text / source code extractor: passthrough without transformation."""

from __future__ import annotations

from pathlib import Path

from docinsight.core.errors import TextExtractionError
from docinsight.extraction.base_extractor import BaseExtractor


class TextExtractor(BaseExtractor):
    """Extractor for plain text, markup, config and source files."""

    error_cls = TextExtractionError
    family = "text"

    @property
    def supported_extensions(self) -> list[str]:
        return [
            "txt", "md", "rs", "py", "js", "ts", "json", "yaml", "yml",
            "toml", "csv", "html", "css", "sh",
        ]

    def extract_text(self, path: Path) -> str:
        """Read the file as UTF-8; undecodable bytes are an error, not replaced."""
        return path.read_text(encoding="utf-8")
