# src/extraction/extractor_factory.py — v3
"""Factory: instantiate extractor from a file extension.

Routing is a static extension → extractor-class table built from each
extractor's ``supported_extensions``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docinsight.core.errors import UnsupportedFileTypeError
from docinsight.extraction.base_extractor import BaseExtractor
from docinsight.extraction.docx_extractor import WordExtractor
from docinsight.extraction.ocr_extractor import OcrExtractor
from docinsight.extraction.pdf_extractor import PdfExtractor
from docinsight.extraction.txt_extractor import TextExtractor
from docinsight.extraction.xlsx_extractor import SpreadsheetExtractor

if TYPE_CHECKING:
    from docinsight.config.settings import Settings

# Registry maps extension (no dot, lower-case) → extractor class.
_EXTRACTOR_REGISTRY: dict[str, type[BaseExtractor]] = {}


def _register_defaults() -> None:
    """Register built-in extractors."""
    for cls in [PdfExtractor, SpreadsheetExtractor, WordExtractor,
                OcrExtractor, TextExtractor]:
        instance = cls()
        for ext in instance.supported_extensions:
            _EXTRACTOR_REGISTRY[ext.lower()] = cls


_register_defaults()


def _normalize(extension: str) -> str:
    return extension.lower().lstrip(".")


def create_extractor(
    extension: str, settings: Settings | None = None,
) -> BaseExtractor:
    """Create an extractor for the given file extension.

    Args:
        extension: File extension, with or without dot (e.g. "pdf", ".PNG").
        settings: Application settings; supplies OCR language and contrast.

    Returns:
        BaseExtractor instance.

    Raises:
        UnsupportedFileTypeError: If no extractor is registered.
    """
    cls = _EXTRACTOR_REGISTRY.get(_normalize(extension))
    if cls is None:
        raise UnsupportedFileTypeError(extension)
    if cls is OcrExtractor and settings is not None:
        return OcrExtractor(
            language=settings.ocr_language,
            contrast_factor=settings.ocr_contrast_factor,
        )
    return cls()


def family_for(extension: str) -> str | None:
    """Return the extractor family for an extension, or None if unsupported."""
    cls = _EXTRACTOR_REGISTRY.get(_normalize(extension))
    return None if cls is None else cls.family


def register_extractor(extension: str, cls: type[BaseExtractor]) -> None:
    """Register a custom extractor for an extension."""
    _EXTRACTOR_REGISTRY[_normalize(extension)] = cls


def supported_extensions() -> list[str]:
    """Return list of supported file extensions."""
    return sorted(_EXTRACTOR_REGISTRY.keys())
