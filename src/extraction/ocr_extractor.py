# src/extraction/ocr_extractor.py — v1
"""OCR extractor: Pillow preprocessing + Tesseract via pytesseract.

The enhanced image is written to a sibling temp file
(``<path>.<token>.enhanced.png``, one token per call) because Tesseract
consumes a file path. Concurrent calls on the same image never share a temp
file, and each file is removed on every exit path. pytesseract spawns one
tesseract process per call, so the extractor keeps no engine state between
calls.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path

from docinsight.core.errors import OcrExtractionError
from docinsight.extraction.base_extractor import BaseExtractor
from docinsight.extraction.image_preprocessor import (
    DEFAULT_CONTRAST_FACTOR,
    preprocess_image,
)

logger = logging.getLogger(__name__)

OCR_EXTENSIONS: list[str] = [
    "jpg", "jpeg", "png", "gif", "bmp", "tiff", "webp", "ico", "tga",
]


def enhanced_path_for(path: Path, token: str | None = None) -> Path:
    """Temp file used to hand the preprocessed image to Tesseract.

    A fresh random ``token`` is drawn when none is given.
    """
    if token is None:
        token = uuid.uuid4().hex[:12]
    return path.with_name(f"{path.name}.{token}.enhanced.png")


class OcrExtractor(BaseExtractor):
    """Extractor for raster images."""

    error_cls = OcrExtractionError
    family = "image"

    def __init__(
        self,
        language: str = "eng",
        contrast_factor: float = DEFAULT_CONTRAST_FACTOR,
    ) -> None:
        self._language = language
        self._contrast_factor = contrast_factor

    @property
    def supported_extensions(self) -> list[str]:
        return list(OCR_EXTENSIONS)

    @property
    def language(self) -> str:
        return self._language

    def extract_text(self, path: Path) -> str:
        from PIL import Image, UnidentifiedImageError

        try:
            with Image.open(path) as img:
                processed = preprocess_image(img, self._contrast_factor)
        except (OSError, UnidentifiedImageError) as exc:
            raise OcrExtractionError(f"Failed to open image: {exc}") from exc

        temp_path = enhanced_path_for(path)
        try:
            processed.save(temp_path, format="PNG")
            return self._recognize(temp_path)
        finally:
            temp_path.unlink(missing_ok=True)

    def _recognize(self, image_path: Path) -> str:
        """Run Tesseract on ``image_path`` with the configured language."""
        import pytesseract

        try:
            text = pytesseract.image_to_string(str(image_path), lang=self._language)
        except pytesseract.TesseractNotFoundError as exc:
            raise OcrExtractionError("Tesseract binary not found on PATH") from exc
        except pytesseract.TesseractError as exc:
            raise OcrExtractionError(f"Tesseract failed: {exc}") from exc

        logger.debug("OCR recognised %d chars from %s", len(text), image_path.name)
        return text
