# src/extraction/image_preprocessor.py — v1
"""Image normalisation applied before OCR: grayscale, then contrast boost."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import ImageEnhance, ImageOps

if TYPE_CHECKING:
    from PIL import Image

DEFAULT_CONTRAST_FACTOR = 1.5


def preprocess_image(
    image: Image.Image, contrast_factor: float = DEFAULT_CONTRAST_FACTOR,
) -> Image.Image:
    """Return a grayscale copy of ``image`` with contrast multiplied by ``contrast_factor``.

    Grayscale removes colour noise; the contrast pass widens the gap between
    glyph and background intensities, which improves Tesseract's segmentation.
    """
    gray = ImageOps.grayscale(image)
    return ImageEnhance.Contrast(gray).enhance(contrast_factor)
