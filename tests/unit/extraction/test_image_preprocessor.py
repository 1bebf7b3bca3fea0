# tests/unit/extraction/test_image_preprocessor.py — v1
"""Tests for extraction/image_preprocessor.py."""

from __future__ import annotations

from PIL import Image

from docinsight.extraction.image_preprocessor import preprocess_image


class TestPreprocessImage:
    def test_grayscale(self):
        out = preprocess_image(Image.new("RGB", (8, 8), color=(255, 0, 0)))
        assert out.mode == "L"
        assert out.size == (8, 8)

    def test_contrast_widens_range(self):
        img = Image.new("L", (2, 1))
        img.putpixel((0, 0), 100)
        img.putpixel((1, 0), 150)
        out = preprocess_image(img, contrast_factor=2.0)
        low, high = out.getpixel((0, 0)), out.getpixel((1, 0))
        assert high - low > 50

    def test_factor_one_is_identity(self):
        img = Image.new("L", (4, 4), color=77)
        assert preprocess_image(img, contrast_factor=1.0).getpixel((0, 0)) == 77

    def test_input_not_modified(self):
        img = Image.new("RGB", (4, 4), color=(10, 20, 30))
        preprocess_image(img)
        assert img.mode == "RGB"
