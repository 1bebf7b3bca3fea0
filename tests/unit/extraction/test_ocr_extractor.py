# tests/unit/extraction/test_ocr_extractor.py — v1
"""Tests for extraction/ocr_extractor.py (Tesseract is patched)."""

from __future__ import annotations

import asyncio
import threading
from pathlib import Path

import pytest
import pytesseract

from docinsight.core.errors import OcrExtractionError
from docinsight.extraction.ocr_extractor import OCR_EXTENSIONS, OcrExtractor, enhanced_path_for


class _FakeTesseract:
    def __init__(self, text: str = "recognised text", exc: Exception | None = None):
        self.text = text
        self.exc = exc
        self.calls: list[tuple[str, str]] = []
        self.saw_file = False

    def __call__(self, image_path, lang="eng", **kwargs):
        self.calls.append((image_path, lang))
        self.saw_file = Path(image_path).exists()
        if self.exc is not None:
            raise self.exc
        return self.text


def _leftovers(image: Path) -> list[Path]:
    return sorted(image.parent.glob("*.enhanced.png"))


class TestOcrExtractor:
    def test_extensions(self):
        assert set(OcrExtractor().supported_extensions) == {
            "jpg", "jpeg", "png", "gif", "bmp", "tiff", "webp", "ico", "tga",
        }
        assert len(OCR_EXTENSIONS) == 9

    def test_enhanced_path_is_sibling(self, tmp_path):
        assert enhanced_path_for(tmp_path / "a.jpg", "t1") == tmp_path / "a.jpg.t1.enhanced.png"

    def test_enhanced_path_token_differs_per_call(self, tmp_path):
        first = enhanced_path_for(tmp_path / "a.jpg")
        second = enhanced_path_for(tmp_path / "a.jpg")
        assert first != second
        assert first.parent == tmp_path
        assert first.name.startswith("a.jpg.")
        assert first.name.endswith(".enhanced.png")

    @pytest.mark.asyncio
    async def test_success_removes_temp_file(self, png_file, monkeypatch):
        fake = _FakeTesseract()
        monkeypatch.setattr(pytesseract, "image_to_string", fake)
        text = await OcrExtractor(language="fra").extract(png_file)
        assert text == "recognised text"
        assert fake.saw_file is True
        temp_path = Path(fake.calls[0][0])
        assert fake.calls[0][1] == "fra"
        assert temp_path.parent == png_file.parent
        assert temp_path.name.startswith(f"{png_file.name}.")
        assert temp_path.name.endswith(".enhanced.png")
        assert not temp_path.exists()

    @pytest.mark.asyncio
    async def test_engine_failure_removes_temp_file(self, png_file, monkeypatch):
        fake = _FakeTesseract(exc=pytesseract.TesseractError(1, "engine crashed"))
        monkeypatch.setattr(pytesseract, "image_to_string", fake)
        with pytest.raises(OcrExtractionError, match="Tesseract failed"):
            await OcrExtractor().extract(png_file)
        assert _leftovers(png_file) == []

    @pytest.mark.asyncio
    async def test_missing_binary(self, png_file, monkeypatch):
        fake = _FakeTesseract(exc=pytesseract.TesseractNotFoundError())
        monkeypatch.setattr(pytesseract, "image_to_string", fake)
        with pytest.raises(OcrExtractionError, match="not found"):
            await OcrExtractor().extract(png_file)
        assert _leftovers(png_file) == []

    @pytest.mark.asyncio
    async def test_unreadable_image(self, tmp_path, monkeypatch):
        fake = _FakeTesseract()
        monkeypatch.setattr(pytesseract, "image_to_string", fake)
        path = tmp_path / "fake.png"
        path.write_bytes(b"not an image")
        with pytest.raises(OcrExtractionError, match="Failed to open image"):
            await OcrExtractor().extract(path)
        assert fake.calls == []

    @pytest.mark.asyncio
    async def test_repeated_calls_are_independent(self, png_file, monkeypatch):
        monkeypatch.setattr(pytesseract, "image_to_string", _FakeTesseract("x"))
        ocr = OcrExtractor()
        assert await ocr.extract(png_file) == "x"
        assert await ocr.extract(png_file) == "x"

    @pytest.mark.asyncio
    async def test_concurrent_calls_use_distinct_temp_files(self, png_file, monkeypatch):
        barrier = threading.Barrier(2, timeout=5)
        seen: list[str] = []

        def overlapping(image_path, lang="eng", **kwargs):
            seen.append(image_path)
            barrier.wait()
            assert Path(image_path).exists()
            return "x"

        monkeypatch.setattr(pytesseract, "image_to_string", overlapping)
        ocr = OcrExtractor()
        results = await asyncio.gather(ocr.extract(png_file), ocr.extract(png_file))
        assert results == ["x", "x"]
        assert len(set(seen)) == 2
        assert _leftovers(png_file) == []
