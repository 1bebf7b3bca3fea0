# tests/unit/extraction/test_extractor_factory.py — v3
"""Tests for extraction/extractor_factory.py."""

from __future__ import annotations

import pytest

from docinsight.extraction import extractor_factory

from docinsight.config.settings import Settings
from docinsight.core.errors import UnsupportedFileTypeError
from docinsight.extraction.docx_extractor import WordExtractor
from docinsight.extraction.extractor_factory import (
    create_extractor,
    family_for,
    register_extractor,
    supported_extensions,
)
from docinsight.extraction.ocr_extractor import OcrExtractor
from docinsight.extraction.pdf_extractor import PdfExtractor
from docinsight.extraction.txt_extractor import TextExtractor
from docinsight.extraction.xlsx_extractor import SpreadsheetExtractor


class TestCreateExtractor:
    @pytest.mark.parametrize("ext,cls", [
        ("pdf", PdfExtractor),
        ("xlsx", SpreadsheetExtractor),
        ("xls", SpreadsheetExtractor),
        ("docx", WordExtractor),
        ("doc", WordExtractor),
        ("png", OcrExtractor),
        ("jpeg", OcrExtractor),
        ("tga", OcrExtractor),
        ("txt", TextExtractor),
        ("md", TextExtractor),
        ("rs", TextExtractor),
        ("yml", TextExtractor),
    ])
    def test_routing(self, ext, cls):
        assert isinstance(create_extractor(ext), cls)

    def test_dot_and_case_insensitive(self):
        assert isinstance(create_extractor(".PDF"), PdfExtractor)

    def test_unsupported(self):
        with pytest.raises(UnsupportedFileTypeError, match="xyz"):
            create_extractor("xyz")

    def test_ocr_uses_settings(self):
        s = Settings(_env_file=None, ocr_language="deu", ocr_contrast_factor=2.0)
        ext = create_extractor("png", s)
        assert isinstance(ext, OcrExtractor)
        assert ext.language == "deu"


class TestFamilies:
    @pytest.mark.parametrize("ext,family", [
        ("pdf", "pdf"), ("xls", "spreadsheet"), ("doc", "word"),
        ("webp", "image"), ("json", "text"),
    ])
    def test_family(self, ext, family):
        assert family_for(ext) == family

    def test_unknown_family(self):
        assert family_for("exe") is None


class TestSupportedExtensions:
    def test_covers_every_family(self):
        exts = supported_extensions()
        for ext in ["pdf", "xlsx", "docx", "png", "ico", "txt", "toml", "sh"]:
            assert ext in exts
        assert exts == sorted(exts)

    def test_sets_are_disjoint(self):
        seen: set[str] = set()
        for cls in [PdfExtractor, SpreadsheetExtractor, WordExtractor, OcrExtractor, TextExtractor]:
            exts = set(cls().supported_extensions)
            assert not exts & seen
            seen |= exts


class TestRegisterExtractor:
    @pytest.fixture(autouse=True)
    def _isolated_registry(self, monkeypatch):
        monkeypatch.setattr(
            extractor_factory, "_EXTRACTOR_REGISTRY",
            dict(extractor_factory._EXTRACTOR_REGISTRY),
        )

    def test_new_extension_routes(self):
        assert family_for("nfo") is None
        register_extractor(".NFO", TextExtractor)
        assert isinstance(create_extractor("nfo"), TextExtractor)
        assert family_for("nfo") == "text"
        assert "nfo" in supported_extensions()

    def test_override_existing_extension(self):
        register_extractor("md", OcrExtractor)
        assert isinstance(create_extractor("md"), OcrExtractor)
        assert family_for("md") == "image"
