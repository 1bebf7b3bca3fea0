# tests/conftest.py — v2
"""Shared test fixtures for all unit and integration tests.

Provides a mock LLM client, test settings and on-the-fly document files.
No external services: the completion call is an AsyncMock and Tesseract is
patched wherever OCR runs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from docinsight.config.settings import Settings
from docinsight.llm.models import LLMResponse

INSIGHTS_JSON = (
    '[{"text": "Revenue grew 12% year over year", "relevance": 0.9}, '
    '{"text": "Costs were flat", "relevance": 0.6}]'
)


# === FIXTURES: Settings ===


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any .env file in the working directory."""
    return Settings(_env_file=None, deepseek_api_key="test-key")


# === FIXTURES: Mock LLM ===


def make_llm(content: str = INSIGHTS_JSON) -> MagicMock:
    """Mock BaseLLMClient whose complete() returns ``content``."""
    llm = MagicMock()
    llm.provider_name = "mock"
    llm.complete = AsyncMock(
        return_value=LLMResponse(
            content=content, model="mock-model", provider="mock",
            input_tokens=100, output_tokens=50,
        )
    )
    return llm


@pytest.fixture
def mock_llm() -> MagicMock:
    return make_llm()


@pytest.fixture
def llm_factory() -> Callable[[str], MagicMock]:
    """Build a mock LLM answering with a given response text."""
    return make_llm


# === FIXTURES: Document files ===


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    path = tmp_path / "notes.txt"
    path.write_text("Quarterly notes\nRevenue grew 12%.\n", encoding="utf-8")
    return path


@pytest.fixture
def xlsx_file(tmp_path: Path) -> Path:
    import openpyxl

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Data"
    ws.append(["Name", "Value"])
    ws.append(["alpha", 1])
    ws.append(["beta", None])
    path = tmp_path / "sheet.xlsx"
    wb.save(path)
    return path


@pytest.fixture
def pdf_file(tmp_path: Path) -> Path:
    import fitz

    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "Hello PDF")
    path = tmp_path / "doc.pdf"
    doc.save(str(path))
    doc.close()
    return path


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    from PIL import Image

    path = tmp_path / "scan.png"
    Image.new("RGB", (64, 32), color=(200, 120, 40)).save(path)
    return path
