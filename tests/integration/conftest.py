# tests/integration/conftest.py — v8
"""Shared fixtures for integration tests.

Everything runs against the real extractors and the real pipeline; only the
completion endpoint (MockLLMClient) and the Tesseract binary are replaced.
"""

from __future__ import annotations

from typing import Any

import pytest
import pytesseract

from docinsight.config.settings import Settings
from docinsight.llm.base_client import BaseLLMClient
from docinsight.llm.models import LLMResponse, Message


# =====================================================================
#  MOCK LLM CLIENT
# =====================================================================

class MockLLMClient(BaseLLMClient):
    """Scripted BaseLLMClient: queued responses first, then a default."""

    def __init__(self, default_response: str = "[]"):
        self._default_response = default_response
        self._response_queue: list[str] = []
        self.calls: list[dict[str, Any]] = []

    def set_responses(self, *responses: str) -> None:
        self._response_queue = list(responses)

    def set_default(self, response: str) -> None:
        self._default_response = response

    async def complete(
        self,
        messages: list[Message],
        system: str | None = None,
        max_tokens: int = 4096,
        temperature: float = 0.2,
    ) -> LLMResponse:
        content = self._response_queue.pop(0) if self._response_queue else self._default_response
        self.calls.append({
            "messages": messages, "system": system,
            "max_tokens": max_tokens, "temperature": temperature,
        })
        return LLMResponse(
            content=content, input_tokens=50, output_tokens=len(content) // 4,
            model="mock-model", provider="mock", latency_ms=10,
            raw_response={"mock": True},
        )

    @property
    def provider_name(self) -> str:
        return "mock"


@pytest.fixture
def mock_client() -> MockLLMClient:
    return MockLLMClient(
        default_response='```json\n[{"text": "Mock insight", "relevance": 0.7}]\n```'
    )


@pytest.fixture
def int_settings() -> Settings:
    return Settings(
        _env_file=None,
        deepseek_api_key="test-key",
        cache_capacity=8,
        batch_max_concurrency=3,
    )


@pytest.fixture
def fake_tesseract(monkeypatch):
    """Replace Tesseract with a function reporting the image it was given."""
    seen: list[str] = []

    def image_to_string(image_path, lang="eng", **kwargs):
        seen.append(image_path)
        return "TEXT FROM IMAGE"

    monkeypatch.setattr(pytesseract, "image_to_string", image_to_string)
    return seen
