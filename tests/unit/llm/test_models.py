# tests/unit/llm/test_models.py — v2
"""Tests for llm/models.py."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from docinsight.llm.models import LLMResponse, Message


class TestMessage:
    def test_roles(self):
        assert Message(role="system", content="x").role == "system"

    def test_invalid_role(self):
        with pytest.raises(ValidationError):
            Message(role="tool", content="x")  # type: ignore[arg-type]


class TestLLMResponse:
    def test_total_tokens(self):
        r = LLMResponse(content="x", input_tokens=10, output_tokens=5, model="m", provider="p")
        assert r.total_tokens == 15
