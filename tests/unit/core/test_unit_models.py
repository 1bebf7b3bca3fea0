# tests/unit/core/test_unit_models.py — v2
"""Tests for core/models.py."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest
from pydantic import ValidationError

from docinsight.core.models import ExtractionRequest, FileInfo, Insight, InsightRecord


class TestInsight:
    def test_fields(self):
        i = Insight(text="a", relevance=0.9)
        assert i.text == "a"
        assert i.relevance == 0.9

    def test_frozen(self):
        i = Insight(text="a", relevance=0.9)
        with pytest.raises(ValidationError):
            i.text = "b"  # type: ignore[misc]

    def test_str(self):
        assert str(Insight(text="Revenue up", relevance=0.876)) == (
            "Insight: Revenue up (Relevance: 0.88)"
        )

    def test_equality(self):
        assert Insight(text="a", relevance=0.5) == Insight(text="a", relevance=0.5)

    def test_relevance_out_of_range_accepted(self):
        assert Insight(text="a", relevance=1.7).relevance == 1.7

    def test_requires_relevance(self):
        with pytest.raises(ValidationError):
            Insight(text="a")  # type: ignore[call-arg]


class TestInsightRecord:
    def test_default_category(self):
        r = InsightRecord(document_path="a.txt", text="x", relevance=0.1)
        assert r.category == "analysis"


class TestExtractionRequest:
    def test_path_coerced(self):
        req = ExtractionRequest(path="dir/a.pdf", extension="pdf")  # type: ignore[arg-type]
        assert req.path == Path("dir/a.pdf")


class TestFileInfo:
    def test_json_dump(self):
        info = FileInfo(
            path="/tmp/a.md", name="a.md", extension="md", size_bytes=3,
            modified_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
            supported=True, family="text",
        )
        data = info.model_dump(mode="json")
        assert data["modified_at"].startswith("2024-01-01")
        assert data["within_size_limit"] is True
