# tests/unit/logging/test_unit_handlers.py — v2
"""Tests for logging/handlers.py — file rotation handler."""

from __future__ import annotations

import pytest

from docinsight.logging.handlers import create_rotating_handler, parse_size


class TestParseSize:
    def test_mb(self):
        assert parse_size("10MB") == 10 * 1024 * 1024

    def test_kb_with_space(self):
        assert parse_size("512 KB") == 512 * 1024

    def test_gb(self):
        assert parse_size("1GB") == 1024 * 1024 * 1024

    def test_bare_number_is_bytes(self):
        assert parse_size("4096") == 4096

    def test_int_passthrough(self):
        assert parse_size(100) == 100

    def test_case_insensitive(self):
        assert parse_size("10mb") == 10 * 1024 * 1024

    def test_invalid_format(self):
        with pytest.raises(ValueError, match="Invalid size"):
            parse_size("10bytes")


class TestCreateRotatingHandler:
    def test_creates_handler(self, tmp_path):
        handler = create_rotating_handler(tmp_path / "test.log", rotation="1MB", retention=3)
        assert handler.maxBytes == 1024 * 1024
        assert handler.backupCount == 3
        handler.close()

    def test_creates_parent_dirs_lazily(self, tmp_path):
        log_file = tmp_path / "subdir" / "deep" / "test.log"
        handler = create_rotating_handler(log_file)
        assert log_file.parent.exists()
        assert not log_file.exists()
        handler.close()
