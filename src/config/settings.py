# src/config/settings.py — v2
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for all deployment-specific settings. A Settings
instance is built once (by the CLI or the embedding application) and passed
into DocumentProcessor, InsightExtractor and the LLM client factory; no module
below this layer reads the environment directly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MIB = 1024 * 1024

# Providers that talk to a hosted API and therefore need a key.
_HOSTED_PROVIDERS = {"deepseek", "openai", "anthropic"}


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === LLM PROVIDER ===
    llm_provider: Literal["deepseek", "openai", "anthropic", "ollama"] = "deepseek"
    llm_model: str = "deepseek-chat"
    llm_temperature: float = 0.2
    llm_max_tokens: int = 4096
    llm_timeout_seconds: float | None = 120.0
    llm_system_message: str = "You are a document analyzer."

    # Provider credentials / endpoints
    deepseek_api_key: str = ""
    deepseek_base_url: str = "https://api.deepseek.com"
    openai_api_key: str = ""
    anthropic_api_key: str = ""
    ollama_base_url: str = "http://localhost:11434"

    # === Document limits ===
    max_file_size_bytes: int = 10 * MIB

    # === Cache ===
    cache_enabled: bool = True
    cache_capacity: int = 128
    cache_key_strategy: Literal["path", "mtime", "content"] = "content"

    # === OCR ===
    ocr_language: str = "eng"
    ocr_contrast_factor: float = 1.5

    # === Insight parsing ===
    default_relevance: float = 0.8
    relevance_policy: Literal["keep", "clamp", "reject"] = "keep"

    # === Batch ===
    batch_max_concurrency: int = 4

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("default_relevance")
    @classmethod
    def validate_default_relevance(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("default_relevance must be within [0, 1]")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate numeric limits that pydantic types cannot express."""
        errors: list[str] = []

        if self.max_file_size_bytes <= 0:
            errors.append("MAX_FILE_SIZE_BYTES must be > 0")
        if self.cache_capacity <= 0:
            errors.append("CACHE_CAPACITY must be > 0")
        if self.batch_max_concurrency <= 0:
            errors.append("BATCH_MAX_CONCURRENCY must be > 0")
        if self.ocr_contrast_factor <= 0:
            errors.append("OCR_CONTRAST_FACTOR must be > 0")
        if self.llm_timeout_seconds is not None and self.llm_timeout_seconds <= 0:
            errors.append("LLM_TIMEOUT_SECONDS must be > 0 when set")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def api_key(self) -> str:
        """API key for the configured provider ("" for local providers)."""
        return {
            "deepseek": self.deepseek_api_key,
            "openai": self.openai_api_key,
            "anthropic": self.anthropic_api_key,
        }.get(self.llm_provider, "")

    def require_api_key(self) -> str:
        """Return the provider key, failing fast if a hosted provider has none."""
        if self.llm_provider in _HOSTED_PROVIDERS and not self.api_key:
            raise ConfigurationError(
                f"{self.llm_provider.upper()}_API_KEY must be set "
                f"when LLM_PROVIDER={self.llm_provider}"
            )
        return self.api_key


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-call config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
