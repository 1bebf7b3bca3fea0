# src/llm/client_factory.py — v3
"""Factory: instantiate LLM client from provider name.

Credentials come from the Settings object passed in; the factory never reads
the environment itself.
"""

from __future__ import annotations

import importlib
import logging

from docinsight.config.settings import Settings
from docinsight.llm.base_client import BaseLLMClient

logger = logging.getLogger(__name__)

# Registry of provider name → adapter class path (lazy import).
_PROVIDER_REGISTRY: dict[str, str] = {
    "deepseek": "docinsight.llm.adapters.openai_adapter.OpenAIAdapter",
    "openai": "docinsight.llm.adapters.openai_adapter.OpenAIAdapter",
    "anthropic": "docinsight.llm.adapters.anthropic_adapter.AnthropicAdapter",
    "ollama": "docinsight.llm.adapters.ollama_adapter.OllamaAdapter",
}

_DEEPSEEK_BASE_URL = "https://api.deepseek.com"


class UnsupportedProviderError(ValueError):
    """Raised when a provider is not registered."""


def create_llm_client(
    provider: str,
    model: str,
    settings: Settings | None = None,
    **kwargs: object,
) -> BaseLLMClient:
    """Instantiate the correct adapter from provider name.

    Args:
        provider: Provider identifier (deepseek, openai, anthropic, ollama).
        model: Model name (e.g. deepseek-chat).
        settings: Application settings (for API keys and endpoints).
        **kwargs: Additional provider-specific arguments.

    Returns:
        Configured BaseLLMClient instance.

    Raises:
        UnsupportedProviderError: If provider is not registered.
    """
    if provider not in _PROVIDER_REGISTRY:
        raise UnsupportedProviderError(
            f"Unsupported LLM provider: {provider!r}. "
            f"Available: {', '.join(sorted(_PROVIDER_REGISTRY))}"
        )

    adapter_cls = _import_class(_PROVIDER_REGISTRY[provider])

    init_kwargs: dict[str, object] = {"model": model}
    if settings is not None:
        init_kwargs.update(_connection_kwargs(provider, settings))
    elif provider == "deepseek":
        init_kwargs.update(provider="deepseek", base_url=_DEEPSEEK_BASE_URL)
    init_kwargs.update(kwargs)

    logger.debug("Creating LLM client: provider=%s, model=%s", provider, model)
    return adapter_cls(**init_kwargs)


def create_client_from_settings(settings: Settings) -> BaseLLMClient:
    """Build the client configured by ``LLM_PROVIDER`` / ``LLM_MODEL``."""
    return create_llm_client(settings.llm_provider, settings.llm_model, settings)


def _connection_kwargs(provider: str, settings: Settings) -> dict[str, object]:
    """Endpoint and credential arguments for a built-in provider."""
    if provider == "deepseek":
        # DeepSeek speaks the OpenAI chat-completions protocol
        return {
            "provider": "deepseek",
            "api_key": settings.deepseek_api_key,
            "base_url": settings.deepseek_base_url,
        }
    if provider == "openai":
        return {"api_key": settings.openai_api_key}
    if provider == "anthropic":
        return {"api_key": settings.anthropic_api_key}
    if provider == "ollama":
        return {"host": settings.ollama_base_url}
    return {}


def register_provider(name: str, class_path: str) -> None:
    """Register a custom provider adapter.

    Args:
        name: Provider identifier.
        class_path: Fully qualified class path implementing BaseLLMClient.
    """
    _PROVIDER_REGISTRY[name] = class_path
    logger.info("Registered LLM provider: %s -> %s", name, class_path)


def _import_class(class_path: str) -> type:
    """Dynamically import a class from its fully qualified path."""
    module_path, class_name = class_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)
