# src/llm/adapters/ollama_adapter.py — v2
"""Ollama local LLM adapter implementing BaseLLMClient.

Uses the ollama Python SDK against a local or LAN server; no API key involved.
Recent SDK releases return typed ``ChatResponse`` objects while older ones
return plain dicts, so response fields are read through ``_field``.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from docinsight.llm.base_client import BaseLLMClient
from docinsight.llm.models import LLMResponse, Message

logger = logging.getLogger(__name__)


class OllamaAdapter(BaseLLMClient):
    """Ollama local inference adapter."""

    def __init__(
        self,
        model: str = "llama3",
        host: str = "http://localhost:11434",
        keep_alive: str | None = None,
        **kwargs: Any,
    ) -> None:
        self._model = model
        self._host = host
        self._keep_alive = keep_alive
        self.__client = None

    @property
    def _client(self):
        """Lazy-init the async client (only on first API call)."""
        if self.__client is None:
            import ollama

            self.__client = ollama.AsyncClient(host=self._host)
            logger.debug("Ollama client bound to %s", self._host)
        return self.__client

    async def complete(
        self,
        messages: list[Message],
        system: str | None = None,
        max_tokens: int = 4096,
        temperature: float = 0.2,
    ) -> LLMResponse:
        chat: list[dict[str, str]] = [{"role": "system", "content": system}] if system else []
        chat.extend({"role": m.role, "content": m.content} for m in messages)

        request: dict[str, Any] = {
            "model": self._model,
            "messages": chat,
            "options": {"num_predict": max_tokens, "temperature": temperature},
        }
        if self._keep_alive is not None:
            request["keep_alive"] = self._keep_alive

        started = time.monotonic()
        resp = await self._client.chat(**request)
        elapsed_ms = int((time.monotonic() - started) * 1000)

        message = _field(resp, "message")
        return LLMResponse(
            content=_field(message, "content") or "",
            input_tokens=_field(resp, "prompt_eval_count") or 0,
            output_tokens=_field(resp, "eval_count") or 0,
            model=self._model,
            provider="ollama",
            latency_ms=elapsed_ms,
            raw_response=resp,
        )

    @property
    def provider_name(self) -> str:
        return "ollama"


def _field(obj: Any, name: str) -> Any:
    """Read ``name`` from a dict-shaped or attribute-shaped SDK response."""
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)
