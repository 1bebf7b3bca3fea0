# src/llm/base_client.py — v2
"""Abstract LLM client interface (the completion capability).

Network retries, authentication and rate limiting are the provider SDK's
concern; callers needing more resilience wrap the client.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from docinsight.llm.models import LLMResponse, Message


class BaseLLMClient(ABC):
    """Unified interface for all LLM providers."""

    @abstractmethod
    async def complete(
        self,
        messages: list[Message],
        system: str | None = None,
        max_tokens: int = 4096,
        temperature: float = 0.2,
    ) -> LLMResponse:
        """Text completion."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Provider identifier (deepseek, openai, anthropic, ollama)."""

    async def complete_prompt(self, prompt: str, system: str | None = None) -> str:
        """Single-prompt convenience: send one user message, return the text."""
        response = await self.complete(
            [Message(role="user", content=prompt)], system=system,
        )
        return response.content
