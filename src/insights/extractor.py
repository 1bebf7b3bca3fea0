# src/insights/extractor.py — v1
"""LLM-backed insight extraction.

Sends one completion request per call and turns the answer into a list of
Insight objects through the tiered parser. The completion call is the only
failure that propagates (as InsightError); malformed output is absorbed.
"""

from __future__ import annotations

import asyncio
import hashlib
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from docinsight.core.errors import InsightError
from docinsight.core.models import Insight
from docinsight.insights.parser import DEFAULT_RELEVANCE, RelevancePolicy, parse_insights
from docinsight.llm.models import Message

if TYPE_CHECKING:
    from docinsight.config.settings import Settings
    from docinsight.llm.base_client import BaseLLMClient

logger = logging.getLogger(__name__)

_PROMPT_DIR = Path(__file__).parent / "prompts"


def _load_prompt(name: str) -> str:
    return (_PROMPT_DIR / name).read_text(encoding="utf-8")


class InsightExtractor:
    """Derive insights (or a prose summary) from raw document text."""

    def __init__(
        self,
        llm: BaseLLMClient,
        settings: Settings | None = None,
        *,
        system_message: str | None = None,
        timeout_seconds: float | None = None,
        default_relevance: float | None = None,
        relevance_policy: RelevancePolicy | None = None,
    ) -> None:
        # Explicit keyword arguments win over settings, settings over defaults
        self._llm = llm
        if settings is not None:
            if system_message is None:
                system_message = settings.llm_system_message
            if timeout_seconds is None:
                timeout_seconds = settings.llm_timeout_seconds
            if default_relevance is None:
                default_relevance = settings.default_relevance
            if relevance_policy is None:
                relevance_policy = settings.relevance_policy
            self._max_tokens = settings.llm_max_tokens
            self._temperature = settings.llm_temperature
        else:
            self._max_tokens = 4096
            self._temperature = 0.2
        self._system_message = system_message
        self._timeout = timeout_seconds
        self._default_relevance = (
            DEFAULT_RELEVANCE if default_relevance is None else default_relevance
        )
        self._relevance_policy: RelevancePolicy = relevance_policy or "keep"
        self._insight_template = _load_prompt("extract_insights.txt")
        self._quick_template = _load_prompt("quick_analyze.txt")

    def build_insight_prompt(self, text: str) -> str:
        return self._insight_template.format(text=text)

    def build_quick_prompt(self, text: str) -> str:
        return self._quick_template.format(text=text)

    async def extract(self, text: str) -> list[Insight]:
        """Extract structured insights from ``text``.

        Raises:
            InsightError: If the completion call fails or times out.
        """
        prompt = self.build_insight_prompt(text)
        raw = await self._complete(prompt)

        outcome = parse_insights(
            raw,
            default_relevance=self._default_relevance,
            relevance_policy=self._relevance_policy,
        )
        logger.debug("Raw model response:\n%s", raw)
        logger.info(
            "Parsed %d insights (tier=%s)", len(outcome.insights), outcome.tier,
        )
        return outcome.insights

    async def quick_analyze(self, text: str) -> str:
        """Return the model's free-form analysis of ``text``."""
        return await self._complete(self.build_quick_prompt(text))

    async def _complete(self, prompt: str) -> str:
        prompt_hash = hashlib.sha256(prompt.encode()).hexdigest()[:16]
        logger.debug(
            "Completion request via %s (prompt_hash=%s, %d chars)",
            self._llm.provider_name, prompt_hash, len(prompt),
        )
        call = self._llm.complete(
            messages=[Message(role="user", content=prompt)],
            system=self._system_message,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
        )
        try:
            if self._timeout is not None:
                response = await asyncio.wait_for(call, timeout=self._timeout)
            else:
                response = await call
        except asyncio.TimeoutError as exc:
            raise InsightError(
                f"Completion timed out after {self._timeout:g}s"
            ) from exc
        except Exception as exc:
            raise InsightError(str(exc) or type(exc).__name__) from exc
        return response.content
