# src/insights/parser.py — v1
"""Tiered parser for model output that is supposed to be a JSON insight array.

The model is asked for ``[{"text": ..., "relevance": ...}, ...]`` but is not
guaranteed to comply. Parsing walks a fixed ladder and stops at the first
tier that succeeds:

    1. strict: sanitized text parses as the target schema
    2. repaired: sanitized text wrapped in ``[...]`` parses
    3. fallback: one insight per non-empty line of the *original* response

Tier 3 cannot fail, so malformed output never surfaces as an error. Each tier
is a standalone function so it can be tested on its own.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from typing import Literal

from pydantic import TypeAdapter

from docinsight.core.models import Insight

logger = logging.getLogger(__name__)

DEFAULT_RELEVANCE = 0.8

ParseTier = Literal["strict", "repaired", "fallback"]
RelevancePolicy = Literal["keep", "clamp", "reject"]

_INSIGHT_LIST = TypeAdapter(list[Insight])
_LANGUAGE_TAGS = ("json", "JSON")


@dataclass
class ParseOutcome:
    """Insights plus the ladder tier that produced them."""

    insights: list[Insight] = field(default_factory=list)
    tier: ParseTier = "fallback"


def sanitize_response(raw: str) -> str:
    """Strip whitespace, code fences and a leading language tag; normalise quotes.

    Single quotes are replaced wholesale, which also rewrites apostrophes in
    the insight text. A response damaged that way fails the strict tier and
    lands in the fallback tier instead.
    """
    text = raw.strip().strip("`")
    for tag in _LANGUAGE_TAGS:
        if text.startswith(tag):
            text = text[len(tag):]
            break
    return text.replace("'", '"').strip()


def parse_strict(text: str) -> list[Insight] | None:
    """Parse ``text`` as a JSON array of insight objects, or return None."""
    try:
        data = json.loads(text)
        return _INSIGHT_LIST.validate_python(data)
    except (ValueError, OverflowError, RecursionError, TypeError) as exc:
        # ValueError covers JSONDecodeError, ValidationError and the int-digit limit
        logger.debug("Strict insight parse failed: %s", exc)
        return None


def repair_brackets(text: str) -> str | None:
    """Wrap a bare object, or anything not already an array, in ``[...]``.

    Returns None when ``text`` already starts with ``[`` (nothing to repair).
    """
    if text.startswith("{") and text.endswith("}"):
        return f"[{text}]"
    if not text.startswith("["):
        return f"[{text}]"
    return None


def fallback_lines(raw: str, default_relevance: float = DEFAULT_RELEVANCE) -> list[Insight]:
    """One insight per non-empty line of ``raw``, each with ``default_relevance``."""
    return [
        Insight(text=line.strip(), relevance=default_relevance)
        for line in raw.splitlines()
        if line.strip()
    ]


def apply_relevance_policy(
    insights: list[Insight], policy: RelevancePolicy,
) -> list[Insight] | None:
    """Enforce the [0, 1] relevance range according to ``policy``.

    ``keep`` returns the input untouched, ``clamp`` pins values into range,
    ``reject`` returns None if any value is out of range. Non-finite values
    (NaN, Infinity) reject the parse under both ``clamp`` and ``reject``.
    """
    if policy == "keep":
        return insights
    if not all(math.isfinite(i.relevance) for i in insights):
        logger.debug("Rejecting parse: non-finite relevance")
        return None
    out_of_range = [i for i in insights if not 0.0 <= i.relevance <= 1.0]
    if not out_of_range:
        return insights
    if policy == "reject":
        logger.debug("Rejecting parse: %d relevance values out of range", len(out_of_range))
        return None
    return [
        i.model_copy(update={"relevance": min(max(i.relevance, 0.0), 1.0)})
        for i in insights
    ]


def parse_insights(
    raw: str,
    default_relevance: float = DEFAULT_RELEVANCE,
    relevance_policy: RelevancePolicy = "keep",
) -> ParseOutcome:
    """Run the full ladder over a raw model response."""
    sanitized = sanitize_response(raw)

    strict = parse_strict(sanitized)
    if strict is not None:
        strict = apply_relevance_policy(strict, relevance_policy)
        if strict is not None:
            return ParseOutcome(insights=strict, tier="strict")

    repaired_text = repair_brackets(sanitized)
    if repaired_text is not None:
        repaired = parse_strict(repaired_text)
        if repaired is not None:
            repaired = apply_relevance_policy(repaired, relevance_policy)
            if repaired is not None:
                return ParseOutcome(insights=repaired, tier="repaired")

    return ParseOutcome(insights=fallback_lines(raw, default_relevance), tier="fallback")
