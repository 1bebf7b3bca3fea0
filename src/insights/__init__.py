"""LLM insight extraction and response parsing."""
