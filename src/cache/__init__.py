"""Insight result caching."""
