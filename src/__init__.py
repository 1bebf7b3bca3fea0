# src/__init__.py — v1
"""docinsight: document text extraction and LLM insight derivation."""

from docinsight.version import __version__

__all__ = ["__version__"]
