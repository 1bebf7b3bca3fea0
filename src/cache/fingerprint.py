# src/cache/fingerprint.py — v3
"""Cache keys (document identity) for the insight cache.

Three strategies trade lookup cost against staleness:

- ``path``    resolved path only; an edited file keeps returning old insights
- ``mtime``   path + size + modification time; cheap, catches most edits
- ``content`` SHA-256 of the file bytes; exact, also dedups copies of a file
"""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Literal

CacheKeyStrategy = Literal["path", "mtime", "content"]

_READ_CHUNK = 1024 * 1024


def compute_cache_key(path: Path | str, strategy: CacheKeyStrategy = "content") -> str:
    """Return the cache key for ``path`` under ``strategy``.

    Raises:
        OSError: If the file cannot be stat'ed or read (mtime/content).
        ValueError: If ``strategy`` is unknown.
    """
    p = Path(path)
    if strategy == "path":
        return f"path:{p.resolve()}"
    if strategy == "mtime":
        stat = p.stat()
        return f"mtime:{p.resolve()}:{stat.st_size}:{stat.st_mtime_ns}"
    if strategy == "content":
        return f"sha256:{content_hash(p)}"
    raise ValueError(f"Unknown cache key strategy: {strategy!r}")


def content_hash(path: Path) -> str:
    """SHA-256 of the raw file bytes, streamed in 1 MiB chunks."""
    digest = hashlib.sha256()
    with path.open("rb") as fh:
        for chunk in iter(lambda: fh.read(_READ_CHUNK), b""):
            digest.update(chunk)
    return digest.hexdigest()
