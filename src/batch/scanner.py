# src/batch/scanner.py — v2
"""Directory listing for batch runs.

Every regular file is listed, supported or not: unsupported files become
failed outcomes rather than being filtered out, so a run's outcome count
always equals the number of files found.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def list_files(scan_root: Path | str, recursive: bool = False) -> list[Path]:
    """Return the regular files under ``scan_root`` in sorted order.

    Args:
        scan_root: Directory to list.
        recursive: Descend into subdirectories.

    Raises:
        ValueError: If ``scan_root`` is not a directory.
    """
    root = Path(scan_root)
    if not root.is_dir():
        msg = f"Scan root is not a directory: {root}"
        raise ValueError(msg)

    pattern_fn = root.rglob if recursive else root.glob
    files = sorted(p for p in pattern_fn("*") if p.is_file())
    logger.info("Scanned %s: found %d files (recursive=%s)", root, len(files), recursive)
    return files
