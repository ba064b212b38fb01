"""Shared file operation utilities."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


def file_digest(path: Path, algo: str = "sha1") -> bytes:
    """Hash a file's entire content.

    Args:
        path: File to read
        algo: Any algorithm name accepted by hashlib.new

    Returns:
        Raw digest bytes

    Raises:
        OSError: If the file cannot be opened or read
    """
    h = hashlib.new(algo)
    with Path(path).open("rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            h.update(chunk)
    logger.debug(f"{algo} of {path}: {h.hexdigest()}")
    return h.digest()
