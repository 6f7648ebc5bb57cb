#!/usr/bin/env python3
"""
Hashing utilities for artinspect
"""

import hashlib
from pathlib import Path

from ..core.constants import DIGEST_CHUNK_SIZE
from ..schemas import DigestSet
from .logger import get_logger

logger = get_logger(__name__)


def compute_digests(file_path: str | Path, chunk_size: int = DIGEST_CHUNK_SIZE) -> DigestSet | None:
    """
    Calculate MD5, SHA-1 and SHA-256 of a file in a single streaming pass.

    Args:
        file_path: Path to the file to hash
        chunk_size: Read window in bytes

    Returns:
        DigestSet with all three digests, or None if the file cannot be read
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    md5_hash = hashlib.md5(usedforsecurity=False)
    sha1_hash = hashlib.sha1(usedforsecurity=False)
    sha256_hash = hashlib.sha256()

    try:
        with open(file_path, "rb") as f:
            while chunk := f.read(chunk_size):
                md5_hash.update(chunk)
                sha1_hash.update(chunk)
                sha256_hash.update(chunk)
    except (OSError, ValueError) as e:
        logger.debug(f"Cannot hash {file_path}: {e}")
        return None

    return DigestSet(
        md5=md5_hash.hexdigest(),
        sha1=sha1_hash.hexdigest(),
        sha256=sha256_hash.hexdigest(),
    )


def calculate_hashes(file_path: str | Path) -> dict[str, str]:
    """Digests as a plain dict; empty strings when the file cannot be read"""
    digests = compute_digests(file_path)
    if digests is None:
        return {"md5": "", "sha1": "", "sha256": ""}
    return digests.to_dict()
