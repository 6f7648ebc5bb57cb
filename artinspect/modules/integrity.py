#!/usr/bin/env python3
"""SHA-256 integrity verification."""

from pathlib import Path

from ..core.constants import DIGEST_CHUNK_SIZE
from ..utils.hashing import compute_digests
from ..utils.logger import get_logger

logger = get_logger(__name__)


def verify_file_integrity(
    file_path: str | Path, expected_sha256: str, chunk_size: int = DIGEST_CHUNK_SIZE
) -> bool:
    """
    Check a file against an expected SHA-256 hex digest.

    The comparison ignores case and surrounding whitespace. A file that
    cannot be hashed never verifies.
    """
    digests = compute_digests(file_path, chunk_size=chunk_size)
    if digests is None:
        return False
    matches = digests.sha256 == expected_sha256.strip().lower()
    if not matches:
        logger.debug(f"SHA-256 mismatch for {file_path}")
    return matches
