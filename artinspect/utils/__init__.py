#!/usr/bin/env python3
"""
artinspect Utilities
"""

from .hashing import calculate_hashes, compute_digests
from .logger import get_logger, setup_logger

__all__ = [
    "get_logger",
    "setup_logger",
    "calculate_hashes",
    "compute_digests",
]
