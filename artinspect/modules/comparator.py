#!/usr/bin/env python3
"""
Byte-exact file comparison and positional text diffs

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from itertools import zip_longest
from pathlib import Path

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..core.constants import COMPARE_CHUNK_SIZE
from ..error_handling import FALLBACK_NONE_POLICY, fallback_policy, handle_errors
from ..schemas import CompareResult, DiffChange, DiffLine
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Undecodable text is an expected outcome of a diff request
TEXT_DIFF_POLICY = FALLBACK_NONE_POLICY.copy_with_overrides(
    handled_exceptions=frozenset({OSError, UnicodeDecodeError})
)


def _count_differences(left: bytes, right: bytes) -> int:
    return sum(1 for a, b in zip(left, right) if a != b)


@handle_errors(fallback_policy(CompareResult(identical=False, diff_size=0)))
def compare_files(
    file_a: str | Path,
    file_b: str | Path,
    chunk_size: int = COMPARE_CHUNK_SIZE,
    file_system: FileSystemAdapter | None = None,
) -> CompareResult:
    """
    Compare two files byte by byte.

    Files of different size are reported with the absolute size delta and
    no byte scan. Otherwise both files are read in lock-step windows and
    every differing byte position is counted; a pair of windows of unequal
    length adds the length delta and ends the scan.

    Args:
        file_a: First file
        file_b: Second file
        chunk_size: Window size in bytes
        file_system: IO adapter (the real filesystem when None)

    Returns:
        CompareResult(identical, diff_size); (False, 0) when either file
        cannot be opened
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    fs = file_system or default_file_system
    with fs.open_binary(file_a) as handle_a, fs.open_binary(file_b) as handle_b:
        size_a = fs.stat(file_a).st_size
        size_b = fs.stat(file_b).st_size
        if size_a != size_b:
            return CompareResult(identical=False, diff_size=abs(size_a - size_b))

        differences = 0
        while True:
            window_a = handle_a.read(chunk_size)
            window_b = handle_b.read(chunk_size)
            if not window_a and not window_b:
                break
            if len(window_a) != len(window_b):
                # File changed while being read
                differences += abs(len(window_a) - len(window_b))
                break
            differences += _count_differences(window_a, window_b)

    return CompareResult(identical=differences == 0, diff_size=differences)


def classify_line(left: str | None, right: str | None) -> DiffChange:
    if left == right:
        return DiffChange.SAME
    if left is None:
        return DiffChange.ADDED
    if right is None:
        return DiffChange.REMOVED
    return DiffChange.CHANGED


def diff_lines(left_lines: list[str], right_lines: list[str]) -> list[DiffLine]:
    """Pair lines by position and classify each pair"""
    return [
        DiffLine(line_number=index, change=classify_line(left, right), left=left, right=right)
        for index, (left, right) in enumerate(zip_longest(left_lines, right_lines), start=1)
    ]


def _read_lines(file_path: str | Path) -> list[str]:
    return default_file_system.read_bytes(file_path).decode("utf-8").split("\n")


@handle_errors(TEXT_DIFF_POLICY)
def diff_text_files(file_a: str | Path, file_b: str | Path) -> list[DiffLine] | None:
    """
    Positional line diff of two UTF-8 text files.

    Returns:
        One DiffLine per line position, or None when either file cannot be
        read or is not valid UTF-8
    """
    return diff_lines(_read_lines(file_a), _read_lines(file_b))
