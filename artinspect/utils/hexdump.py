#!/usr/bin/env python3
"""Canonical hex dump rendering."""

from pathlib import Path

from ..adapters.file_system import default_file_system
from .logger import get_logger

logger = get_logger(__name__)

BYTES_PER_LINE = 16


def _ascii_column(row: bytes) -> str:
    return "".join(chr(byte) if 32 <= byte <= 126 else "." for byte in row)


def format_hex_dump(data: bytes) -> str:
    """
    Render bytes as offset, hex and ASCII columns, 16 bytes per line.

    Short final rows are padded so the ASCII column stays aligned; an extra
    space separates the two groups of eight hex octets.
    """
    lines = []
    for offset in range(0, len(data), BYTES_PER_LINE):
        row = data[offset : offset + BYTES_PER_LINE]
        hex_column = ""
        for i in range(BYTES_PER_LINE):
            hex_column += f"{row[i]:02X} " if i < len(row) else "   "
            if i == 7:
                hex_column += " "
        lines.append(f"{offset:08X}  {hex_column} |{_ascii_column(row).ljust(BYTES_PER_LINE)}|\n")
    return "".join(lines)


def hex_dump_file(file_path: str | Path, limit: int | None = None) -> str | None:
    """Hex dump of the first ``limit`` bytes of a file (all when None)."""
    try:
        data = default_file_system.read_bytes(file_path, size=limit)
    except (OSError, ValueError) as e:
        logger.debug(f"Cannot read {file_path} for hex dump: {e}")
        return None
    return format_hex_dump(data)
