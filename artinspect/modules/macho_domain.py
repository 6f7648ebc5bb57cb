#!/usr/bin/env python3
"""Mach-O header and tool-output helpers."""

from __future__ import annotations

from typing import NamedTuple

from ..core.constants import FAT_HEADER_SIZE, MACHO_MAGIC_SIZE
from ..utils.magic_patterns import FAT_64_MAGICS, FAT_MAGICS, MACHO_32_MAGICS, MACHO_64_MAGICS

ENCRYPTION_COMMAND = "LC_ENCRYPTION_INFO"
ENCRYPTED_MARKER = "cryptid 1"
PIE_FLAG = "PIE"
LOAD_COMMAND_MARKER = "Load command"
ARM64E_MARKER = "arm64e"


class HeaderInfo(NamedTuple):
    label: str
    is_64bit: bool
    architecture_count: int


def fat_architecture_count(header: bytes) -> int:
    """Big-endian nfat_arch from bytes 4-7, never below 1"""
    if len(header) < FAT_HEADER_SIZE:
        return 1
    count = int.from_bytes(header[MACHO_MAGIC_SIZE:FAT_HEADER_SIZE], "big")
    return max(count, 1)


def parse_header(header: bytes) -> HeaderInfo | None:
    """
    Decode the leading magic of a container.

    Returns None when the magic is not a Mach-O or fat magic, or fewer than
    four bytes are available.
    """
    if len(header) < MACHO_MAGIC_SIZE:
        return None
    magic = header[:MACHO_MAGIC_SIZE]
    if magic in MACHO_32_MAGICS:
        return HeaderInfo("arm", False, 1)
    if magic in MACHO_64_MAGICS:
        return HeaderInfo("arm64", True, 1)
    if magic in FAT_MAGICS:
        return HeaderInfo("universal", True, fat_architecture_count(header))
    if magic in FAT_64_MAGICS:
        return HeaderInfo("universal", True, 1)
    return None


def has_encryption(load_commands: str) -> bool:
    return ENCRYPTION_COMMAND in load_commands and ENCRYPTED_MARKER in load_commands


def is_position_independent(header_flags: str) -> bool:
    return PIE_FLAG in header_flags


def count_load_commands(load_commands: str) -> int:
    return sum(1 for line in load_commands.splitlines() if LOAD_COMMAND_MARKER in line)


def is_arm64e(label: str, description: str) -> bool:
    # Only single-image arm64 containers are checked
    return "arm64" in label and ARM64E_MARKER in description.lower()
