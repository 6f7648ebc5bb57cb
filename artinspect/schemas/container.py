#!/usr/bin/env python3
"""
Executable container (Mach-O) record schema.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Literal

from pydantic import Field

from .base import RecordBase

ArchitectureSummary = Literal["arm", "arm64", "universal", "unknown"]


class ContainerRecord(RecordBase):
    """
    Structural facts about a native executable container.

    Attributes:
        is_valid: Whether the leading magic was recognised
        is_64bit: 64-bit single image, or any universal container
        is_arm64e: Pointer-authentication sub-architecture detected
        architecture_count: Number of images behind the header (at least 1)
        architecture_summary: "arm", "arm64", "universal" or "unknown"
        has_encryption: An encryption-info load command with cryptid 1
        is_position_independent: Header flags include PIE
        load_command_count: Number of load commands in the dump
    """

    is_valid: bool = False
    is_64bit: bool = False
    is_arm64e: bool = False
    architecture_count: int = Field(1, ge=1)
    architecture_summary: ArchitectureSummary = "unknown"
    has_encryption: bool = False
    is_position_independent: bool = False
    load_command_count: int = Field(0, ge=0)

    @classmethod
    def invalid(cls) -> "ContainerRecord":
        """Record returned for unrecognised or unreadable containers"""
        return cls()
