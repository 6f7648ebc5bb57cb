#!/usr/bin/env python3
"""
artinspect Pydantic Schemas

Immutable, validated records returned by the inspection engine.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .base import RecordBase
from .compare import CompareResult, DiffChange, DiffLine
from .container import ContainerRecord
from .files import DigestSet, FileRecord
from .package import PackageRecord

__all__ = [
    "RecordBase",
    "FileRecord",
    "DigestSet",
    "ContainerRecord",
    "PackageRecord",
    "CompareResult",
    "DiffChange",
    "DiffLine",
]
