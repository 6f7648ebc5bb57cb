#!/usr/bin/env python3
"""
artinspect - Binary artifact introspection engine
Classifies files by content, hashes them, and inspects Mach-O containers
and application packages

Author: Marc Rivero (@seifreed)
License: GPL-3.0
"""

from .__version__ import __author__, __author_email__, __license__, __url__, __version__

__description__ = "Binary artifact introspection engine"

from .config import Config
from .core.inspector import ArtifactInspector
from .domain import FileKind
from .factory import create_inspector
from .schemas import (
    CompareResult,
    ContainerRecord,
    DiffChange,
    DiffLine,
    DigestSet,
    FileRecord,
    PackageRecord,
)

__all__ = [
    "ArtifactInspector",
    "Config",
    "FileKind",
    "FileRecord",
    "DigestSet",
    "ContainerRecord",
    "PackageRecord",
    "CompareResult",
    "DiffChange",
    "DiffLine",
    "create_inspector",
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__url__",
    "__description__",
]
