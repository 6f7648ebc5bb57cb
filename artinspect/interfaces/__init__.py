#!/usr/bin/env python3
"""
artinspect Interfaces Module

Protocol-based interfaces for the external capabilities the analyzers rely
on. Any class that implements the required methods satisfies the protocol;
no inheritance is needed.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)

Key Interfaces:
    ProcessRunner: Synchronous child-process execution
    SignatureChecker: Code signature presence check
    StructureDumper: Textual Mach-O structure dumps
    Unpacker: Zip-based archive extraction
    PropertyListParser: Property list decoding

Example:
    >>> from artinspect.interfaces import SignatureChecker
    >>>
    >>> class AlwaysSigned:
    ...     def is_signed(self, path):
    ...         return True
    >>>
    >>> assert isinstance(AlwaysSigned(), SignatureChecker)
"""

from .tools import (
    ProcessResult,
    ProcessRunner,
    PropertyListParser,
    SignatureChecker,
    StructureDumper,
    Unpacker,
)

__all__ = [
    "ProcessResult",
    "ProcessRunner",
    "SignatureChecker",
    "StructureDumper",
    "Unpacker",
    "PropertyListParser",
]
