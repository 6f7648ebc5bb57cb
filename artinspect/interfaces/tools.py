#!/usr/bin/env python3
"""
Protocol interfaces for the collaborators the analyzers delegate to

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)

Each protocol describes one external capability. Analyzers only depend on
these shapes, so tests swap in fakes with canned output and callers can
supply null implementations when a tool does not exist on the host.
"""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, NamedTuple, Protocol, runtime_checkable


class ProcessResult(NamedTuple):
    """Exit status and captured standard output of a finished tool"""

    exit_code: int
    stdout: str


@runtime_checkable
class ProcessRunner(Protocol):
    """Run an external command synchronously and capture its output."""

    def run(self, command: str, args: Sequence[str]) -> ProcessResult:
        """
        Run ``command`` with ``args`` and wait for it to finish.

        Raises:
            ToolExecutionError: The command could not be launched or timed out
        """
        ...


@runtime_checkable
class SignatureChecker(Protocol):
    """Answer whether a file or bundle carries a valid code signature."""

    def is_signed(self, path: str | Path) -> bool: ...


@runtime_checkable
class StructureDumper(Protocol):
    """Produce textual views of a Mach-O container's structure."""

    @property
    def available(self) -> bool: ...

    def load_commands(self, path: str | Path) -> str: ...

    def header_flags(self, path: str | Path) -> str: ...

    def describe(self, path: str | Path) -> str: ...


@runtime_checkable
class Unpacker(Protocol):
    """Extract a zip-based archive into a destination directory."""

    @property
    def available(self) -> bool: ...

    def unpack(self, archive: str | Path, destination: str | Path) -> None:
        """
        Raises:
            ExtractionError: The archive could not be extracted
        """
        ...


@runtime_checkable
class PropertyListParser(Protocol):
    """Decode XML or binary property lists."""

    def parse(self, data: bytes) -> Mapping[str, Any]: ...
