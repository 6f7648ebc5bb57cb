#!/usr/bin/env python3
"""Filesystem adapter for controlled IO access."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import BinaryIO


class FileSystemAdapter:
    """Provide a minimal filesystem access abstraction."""

    def read_bytes(self, path: str | Path, size: int | None = None) -> bytes:
        with self.open_binary(path) as handle:
            return handle.read() if size is None else handle.read(size)

    def open_binary(self, path: str | Path) -> BinaryIO:
        return Path(path).open("rb")

    def stat(self, path: str | Path) -> os.stat_result:
        return os.stat(path)

    def is_regular_file(self, path: str | Path) -> bool:
        """True only for regular files (follows symlinks)."""
        return stat.S_ISREG(self.stat(path).st_mode)

    def list_directory(self, path: str | Path) -> list[os.DirEntry[str]]:
        """Entries of a directory, sorted by name."""
        with os.scandir(path) as entries:
            return sorted(entries, key=lambda entry: entry.name)


default_file_system = FileSystemAdapter()
