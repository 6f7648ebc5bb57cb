#!/usr/bin/env python3
"""Directory scanning on top of the metadata probe."""

import os
from collections.abc import Iterator
from pathlib import Path

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..error_handling import FALLBACK_LIST_POLICY, handle_errors
from ..schemas import FileRecord
from ..utils.logger import get_logger
from .metadata_probe import MetadataProbe

logger = get_logger(__name__)


def is_hidden(name: str) -> bool:
    return name.startswith(".")


class DirectoryScanner:
    """List the visible entries of a directory as FileRecords"""

    def __init__(
        self,
        probe: MetadataProbe | None = None,
        file_system: FileSystemAdapter | None = None,
    ) -> None:
        self.file_system = file_system or default_file_system
        self.probe = probe or MetadataProbe(file_system=self.file_system)

    def scan(self, root: str | Path, recursive: bool = False) -> list[FileRecord]:
        """
        Scan a directory.

        Entries come back in name order; in recursive mode a directory is
        reported before its children. Hidden entries are skipped and never
        descended into, symlinked directories are reported but not followed.

        Args:
            root: Directory to scan
            recursive: Descend into subdirectories

        Returns:
            List of FileRecords, empty when the root cannot be listed
        """
        if not str(root):
            raise ValueError("root must not be empty")
        return self._scan(root, recursive)

    @handle_errors(FALLBACK_LIST_POLICY)
    def _scan(self, root: str | Path, recursive: bool) -> list[FileRecord]:
        entries = self.file_system.list_directory(root)
        records: list[FileRecord] = []
        for entry in entries:
            records.extend(self._visit(entry, recursive))
        return records

    def _visit(self, entry: os.DirEntry, recursive: bool) -> Iterator[FileRecord]:
        if is_hidden(entry.name):
            return

        record = self.probe.probe(entry.path)
        if record is None:
            logger.debug(f"Skipping {entry.path}: cannot stat")
            return
        yield record

        if not recursive:
            return

        try:
            if not entry.is_dir(follow_symlinks=False):
                return
            children = self.file_system.list_directory(entry.path)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {entry.path}: {e}")
            return
        for child in children:
            yield from self._visit(child, recursive)
