#!/usr/bin/env python3
"""
Filesystem metadata probe

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

import stat
from pathlib import Path

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..adapters.magic_adapter import MagicAdapter
from ..adapters.signature_checker import NullSignatureChecker
from ..core.constants import MAGIC_PROBE_SIZE, MAGIC_SAMPLE_SIZE
from ..domain import FileKind
from ..error_handling import FALLBACK_NONE_POLICY, handle_errors
from ..interfaces.tools import SignatureChecker
from ..schemas import FileRecord
from ..utils.logger import get_logger
from ..utils.magic_detector import MagicByteDetector

logger = get_logger(__name__)


def format_magic(header: bytes) -> str:
    """First eight bytes as uppercase hex octets separated by spaces"""
    return " ".join(f"{byte:02X}" for byte in header[:MAGIC_SAMPLE_SIZE])


def format_permissions(mode: int) -> str:
    """Permission bits in octal, e.g. 0o100644 -> "644" """
    return format(stat.S_IMODE(mode), "o")


class MetadataProbe:
    """Build a FileRecord for one path"""

    def __init__(
        self,
        detector: MagicByteDetector | None = None,
        signature_checker: SignatureChecker | None = None,
        magic_adapter: MagicAdapter | None = None,
        file_system: FileSystemAdapter | None = None,
    ) -> None:
        self.file_system = file_system or default_file_system
        self.detector = detector or MagicByteDetector(self.file_system)
        self.signature_checker = signature_checker or NullSignatureChecker()
        self.magic_adapter = magic_adapter

    def probe(self, file_path: str | Path) -> FileRecord | None:
        """
        Collect size, permissions, magic sample and kind of a path.

        Args:
            file_path: Path to a file or directory (symlinks are followed)

        Returns:
            FileRecord, or None when the path cannot be stat-ed
        """
        if not str(file_path):
            raise ValueError("file_path must not be empty")
        return self._probe(file_path)

    @handle_errors(FALLBACK_NONE_POLICY)
    def _probe(self, file_path: str | Path) -> FileRecord | None:
        path = Path(file_path)
        st = self.file_system.stat(path)
        is_directory = stat.S_ISDIR(st.st_mode)

        magic = ""
        kind = FileKind.UNKNOWN
        mime_type = None
        if stat.S_ISREG(st.st_mode):
            magic = self._read_magic(path)
            kind = self.detector.detect_file_type(path)
            if self.magic_adapter is not None and self.magic_adapter.available:
                mime_type = self.magic_adapter.mime_type(path)
        elif not is_directory:
            # Pipes, sockets and devices are never opened
            kind = self.detector.detect_by_extension(path)

        return FileRecord(
            path=str(path),
            name=path.name,
            kind=kind,
            size=st.st_size,
            magic=magic,
            is_directory=is_directory,
            is_executable=bool(st.st_mode & 0o111),
            is_signed=self.signature_checker.is_signed(path),
            permissions=format_permissions(st.st_mode),
            mime_type=mime_type,
        )

    def _read_magic(self, path: Path) -> str:
        try:
            header = self.file_system.read_bytes(path, size=MAGIC_PROBE_SIZE)
        except OSError as e:
            logger.debug(f"Could not read magic sample of {path}: {e}")
            return ""
        return format_magic(header)
