#!/usr/bin/env python3
"""
File kind detection from leading magic bytes, with extension fallback
"""

from pathlib import Path

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..core.constants import MAGIC_READ_SIZE
from ..domain import FileKind
from .logger import get_logger
from .magic_patterns import (
    EXTENSION_KINDS,
    FTYP_MARKER,
    FTYP_MIN_LENGTH,
    FTYP_OFFSET,
    MAGIC_SIGNATURES,
    PACKAGE_EXTENSIONS,
    TEXT_CONTROL_BYTES,
    XML_PROLOG,
)

logger = get_logger(__name__)


def file_extension(file_path: str | Path) -> str:
    """Lowercase extension without the leading dot ("" when there is none)"""
    return Path(file_path).suffix.lstrip(".").lower()


def is_probably_text(header: bytes) -> bool:
    """Every byte printable-or-above, or one of tab, LF and CR"""
    return all(byte >= 32 or byte in TEXT_CONTROL_BYTES for byte in header)


class MagicByteDetector:
    """Resolve the FileKind of a file from its content first, its name second"""

    def __init__(self, file_system: FileSystemAdapter | None = None):
        self.file_system = file_system or default_file_system

    def detect_file_type(self, file_path: str | Path) -> FileKind:
        """
        Detect the kind of a file.

        The first 32 bytes are read once; when they cannot be read, or the
        path is not a regular file, the extension table decides on its own.

        Args:
            file_path: Path to file to classify

        Returns:
            The resolved FileKind (never raises for unreadable input)
        """
        try:
            if not self.file_system.is_regular_file(file_path):
                # Opening a FIFO blocks until a writer appears
                return self.detect_by_extension(file_path)
            header = self.file_system.read_bytes(file_path, size=MAGIC_READ_SIZE)
        except (OSError, ValueError) as e:
            logger.debug(f"Could not read magic bytes of {file_path}: {e}")
            return self.detect_by_extension(file_path)

        return self.classify_header(header, file_path)

    def classify_header(self, header: bytes, file_path: str | Path) -> FileKind:
        """Run the priority cascade over an already-read header"""
        extension = file_extension(file_path)

        for magic, kind in MAGIC_SIGNATURES:
            if header.startswith(magic):
                # Signed app bundles are plain zips on the inside
                if kind is FileKind.ARCHIVE and extension in PACKAGE_EXTENSIONS:
                    return FileKind.PACKAGE
                return kind

        # ISO base media box
        if (
            len(header) >= FTYP_MIN_LENGTH
            and header[FTYP_OFFSET : FTYP_OFFSET + len(FTYP_MARKER)] == FTYP_MARKER
        ):
            return FileKind.VIDEO

        if len(header) >= len(XML_PROLOG) and header[: len(XML_PROLOG)] == XML_PROLOG:
            return FileKind.XML

        if is_probably_text(header):
            by_extension = self.detect_by_extension(file_path)
            return FileKind.TEXT if by_extension is FileKind.UNKNOWN else by_extension

        return self.detect_by_extension(file_path)

    @staticmethod
    def detect_by_extension(file_path: str | Path) -> FileKind:
        """Extension table lookup"""
        return EXTENSION_KINDS.get(file_extension(file_path), FileKind.UNKNOWN)


# Global detector instance
global_detector = MagicByteDetector()


def detect_file_type(file_path: str | Path) -> FileKind:
    """
    Detect file kind using magic byte detection

    Args:
        file_path: Path to file to analyze

    Returns:
        FileKind of the file
    """
    return global_detector.detect_file_type(file_path)


def detect_by_extension(file_path: str | Path) -> FileKind:
    return MagicByteDetector.detect_by_extension(file_path)
