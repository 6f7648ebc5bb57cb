#!/usr/bin/env python3
"""Inspection facade bundling every analyzer behind one object."""

from pathlib import Path

from ..domain import FileKind
from ..modules.comparator import compare_files, diff_text_files
from ..modules.directory_scanner import DirectoryScanner
from ..modules.integrity import verify_file_integrity
from ..modules.macho_analyzer import MachOAnalyzer
from ..modules.metadata_probe import MetadataProbe
from ..modules.package_analyzer import PackageAnalyzer
from ..schemas import CompareResult, ContainerRecord, DiffLine, DigestSet, FileRecord, PackageRecord
from ..utils.hashing import compute_digests
from ..utils.hexdump import hex_dump_file
from ..utils.logger import get_logger
from ..utils.magic_detector import MagicByteDetector
from .constants import DIGEST_CHUNK_SIZE

logger = get_logger(__name__)


class ArtifactInspector:
    """
    Stateless entry point for file introspection.

    Each method is independent; nothing is cached between calls. Collaborators
    are injected, normally by ``artinspect.factory.create_inspector``.
    """

    def __init__(
        self,
        *,
        detector: MagicByteDetector | None = None,
        probe: MetadataProbe | None = None,
        scanner: DirectoryScanner | None = None,
        macho_analyzer: MachOAnalyzer | None = None,
        package_analyzer: PackageAnalyzer | None = None,
        chunk_size: int = DIGEST_CHUNK_SIZE,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.detector = detector or MagicByteDetector()
        self.probe = probe or MetadataProbe(detector=self.detector)
        self.scanner = scanner or DirectoryScanner(probe=self.probe)
        self.macho_analyzer = macho_analyzer or MachOAnalyzer()
        self.package_analyzer = package_analyzer or PackageAnalyzer()
        self.chunk_size = chunk_size

    def detect_file_type(self, file_path: str | Path) -> FileKind:
        return self.detector.detect_file_type(file_path)

    def get_file_information(self, file_path: str | Path) -> FileRecord | None:
        return self.probe.probe(file_path)

    def compute_hashes(self, file_path: str | Path) -> DigestSet | None:
        return compute_digests(file_path, chunk_size=self.chunk_size)

    def scan_directory(self, root: str | Path, recursive: bool = False) -> list[FileRecord]:
        return self.scanner.scan(root, recursive=recursive)

    def analyze_container(self, file_path: str | Path) -> ContainerRecord:
        return self.macho_analyzer.analyze(file_path)

    def analyze_package(self, file_path: str | Path) -> PackageRecord:
        return self.package_analyzer.analyze(file_path)

    def compare_files(self, file_a: str | Path, file_b: str | Path) -> CompareResult:
        return compare_files(file_a, file_b)

    def diff_text_files(self, file_a: str | Path, file_b: str | Path) -> list[DiffLine] | None:
        return diff_text_files(file_a, file_b)

    def verify_file_integrity(self, file_path: str | Path, expected_sha256: str) -> bool:
        return verify_file_integrity(file_path, expected_sha256, chunk_size=self.chunk_size)

    def hex_dump(self, file_path: str | Path, limit: int | None = None) -> str | None:
        return hex_dump_file(file_path, limit=limit)
