#!/usr/bin/env python3
"""Mach-O container analysis."""

from pathlib import Path

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..adapters.structure_dumper import NullStructureDumper
from ..core.constants import FAT_HEADER_SIZE
from ..error_handling import fallback_policy, handle_errors
from ..interfaces.tools import StructureDumper
from ..schemas import ContainerRecord
from ..utils.logger import get_logger
from .macho_domain import (
    count_load_commands,
    has_encryption,
    is_arm64e,
    is_position_independent,
    parse_header,
)

logger = get_logger(__name__)


class MachOAnalyzer:
    """Header decoding plus structure facts from an external dumper"""

    def __init__(
        self,
        dumper: StructureDumper | None = None,
        file_system: FileSystemAdapter | None = None,
    ) -> None:
        self.dumper = dumper or NullStructureDumper()
        self.file_system = file_system or default_file_system

    def analyze(self, file_path: str | Path) -> ContainerRecord:
        """
        Analyze a Mach-O or universal container.

        Args:
            file_path: Path to the container

        Returns:
            ContainerRecord; ContainerRecord.invalid() for anything that is
            not a readable Mach-O
        """
        if not str(file_path):
            raise ValueError("file_path must not be empty")
        return self._analyze(file_path)

    @handle_errors(fallback_policy(ContainerRecord.invalid()))
    def _analyze(self, file_path: str | Path) -> ContainerRecord:
        if not self.file_system.is_regular_file(file_path):
            logger.debug(f"{file_path} is not a regular file")
            return ContainerRecord.invalid()
        header = self.file_system.read_bytes(file_path, size=FAT_HEADER_SIZE)
        info = parse_header(header)
        if info is None:
            logger.debug(f"{file_path} is not a Mach-O container")
            return ContainerRecord.invalid()

        encrypted = False
        pie = False
        arm64e = False
        load_commands = 0

        if self.dumper.available:
            load_text = self.dumper.load_commands(file_path)
            encrypted = has_encryption(load_text)
            load_commands = count_load_commands(load_text)
            pie = is_position_independent(self.dumper.header_flags(file_path))
            if "arm64" in info.label:
                arm64e = is_arm64e(info.label, self.dumper.describe(file_path))

        return ContainerRecord(
            is_valid=True,
            is_64bit=info.is_64bit,
            is_arm64e=arm64e,
            architecture_count=info.architecture_count,
            architecture_summary=info.label,
            has_encryption=encrypted,
            is_position_independent=pie,
            load_command_count=load_commands,
        )
