#!/usr/bin/env python3
"""Archive unpackers for zip-based application packages."""

from __future__ import annotations

import zipfile
from pathlib import Path

from ..core.constants import DEFAULT_UNZIP_TOOL
from ..error_handling.errors import (
    CapabilityUnavailableError,
    ExtractionError,
    ToolExecutionError,
)
from ..interfaces.tools import ProcessRunner
from ..utils.logger import get_logger

logger = get_logger(__name__)


class UnzipUnpacker:
    """Run ``unzip -q <archive> -d <destination>``."""

    def __init__(self, runner: ProcessRunner, tool: str = DEFAULT_UNZIP_TOOL) -> None:
        self.runner = runner
        self.tool = tool

    @property
    def available(self) -> bool:
        return True

    def unpack(self, archive: str | Path, destination: str | Path) -> None:
        try:
            result = self.runner.run(self.tool, ["-q", str(archive), "-d", str(destination)])
        except ToolExecutionError as e:
            raise ExtractionError(f"unzip failed: {e}", path=archive) from e
        if result.exit_code != 0:
            raise ExtractionError(f"unzip exited with status {result.exit_code}", path=archive)


class ZipfileUnpacker:
    """In-process extraction with the standard zipfile module."""

    @property
    def available(self) -> bool:
        return True

    def unpack(self, archive: str | Path, destination: str | Path) -> None:
        try:
            with zipfile.ZipFile(archive) as bundle:
                bundle.extractall(destination)
        except (zipfile.BadZipFile, OSError, ValueError) as e:
            raise ExtractionError(f"Could not extract {archive}: {e}", path=archive) from e


class NullUnpacker:
    @property
    def available(self) -> bool:
        return False

    def unpack(self, archive: str | Path, destination: str | Path) -> None:
        raise CapabilityUnavailableError("No unpacker available", path=archive)
