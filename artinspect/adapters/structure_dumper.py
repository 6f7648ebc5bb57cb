#!/usr/bin/env python3
"""Mach-O structure dumpers backed by otool and file."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..core.constants import DEFAULT_FILE_TOOL, DEFAULT_OTOOL_TOOL
from ..error_handling.errors import ToolExecutionError
from ..interfaces.tools import ProcessRunner
from ..utils.logger import get_logger

logger = get_logger(__name__)


class OtoolStructureDumper:
    """
    Text views of a container.

    load_commands -> ``otool -l``, header_flags -> ``otool -hv``,
    describe -> ``file``. A tool that fails to run yields empty text.
    """

    def __init__(
        self,
        runner: ProcessRunner,
        otool: str = DEFAULT_OTOOL_TOOL,
        file_tool: str = DEFAULT_FILE_TOOL,
    ) -> None:
        self.runner = runner
        self.otool = otool
        self.file_tool = file_tool

    @property
    def available(self) -> bool:
        return True

    def load_commands(self, path: str | Path) -> str:
        return self._capture(self.otool, ["-l", str(path)])

    def header_flags(self, path: str | Path) -> str:
        return self._capture(self.otool, ["-hv", str(path)])

    def describe(self, path: str | Path) -> str:
        return self._capture(self.file_tool, [str(path)])

    def _capture(self, command: str, args: Sequence[str]) -> str:
        try:
            return self.runner.run(command, args).stdout
        except ToolExecutionError as e:
            logger.warning(f"{command} failed: {e}")
            return ""


class NullStructureDumper:
    """Stand-in when otool is not installed."""

    @property
    def available(self) -> bool:
        return False

    def load_commands(self, path: str | Path) -> str:
        return ""

    def header_flags(self, path: str | Path) -> str:
        return ""

    def describe(self, path: str | Path) -> str:
        return ""
