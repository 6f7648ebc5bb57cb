#!/usr/bin/env python3
"""Code signature checkers."""

from __future__ import annotations

from pathlib import Path

from ..core.constants import DEFAULT_CODESIGN_TOOL
from ..error_handling.errors import ToolExecutionError
from ..interfaces.tools import ProcessRunner
from ..utils.logger import get_logger

logger = get_logger(__name__)


class CodesignSignatureChecker:
    """Delegate to ``codesign -v``; exit status 0 means signed."""

    def __init__(self, runner: ProcessRunner, tool: str = DEFAULT_CODESIGN_TOOL) -> None:
        self.runner = runner
        self.tool = tool

    def is_signed(self, path: str | Path) -> bool:
        try:
            result = self.runner.run(self.tool, ["-v", str(path)])
        except ToolExecutionError as e:
            logger.warning(f"Signature check failed for {path}: {e}")
            return False
        return result.exit_code == 0


class NullSignatureChecker:
    """Used when no signature tool exists on the host."""

    def is_signed(self, path: str | Path) -> bool:
        return False
