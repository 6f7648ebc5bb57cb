#!/usr/bin/env python3
"""Synchronous child-process runner for external tools."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence

from ..core.constants import SUBPROCESS_TIMEOUT_SECONDS
from ..error_handling.errors import ToolExecutionError
from ..interfaces.tools import ProcessResult
from ..utils.logger import get_logger

logger = get_logger(__name__)


def tool_available(command: str) -> bool:
    """A tool is usable when it resolves on PATH (or is an executable path)"""
    return bool(command) and shutil.which(command) is not None


class SubprocessRunner:
    """Run tools with captured text output and a hard timeout."""

    def __init__(self, timeout: int = SUBPROCESS_TIMEOUT_SECONDS) -> None:
        if timeout < 1:
            raise ValueError("timeout must be at least 1 second")
        self.timeout = timeout

    def run(self, command: str, args: Sequence[str]) -> ProcessResult:
        argv = [command, *(str(arg) for arg in args)]
        logger.debug(f"Running {' '.join(argv)}")
        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ToolExecutionError(f"{command} timed out after {self.timeout}s") from e
        except (OSError, subprocess.SubprocessError) as e:
            raise ToolExecutionError(f"{command} could not be launched: {e}") from e

        if result.returncode != 0 and result.stderr:
            logger.debug(f"{command} exited with {result.returncode}: {result.stderr.strip()}")
        return ProcessResult(exit_code=result.returncode, stdout=result.stdout or "")
